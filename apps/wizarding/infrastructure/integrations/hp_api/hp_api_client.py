"""HP-API Client.

hp-api 클라이언트 (캐릭터, 주문).

API 문서: https://hp-api.onrender.com

특징:
- 페이지네이션 없음 (전체 배열 반환)
- 캐릭터 스키마가 가장 풍부함 (지팡이, 패트로누스, 기숙사)
- 무료 호스팅이라 콜드 스타트 시 응답이 느림
"""

from __future__ import annotations

import logging

import httpx

from wizarding.application.exceptions import UpstreamUnavailableError
from wizarding.application.ports import HpApiPort, RawRecord

logger = logging.getLogger(__name__)

HP_API_URL = "https://hp-api.onrender.com/api"
SOURCE_NAME = "hp-api"


class HpApiClient(HpApiPort):
    """hp-api 클라이언트."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = HP_API_URL,
        timeout: float = 15.0,
    ):
        """초기화.

        Args:
            http_client: HTTP 클라이언트 (외부 주입)
            base_url: API 기본 URL
            timeout: 기본 요청 타임아웃 (초)
        """
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def fetch_characters(self, timeout: float | None = None) -> list[RawRecord]:
        return await self._get_list("characters", timeout)

    async def fetch_spells(self, timeout: float | None = None) -> list[RawRecord]:
        return await self._get_list("spells", timeout)

    async def _get_list(self, resource: str, timeout: float | None) -> list[RawRecord]:
        """배열 응답 조회.

        Raises:
            UpstreamUnavailableError: 네트워크/타임아웃/non-2xx/잘못된 응답
        """
        try:
            response = await self._client.get(
                f"{self._base_url}/{resource}",
                timeout=timeout if timeout is not None else self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "hp-api HTTP error",
                extra={"status": e.response.status_code, "resource": resource},
            )
            raise UpstreamUnavailableError(
                SOURCE_NAME, f"HTTP {e.response.status_code} for {resource}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(
                SOURCE_NAME, f"{type(e).__name__} for {resource}"
            ) from e
        except ValueError as e:
            raise UpstreamUnavailableError(SOURCE_NAME, f"invalid JSON for {resource}") from e

        if not isinstance(data, list):
            raise UpstreamUnavailableError(SOURCE_NAME, f"expected array for {resource}")

        records = [item for item in data if isinstance(item, dict)]
        logger.info(
            "hp-api collection fetched",
            extra={"resource": resource, "fetched": len(records)},
        )
        return records
