"""PotterAPI Client.

potterapi 클라이언트 (물약, 도서, 기숙사).

API 문서: https://github.com/fedeperin/potterapi

특징:
- 언어별 경로 (/en, /es, /fr, ...)
- 페이지네이션 없음 (전체 배열 반환)
"""

from __future__ import annotations

import logging

import httpx

from wizarding.application.exceptions import UpstreamUnavailableError
from wizarding.application.ports import PotterApiPort, RawRecord

logger = logging.getLogger(__name__)

POTTERAPI_URL = "https://potterapi-fedeperin.vercel.app"
SOURCE_NAME = "potterapi"


class PotterApiClient(PotterApiPort):
    """potterapi 클라이언트."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = POTTERAPI_URL,
        language: str = "en",
        timeout: float = 15.0,
    ):
        """초기화.

        Args:
            http_client: HTTP 클라이언트 (외부 주입)
            base_url: API 기본 URL
            language: 응답 언어 코드
            timeout: 기본 요청 타임아웃 (초)
        """
        self._client = http_client
        self._base_url = f"{base_url.rstrip('/')}/{language}"
        self._timeout = timeout

    async def fetch_potions(self, timeout: float | None = None) -> list[RawRecord]:
        return await self._get_list("potions", timeout)

    async def fetch_books(self, timeout: float | None = None) -> list[RawRecord]:
        return await self._get_list("books", timeout)

    async def fetch_houses(self, timeout: float | None = None) -> list[RawRecord]:
        return await self._get_list("houses", timeout)

    async def _get_list(self, resource: str, timeout: float | None) -> list[RawRecord]:
        try:
            response = await self._client.get(
                f"{self._base_url}/{resource}",
                timeout=timeout if timeout is not None else self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "potterapi HTTP error",
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

        return [item for item in data if isinstance(item, dict)]
