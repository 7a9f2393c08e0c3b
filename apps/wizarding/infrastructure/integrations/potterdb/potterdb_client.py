"""PotterDB API Client.

PotterDB JSON:API 클라이언트 (캐릭터, 주문, 영화).

API 문서: https://docs.potterdb.com/apis/rest

페이지네이션:
- page[size]: 페이지당 레코드 수 (최대 100)
- page[number]: 1-based 페이지 번호
- meta.pagination.next: 다음 페이지 번호 (마지막 페이지면 없음)
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from wizarding.application.exceptions import UpstreamUnavailableError
from wizarding.application.ports import PotterDbPort, RawRecord

logger = logging.getLogger(__name__)

POTTERDB_API_URL = "https://api.potterdb.com/v1"
SOURCE_NAME = "potterdb"


class PotterDbClient(PotterDbPort):
    """PotterDB 클라이언트.

    레코드 수가 가장 많고 이미지 커버리지가 좋은 보강 소스입니다.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = POTTERDB_API_URL,
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

    async def fetch_pages(
        self,
        resource: str,
        page_size: int,
        max_pages: int,
        timeout: float | None = None,
        keep_partial: bool = False,
    ) -> list[list[RawRecord]]:
        pages: list[list[RawRecord]] = []
        page_number = 1
        has_next = True

        while has_next and page_number <= max_pages:
            try:
                body = await self._get(
                    resource,
                    params={"page[size]": page_size, "page[number]": page_number},
                    timeout=timeout,
                )
            except UpstreamUnavailableError as e:
                if not keep_partial:
                    raise
                logger.warning(
                    "PotterDB page failed, keeping pages fetched so far",
                    extra={
                        "resource": resource,
                        "failed_page": page_number,
                        "pages_kept": len(pages),
                        "error": e.message,
                    },
                )
                return pages

            pages.append(self._records(body))

            pagination = (body.get("meta") or {}).get("pagination") or {}
            has_next = bool(pagination.get("next"))
            page_number += 1

        if has_next:
            logger.warning(
                "PotterDB page ceiling reached",
                extra={"resource": resource, "max_pages": max_pages},
            )

        logger.info(
            "PotterDB collection fetched",
            extra={
                "resource": resource,
                "pages": len(pages),
                "fetched": sum(len(page) for page in pages),
            },
        )
        return pages

    async def fetch_page(
        self,
        resource: str,
        page_size: int,
        timeout: float | None = None,
    ) -> list[RawRecord]:
        body = await self._get(resource, params={"page[size]": page_size}, timeout=timeout)
        return self._records(body)

    async def _get(
        self,
        resource: str,
        params: dict[str, Any],
        timeout: float | None,
    ) -> dict[str, Any]:
        """GET 요청 후 JSON 본문 반환 (실패 시 UpstreamUnavailableError)."""
        url = f"{self._base_url}/{resource}"
        try:
            response = await self._client.get(
                url,
                params=params,
                timeout=timeout if timeout is not None else self._timeout,
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "PotterDB API HTTP error",
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

        if not isinstance(body, dict):
            raise UpstreamUnavailableError(SOURCE_NAME, f"unexpected body for {resource}")
        return body

    @staticmethod
    def _records(body: dict[str, Any]) -> list[RawRecord]:
        data = body.get("data") or []
        return [item for item in data if isinstance(item, dict)]
