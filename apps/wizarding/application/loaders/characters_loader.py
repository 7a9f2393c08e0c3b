"""Characters Loader.

캐릭터 로더: PotterDB(보강) + hp-api(구조) 병합.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wizarding.application.exceptions import LoadFailureError, UpstreamUnavailableError
from wizarding.application.ports import CatalogLoaderPort
from wizarding.application.services.character_merge import CharacterMergeService

if TYPE_CHECKING:
    from wizarding.application.ports import HpApiPort, PotterDbPort
    from wizarding.application.services.character_merge import EnrichmentAttributes
    from wizarding.domain.entities import Character

logger = logging.getLogger(__name__)


class CharactersLoader(CatalogLoaderPort):
    """캐릭터 로더.

    플로우:
    1. PotterDB 전체 페이지 조회 → 정규화 이름 맵 (실패 시 빈 맵으로 진행)
    2. hp-api 전체 조회 (실패 시 로드 실패)
    3. CharacterMergeService로 병합
    """

    def __init__(
        self,
        hp_api: HpApiPort,
        potterdb: PotterDbPort,
        timeout: float = 20.0,
        page_size: int = 100,
        max_pages: int = 60,
    ):
        """초기화.

        Args:
            hp_api: 구조 소스
            potterdb: 보강 소스
            timeout: 요청당 타임아웃 (초)
            page_size: PotterDB 페이지 크기
            max_pages: PotterDB 최대 페이지 수
        """
        self._hp_api = hp_api
        self._potterdb = potterdb
        self._timeout = timeout
        self._page_size = page_size
        self._max_pages = max_pages

    @property
    def resource_type(self) -> str:
        return "characters"

    async def load(self) -> list[Character]:
        enrichment = await self._load_enrichment()

        # 구조 소스 실패 → 로드 실패 (컨트롤러가 재시도)
        try:
            primary = await self._hp_api.fetch_characters(timeout=self._timeout)
        except UpstreamUnavailableError as e:
            raise LoadFailureError(self.resource_type, e.message) from e

        characters = CharacterMergeService.merge(primary, enrichment)
        logger.info(
            "Characters merged",
            extra={
                "total": len(characters),
                "primary": len(primary),
                "extras": len(characters) - len(primary),
            },
        )
        return characters

    async def _load_enrichment(self) -> dict[str, EnrichmentAttributes]:
        """보강 맵 조회 (중간 페이지 실패 시 그때까지의 페이지 사용, 전체 실패 시 빈 맵)."""
        try:
            pages = await self._potterdb.fetch_pages(
                "characters",
                page_size=self._page_size,
                max_pages=self._max_pages,
                timeout=self._timeout,
                keep_partial=True,
            )
        except UpstreamUnavailableError as e:
            logger.warning(
                "PotterDB characters unavailable, merging without enrichment",
                extra={"error": e.message},
            )
            return {}

        enrichment = CharacterMergeService.build_enrichment_map(
            record for page in pages for record in page
        )
        logger.info("PotterDB enrichment ready", extra={"entries": len(enrichment)})
        return enrichment
