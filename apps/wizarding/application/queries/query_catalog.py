"""QueryCatalogQuery.

카탈로그 목록 조회 Query입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wizarding.application.services.catalog_query import CatalogQueryService

if TYPE_CHECKING:
    from wizarding.application.dto import CatalogQueryRequest, PageResult
    from wizarding.application.ports import CatalogStorePort
    from wizarding.application.services.cache_controller import CatalogCacheController

logger = logging.getLogger(__name__)


class QueryCatalogQuery:
    """카탈로그 목록 조회 Query.

    플로우:
    1. 로드 보장 (최대 wait_ceiling 초 대기, 초과 시 현재 캐시 사용)
    2. 현재 스냅샷에 필터/페이지네이션 적용
    """

    def __init__(
        self,
        controller: CatalogCacheController,
        store: CatalogStorePort,
        wait_ceiling: float = 12.0,
    ) -> None:
        """Initialize.

        Args:
            controller: 캐시 컨트롤러
            store: 카탈로그 저장소
            wait_ceiling: 콜드 로드 최대 대기 시간 (초)
        """
        self._controller = controller
        self._store = store
        self._wait_ceiling = wait_ceiling

    async def execute(self, request: CatalogQueryRequest) -> PageResult:
        """목록을 조회합니다.

        Args:
            request: 목록 요청

        Returns:
            페이지 결과 (미로드 상태면 빈 결과일 수 있음)
        """
        if not self._controller.is_loaded(request.resource_type):
            await self._controller.ensure_loaded_within(
                request.resource_type, self._wait_ceiling
            )

        records = self._store.snapshot(request.resource_type)
        return CatalogQueryService.filter_and_paginate(
            records,
            search=request.search,
            filter_value=request.filter_value,
            page=request.page,
            limit=request.limit,
        )
