"""GetRecordQuery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wizarding.application.services.catalog_query import CatalogQueryService

if TYPE_CHECKING:
    from wizarding.application.ports import CatalogStorePort
    from wizarding.application.services.cache_controller import CatalogCacheController
    from wizarding.domain.entities import CatalogRecord


class GetRecordQuery:
    """ID 기반 단건 조회 Query.

    로드가 끝날 때까지 기다린 뒤 조회하며, 없으면 None(NotFound)을 반환합니다.
    """

    def __init__(self, controller: CatalogCacheController, store: CatalogStorePort) -> None:
        self._controller = controller
        self._store = store

    async def execute(self, resource_type: str, record_id: str) -> CatalogRecord | None:
        await self._controller.ensure_loaded(resource_type)
        return CatalogQueryService.find_by_id(self._store.snapshot(resource_type), record_id)
