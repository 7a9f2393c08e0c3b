"""GetUniverseQuery.

전체 리소스 컬렉션을 한 번에 조회하는 Query입니다.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from wizarding.application.dto import CollectionSnapshot

if TYPE_CHECKING:
    from wizarding.application.ports import CatalogStorePort
    from wizarding.application.services.cache_controller import CatalogCacheController


class GetUniverseQuery:
    """전체 카탈로그 조회 Query.

    미로드 리소스를 병렬로 로드한 뒤 모든 컬렉션을 반환합니다.
    """

    def __init__(self, controller: CatalogCacheController, store: CatalogStorePort) -> None:
        self._controller = controller
        self._store = store

    async def execute(self) -> dict[str, CollectionSnapshot]:
        pending = [
            resource_type
            for resource_type in self._store.resource_types
            if not self._controller.is_loaded(resource_type)
        ]
        if pending:
            await asyncio.gather(*(self._controller.ensure_loaded(r) for r in pending))

        universe: dict[str, CollectionSnapshot] = {}
        for resource_type in self._store.resource_types:
            records = list(self._store.snapshot(resource_type))
            universe[resource_type] = CollectionSnapshot(count=len(records), results=records)
        return universe
