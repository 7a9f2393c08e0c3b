"""GetCacheStatusQuery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wizarding.application.dto import ResourceStatus
from wizarding.domain.enums import LoadState

if TYPE_CHECKING:
    from wizarding.application.ports import CatalogStorePort


class GetCacheStatusQuery:
    """리소스별 캐시 상태 조회 Query.

    "0건"과 "아직 미로드"를 구분하는 유일한 수단입니다. 로드를 유발하지 않습니다.
    """

    def __init__(self, store: CatalogStorePort) -> None:
        self._store = store

    def execute(self) -> dict[str, ResourceStatus]:
        return {
            resource_type: ResourceStatus(
                loaded=self._store.state(resource_type) is LoadState.LOADED,
                count=len(self._store.snapshot(resource_type)),
            )
            for resource_type in self._store.resource_types
        }
