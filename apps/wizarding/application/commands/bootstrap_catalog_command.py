"""Bootstrap Catalog Command.

프로세스 시작 시 전체 리소스 프리로드 UseCase.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wizarding.application.ports import CatalogStorePort
    from wizarding.application.services.cache_controller import CatalogCacheController

logger = logging.getLogger(__name__)


class BootstrapCatalogCommand:
    """카탈로그 프리로드 Command.

    플로우:
    1. 모든 리소스 타입에 대해 ensure_loaded 병렬 실행
    2. 리소스별 건수/로드 여부 요약 로그

    개별 리소스 실패는 컨트롤러가 재시도하므로 여기서는 기록만 합니다.
    """

    def __init__(self, controller: CatalogCacheController, store: CatalogStorePort) -> None:
        self._controller = controller
        self._store = store

    async def execute(self) -> dict[str, int]:
        """Command 실행.

        Returns:
            리소스 타입 → 캐시된 레코드 수
        """
        resource_types = self._controller.resource_types
        logger.info("Preloading catalog", extra={"resources": list(resource_types)})

        await asyncio.gather(*(self._controller.ensure_loaded(r) for r in resource_types))

        counts = {r: len(self._store.snapshot(r)) for r in resource_types}
        pending = [r for r in resource_types if not self._controller.is_loaded(r)]

        logger.info(
            "Catalog ready",
            extra={
                "counts": counts,
                "pending": pending,
                "total": sum(counts.values()),
            },
        )
        return counts
