"""Catalog Cache Controller.

리소스 타입별 singleflight 로드 제어.
캐시 확인 → 로드 중이면 합류 → 미로드면 단독 fetcher로 로드 → 실패 시 고정 지연 재시도.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from wizarding.domain.enums import LoadState

if TYPE_CHECKING:
    from wizarding.application.loaders.registry import CatalogLoaderRegistry
    from wizarding.application.ports import CatalogLoaderPort, CatalogStorePort

logger = logging.getLogger(__name__)


class CatalogCacheController:
    """카탈로그 캐시 컨트롤러.

    상태 전이 (리소스 타입별):
        NOT_LOADED --요청--> LOADING --성공--> LOADED (종료 상태)
        LOADING --실패--> NOT_LOADED (+ retry_delay 후 재시도 1회 예약)

    보장:
    1. 리소스 타입당 동시에 실행되는 upstream 로드는 최대 1개
    2. 로드 중 요청은 진행 중인 로드 결과를 기다림 (새 로드를 만들지 않음)
    3. 로드 실패는 예외로 전파되지 않음 (호출자는 is_loaded로 재확인)
    4. 재시도 횟수 제한 없음, 지연은 고정
    """

    def __init__(
        self,
        store: CatalogStorePort,
        registry: CatalogLoaderRegistry,
        retry_delay: float = 8.0,
    ) -> None:
        """초기화.

        Args:
            store: 카탈로그 저장소
            registry: 리소스 타입별 로더
            retry_delay: 실패 후 재시도 지연 (초)
        """
        self._store = store
        self._registry = registry
        self._retry_delay = retry_delay
        self._load_tasks: dict[str, asyncio.Task[None]] = {}
        self._retry_tasks: dict[str, asyncio.Task[None]] = {}

    @property
    def resource_types(self) -> tuple[str, ...]:
        return self._registry.resource_types

    def is_loaded(self, resource_type: str) -> bool:
        """로드 완료 여부."""
        return self._store.state(resource_type) is LoadState.LOADED

    async def ensure_loaded(self, resource_type: str) -> None:
        """리소스가 로드되었거나 이번 로드 시도가 끝날 때까지 대기.

        실패한 로드도 대기자를 해제하므로 반환 후 is_loaded로 재확인해야 합니다.

        Args:
            resource_type: 리소스 타입

        Raises:
            UnknownResourceTypeError: 등록되지 않은 리소스 타입
        """
        state = self._store.state(resource_type)
        if state is LoadState.LOADED:
            return

        if state is LoadState.NOT_LOADED:
            # 상태 확인과 전이 사이에 await 없음 → 이벤트 루프 상에서 단독 fetcher
            self._start_load(resource_type)

        await self._store.wait_for_outcome(resource_type)

    async def ensure_loaded_within(self, resource_type: str, timeout: float) -> bool:
        """제한 시간 내에서만 로드를 기다림.

        시간이 초과되어도 로드는 계속 진행되며, 호출자는 현재 캐시를 그대로 사용합니다.

        Args:
            resource_type: 리소스 타입
            timeout: 최대 대기 시간 (초)

        Returns:
            반환 시점의 로드 완료 여부
        """
        try:
            await asyncio.wait_for(self.ensure_loaded(resource_type), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Catalog load still in progress, serving current snapshot",
                extra={"resource": resource_type, "wait_ceiling": timeout},
            )
        return self.is_loaded(resource_type)

    def _start_load(self, resource_type: str) -> None:
        """단독 fetcher로 로드 시작 (컨트롤러 소유 태스크)."""
        loader = self._registry.get(resource_type)
        self._store.begin_load(resource_type)
        logger.info("Loading catalog resource", extra={"resource": resource_type})

        task = asyncio.create_task(
            self._run_load(resource_type, loader),
            name=f"catalog-load-{resource_type}",
        )
        self._load_tasks[resource_type] = task
        task.add_done_callback(lambda t: self._forget_load(resource_type, t))

    def _forget_load(self, resource_type: str, task: asyncio.Task[None]) -> None:
        if self._load_tasks.get(resource_type) is task:
            del self._load_tasks[resource_type]

    async def _run_load(self, resource_type: str, loader: CatalogLoaderPort) -> None:
        """로더 실행 후 결과를 저장소에 반영."""
        try:
            records = await loader.load()
        except asyncio.CancelledError:
            self._store.fail_load(resource_type)
            raise
        except Exception as e:
            self._store.fail_load(resource_type)
            logger.error(
                "Catalog load failed",
                extra={
                    "resource": resource_type,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "retry_in": self._retry_delay,
                },
            )
            self._schedule_retry(resource_type)
            return

        self._store.complete_load(resource_type, records)
        logger.info(
            "Catalog resource loaded",
            extra={"resource": resource_type, "count": len(records)},
        )

    def _schedule_retry(self, resource_type: str) -> None:
        """재시도 1회 예약 (이미 예약되어 있으면 무시)."""
        pending = self._retry_tasks.get(resource_type)
        if pending is not None and not pending.done():
            return

        self._retry_tasks[resource_type] = asyncio.create_task(
            self._retry_later(resource_type),
            name=f"catalog-retry-{resource_type}",
        )

    async def _retry_later(self, resource_type: str) -> None:
        await asyncio.sleep(self._retry_delay)
        self._retry_tasks.pop(resource_type, None)
        logger.info("Retrying catalog load", extra={"resource": resource_type})
        await self.ensure_loaded(resource_type)

    async def shutdown(self) -> None:
        """예약된 재시도와 진행 중인 로드 취소."""
        tasks = [*self._retry_tasks.values(), *self._load_tasks.values()]
        self._retry_tasks.clear()

        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

        logger.info("Catalog cache controller stopped", extra={"cancelled": len(tasks)})
