"""In-Memory Catalog Store Implementation.

프로세스 로컬 인메모리 카탈로그 저장소입니다.
재시작 시 유지되지 않으며 엔트리는 프로세스 수명 동안 제거되지 않습니다.

Architecture:
    - 리소스 타입당 CacheEntry 1개 (최초 접근 시 생성)
    - 레코드는 불변 튜플로 통째 교체 → 읽기는 락 없이 항상 완전한 스냅샷
    - 로드 시도마다 asyncio.Event 1개, fetcher가 정확히 한 번 set
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

from wizarding.application.exceptions import UnknownResourceTypeError
from wizarding.application.ports import CatalogStorePort
from wizarding.domain.enums import LoadState

if TYPE_CHECKING:
    from wizarding.domain.entities import CatalogRecord

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """리소스 타입별 캐시 엔트리."""

    items: tuple[CatalogRecord, ...] = ()
    state: LoadState = LoadState.NOT_LOADED
    outcome: asyncio.Event | None = None
    attempts: int = 0


class InMemoryCatalogStore(CatalogStorePort):
    """인메모리 카탈로그 저장소.

    Usage:
        store = InMemoryCatalogStore(RESOURCE_TYPES)
        store.begin_load("spells")
        store.complete_load("spells", records)
        store.snapshot("spells")
    """

    def __init__(self, resource_types: Iterable[str]) -> None:
        """초기화.

        Args:
            resource_types: 관리할 리소스 타입 (고정 집합)
        """
        self._resource_types = tuple(resource_types)
        self._entries: dict[str, CacheEntry] = {}

    @property
    def resource_types(self) -> tuple[str, ...]:
        return self._resource_types

    def _entry(self, resource_type: str) -> CacheEntry:
        """엔트리 조회 (없으면 생성)."""
        entry = self._entries.get(resource_type)
        if entry is None:
            if resource_type not in self._resource_types:
                raise UnknownResourceTypeError(resource_type)
            entry = self._entries[resource_type] = CacheEntry()
        return entry

    def state(self, resource_type: str) -> LoadState:
        return self._entry(resource_type).state

    def snapshot(self, resource_type: str) -> tuple[CatalogRecord, ...]:
        return self._entry(resource_type).items

    def begin_load(self, resource_type: str) -> None:
        entry = self._entry(resource_type)
        if entry.state is not LoadState.NOT_LOADED:
            raise RuntimeError(f"Cannot begin load of '{resource_type}' in state {entry.state}")
        entry.state = LoadState.LOADING
        entry.outcome = asyncio.Event()
        entry.attempts += 1

    def complete_load(self, resource_type: str, records: Sequence[CatalogRecord]) -> None:
        entry = self._entry(resource_type)
        entry.items = tuple(records)
        entry.state = LoadState.LOADED
        self._release(entry)
        logger.debug(
            "Catalog snapshot replaced",
            extra={"resource": resource_type, "count": len(entry.items)},
        )

    def fail_load(self, resource_type: str) -> None:
        entry = self._entry(resource_type)
        entry.state = LoadState.NOT_LOADED
        self._release(entry)

    async def wait_for_outcome(self, resource_type: str) -> None:
        entry = self._entry(resource_type)
        if entry.state is not LoadState.LOADING or entry.outcome is None:
            return
        await entry.outcome.wait()

    def attempts(self, resource_type: str) -> int:
        """로드 시도 횟수 (관측용)."""
        return self._entry(resource_type).attempts

    @staticmethod
    def _release(entry: CacheEntry) -> None:
        if entry.outcome is not None:
            entry.outcome.set()
