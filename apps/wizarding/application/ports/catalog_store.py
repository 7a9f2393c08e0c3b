"""Catalog Store Port.

리소스 타입별 캐시 엔트리 저장소 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from wizarding.domain.entities import CatalogRecord
    from wizarding.domain.enums import LoadState


class CatalogStorePort(ABC):
    """카탈로그 저장소 포트.

    엔트리는 레코드 스냅샷(통째 교체), 로드 상태, 로드 시도별 완료 알림을 가집니다.
    상태 전이는 단일 fetcher(CatalogCacheController)만 수행합니다.
    """

    @property
    @abstractmethod
    def resource_types(self) -> tuple[str, ...]:
        """저장소가 관리하는 리소스 타입 (고정 집합)."""
        pass

    @abstractmethod
    def state(self, resource_type: str) -> LoadState:
        """현재 로드 상태."""
        pass

    @abstractmethod
    def snapshot(self, resource_type: str) -> tuple[CatalogRecord, ...]:
        """현재 레코드 스냅샷 (로드 전이면 빈 튜플)."""
        pass

    @abstractmethod
    def begin_load(self, resource_type: str) -> None:
        """NOT_LOADED → LOADING, 새 완료 알림 생성."""
        pass

    @abstractmethod
    def complete_load(self, resource_type: str, records: Sequence[CatalogRecord]) -> None:
        """LOADING → LOADED, 레코드 통째 교체 후 대기자 해제."""
        pass

    @abstractmethod
    def fail_load(self, resource_type: str) -> None:
        """LOADING → NOT_LOADED, 기존 레코드 유지 후 대기자 해제."""
        pass

    @abstractmethod
    async def wait_for_outcome(self, resource_type: str) -> None:
        """진행 중인 로드 시도의 결과(성공/실패)를 기다림."""
        pass
