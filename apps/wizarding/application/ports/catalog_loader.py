"""Catalog Loader Port.

리소스 타입별 로더 추상화 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wizarding.domain.entities import CatalogRecord


class CatalogLoaderPort(ABC):
    """카탈로그 로더 포트.

    하나의 리소스 타입을 외부 provider에서 읽어 완성된 레코드 목록으로 반환합니다.
    반환되는 모든 레코드는 필드가 기본값으로 채워져 있어야 합니다.
    """

    @property
    @abstractmethod
    def resource_type(self) -> str:
        """리소스 타입 (예: "characters", "spells")."""
        pass

    @abstractmethod
    async def load(self) -> list[CatalogRecord]:
        """전체 레코드 로드.

        Returns:
            레코드 목록 (순서 = 페이지네이션 순서)

        Raises:
            UpstreamUnavailableError: 주 provider 호출 실패
            LoadFailureError: provider 체인 소진
        """
        pass
