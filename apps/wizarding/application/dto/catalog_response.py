"""Catalog Response DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wizarding.domain.entities import CatalogRecord


@dataclass(frozen=True)
class PageResult:
    """페이지네이션 결과.

    Attributes:
        count: 필터 적용 후 전체 개수
        page: 요청 페이지 (1-based)
        limit: 페이지 크기
        total_pages: 전체 페이지 수
        has_more: 다음 페이지 존재 여부
        results: 현재 페이지 레코드
    """

    count: int
    page: int
    limit: int
    total_pages: int
    has_more: bool
    results: list[CatalogRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """응답 페이로드 변환 (camelCase)."""
        return {
            "count": self.count,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
            "hasMore": self.has_more,
            "results": [record.to_dict() for record in self.results],
        }


@dataclass(frozen=True)
class ResourceStatus:
    """리소스 캐시 상태."""

    loaded: bool
    count: int


@dataclass(frozen=True)
class CollectionSnapshot:
    """리소스 전체 컬렉션."""

    count: int
    results: list[CatalogRecord]
