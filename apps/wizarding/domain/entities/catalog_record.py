"""Catalog Record Base."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CatalogRecord(ABC):
    """카탈로그 엔티티 공통 계약.

    모든 리소스 타입의 레코드는 다음을 보장합니다:
    - id: 리소스 타입 내에서 유일한 문자열
    - image: 비어 있지 않은 URL
    - display_name: 검색 대상 필드 (name 또는 title)
    - filter_value: 정확 일치 필터 대상 필드 (없으면 None)
    """

    id: str
    image: str

    @property
    @abstractmethod
    def display_name(self) -> str:
        """검색 대상 표시 이름."""

    @property
    def filter_value(self) -> str | None:
        """카테고리 필터 대상 값 (기본: 필터 불가)."""
        return None

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """응답 페이로드 변환."""
