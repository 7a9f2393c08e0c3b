"""Catalog Request DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogQueryRequest:
    """카탈로그 목록 요청 DTO.

    page/limit 값 검증은 호출자(HTTP 레이어) 책임입니다.
    """

    resource_type: str
    search: str | None = None
    filter_value: str | None = None  # characters: house, spells: category, ...
    page: int = 1
    limit: int = 20
