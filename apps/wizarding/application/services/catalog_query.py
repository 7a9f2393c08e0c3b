"""Catalog Query Service.

캐시된 컬렉션에 대한 필터링/페이지네이션 서비스.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

from wizarding.application.dto import PageResult

if TYPE_CHECKING:
    from wizarding.domain.entities import CatalogRecord


class CatalogQueryService:
    """카탈로그 조회 서비스.

    정책:
    1. search: 표시 이름 부분 일치 (대소문자 무시)
    2. filter_value: 카테고리 필드 정확 일치 (대소문자 무시)
    3. 두 조건은 AND, 생략 시 전체 통과
    4. 입력 시퀀스는 변경하지 않음 (얕은 복사본에서 처리)
    """

    @staticmethod
    def filter_records(
        records: Sequence[CatalogRecord],
        search: str | None = None,
        filter_value: str | None = None,
    ) -> list[CatalogRecord]:
        """검색어/카테고리 필터 적용.

        Args:
            records: 캐시 스냅샷
            search: 부분 일치 검색어
            filter_value: 카테고리 정확 일치 값

        Returns:
            필터링된 레코드 목록 (원래 순서 유지)
        """
        items = list(records)

        if search:
            term = search.casefold()
            items = [r for r in items if r.display_name and term in r.display_name.casefold()]

        if filter_value:
            expected = filter_value.casefold()
            items = [
                r for r in items if r.filter_value and r.filter_value.casefold() == expected
            ]

        return items

    @staticmethod
    def paginate(
        records: Sequence[CatalogRecord],
        page: int,
        limit: int,
    ) -> PageResult:
        """1-based 페이지네이션.

        page/limit을 검증하지 않습니다. limit <= 0이면 빈 페이지와 total_pages=0을 반환합니다.

        Args:
            records: 필터링된 레코드
            page: 페이지 번호 (1-based)
            limit: 페이지 크기

        Returns:
            페이지 결과
        """
        total = len(records)
        offset = (page - 1) * limit
        results = list(records[offset : offset + limit]) if 0 <= offset < total else []
        total_pages = math.ceil(total / limit) if limit > 0 else 0

        return PageResult(
            count=total,
            page=page,
            limit=limit,
            total_pages=total_pages,
            has_more=offset + limit < total,
            results=results,
        )

    @staticmethod
    def filter_and_paginate(
        records: Sequence[CatalogRecord],
        search: str | None = None,
        filter_value: str | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> PageResult:
        """필터 후 페이지네이션."""
        filtered = CatalogQueryService.filter_records(records, search, filter_value)
        return CatalogQueryService.paginate(filtered, page, limit)

    @staticmethod
    def find_by_id(
        records: Sequence[CatalogRecord],
        record_id: str,
    ) -> CatalogRecord | None:
        """ID로 레코드 조회 (없으면 None)."""
        return next((r for r in records if r.id == record_id), None)
