"""Catalog Controller.

카탈로그 API 엔드포인트 핸들러.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query

from wizarding.application.dto import CatalogQueryRequest
from wizarding.application.exceptions import UnknownResourceTypeError
from wizarding.application.queries import GetRecordQuery, QueryCatalogQuery
from wizarding.domain.constants import RESOURCE_TYPES
from wizarding.presentation.http.schemas import PageResponseSchema
from wizarding.setup.dependencies import get_query_catalog_query, get_record_query

router = APIRouter(tags=["catalog"])


def _check_resource(resource: str) -> str:
    if resource not in RESOURCE_TYPES:
        raise UnknownResourceTypeError(resource)
    return resource


async def _list(
    query: QueryCatalogQuery,
    resource: str,
    search: str | None,
    filter_value: str | None,
    page: int,
    limit: int,
) -> PageResponseSchema:
    result = await query.execute(
        CatalogQueryRequest(
            resource_type=resource,
            search=search,
            filter_value=filter_value,
            page=page,
            limit=limit,
        )
    )
    payload = result.to_dict()
    return PageResponseSchema(
        count=payload["count"],
        page=payload["page"],
        limit=payload["limit"],
        total_pages=payload["totalPages"],
        has_more=payload["hasMore"],
        results=payload["results"],
    )


@router.get(
    "/characters/house/{house}",
    response_model=PageResponseSchema,
    summary="기숙사별 캐릭터 조회",
)
async def list_characters_by_house(
    house: str,
    query: Annotated[QueryCatalogQuery, Depends(get_query_catalog_query)],
    page: Annotated[int, Query(ge=1, description="페이지 번호")] = 1,
    limit: Annotated[int, Query(ge=1, description="페이지 크기")] = 20,
) -> PageResponseSchema:
    """기숙사 이름(대소문자 무시)으로 캐릭터를 필터링합니다."""
    return await _list(query, "characters", None, house, page, limit)


@router.get(
    "/{resource}",
    response_model=PageResponseSchema,
    summary="카탈로그 목록 조회",
    description="리소스 타입별 목록을 검색/필터/페이지네이션하여 조회합니다.",
)
async def list_resource(
    resource: str,
    query: Annotated[QueryCatalogQuery, Depends(get_query_catalog_query)],
    search: Annotated[str | None, Query(description="이름/제목 부분 일치 검색어")] = None,
    page: Annotated[int, Query(ge=1, description="페이지 번호")] = 1,
    limit: Annotated[int, Query(ge=1, description="페이지 크기")] = 20,
    house: Annotated[str | None, Query(description="기숙사 필터 (category 별칭)")] = None,
    category: Annotated[
        str | None,
        Query(description="카테고리 정확 일치 필터 (characters: 기숙사, spells: 분류, potions: 난이도)"),
    ] = None,
) -> PageResponseSchema:
    """카탈로그 목록 조회.

    콜드 리소스는 최대 대기 시간까지만 로드를 기다리며,
    초과 시 현재 캐시된 데이터(비어 있을 수 있음)를 반환합니다.

    - **search**: 이름/제목 부분 일치 (대소문자 무시)
    - **house** / **category**: 카테고리 필드 정확 일치 (대소문자 무시)
    - **page**, **limit**: 1-based 페이지네이션
    """
    _check_resource(resource)
    return await _list(query, resource, search, house or category, page, limit)


@router.get(
    "/{resource}/{record_id}",
    summary="카탈로그 단건 조회",
)
async def get_record(
    resource: str,
    record_id: str,
    query: Annotated[GetRecordQuery, Depends(get_record_query)],
) -> dict[str, Any]:
    """ID로 레코드를 조회합니다."""
    _check_resource(resource)
    record = await query.execute(resource, record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Not found")
    return record.to_dict()
