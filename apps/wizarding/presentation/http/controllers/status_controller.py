"""Status Controller.

캐시 상태 / 전체 카탈로그 엔드포인트.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from wizarding.application.queries import GetCacheStatusQuery, GetUniverseQuery
from wizarding.presentation.http.schemas import CollectionSchema, ResourceStatusSchema
from wizarding.setup.dependencies import get_cache_status_query, get_universe_query

router = APIRouter(tags=["status"])


@router.get(
    "/universe",
    response_model=dict[str, CollectionSchema],
    summary="전체 카탈로그 조회",
    description="모든 리소스를 로드한 뒤 전체 컬렉션을 한 번에 반환합니다.",
)
async def get_universe(
    query: Annotated[GetUniverseQuery, Depends(get_universe_query)],
) -> dict[str, CollectionSchema]:
    universe = await query.execute()
    return {
        resource: CollectionSchema(
            count=snapshot.count,
            results=[record.to_dict() for record in snapshot.results],
        )
        for resource, snapshot in universe.items()
    }


@router.get(
    "/cache/status",
    response_model=dict[str, ResourceStatusSchema],
    summary="캐시 상태 조회",
)
async def get_cache_status(
    query: Annotated[GetCacheStatusQuery, Depends(get_cache_status_query)],
) -> dict[str, ResourceStatusSchema]:
    """리소스별 로드 여부와 캐시 건수. 로드를 유발하지 않습니다."""
    return {
        resource: ResourceStatusSchema(loaded=status.loaded, count=status.count)
        for resource, status in query.execute().items()
    }
