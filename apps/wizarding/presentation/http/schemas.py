"""HTTP Response Schemas.

Pydantic 모델 기반 API 응답 스키마.
레코드 본문은 리소스 타입마다 필드가 달라 dict 그대로 전달합니다.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PageResponseSchema(BaseModel):
    """페이지네이션 목록 응답 스키마."""

    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(..., description="필터 적용 후 전체 개수")
    page: int = Field(..., description="현재 페이지 (1-based)")
    limit: int = Field(..., description="페이지 크기")
    total_pages: int = Field(..., alias="totalPages", description="전체 페이지 수")
    has_more: bool = Field(..., alias="hasMore", description="다음 페이지 존재 여부")
    results: list[dict[str, Any]] = Field(..., description="현재 페이지 레코드")


class CollectionSchema(BaseModel):
    """리소스 전체 컬렉션 스키마."""

    count: int = Field(..., description="레코드 수")
    results: list[dict[str, Any]] = Field(..., description="전체 레코드")


class ResourceStatusSchema(BaseModel):
    """리소스 캐시 상태 스키마."""

    loaded: bool = Field(..., description="로드 완료 여부")
    count: int = Field(..., description="캐시된 레코드 수")


class HealthCheckResponseSchema(BaseModel):
    """헬스체크 응답 스키마."""

    status: str = Field(..., description="서비스 상태")
    service: str = Field(..., description="서비스 이름")
