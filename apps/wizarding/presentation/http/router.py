"""HTTP Router.

FastAPI 라우터 설정.
"""

from fastapi import APIRouter

from wizarding.presentation.http.controllers.catalog_controller import (
    router as catalog_router,
)
from wizarding.presentation.http.controllers.status_controller import (
    router as status_router,
)
from wizarding.presentation.http.schemas import HealthCheckResponseSchema

router = APIRouter(prefix="/api")


@router.get(
    "/health",
    response_model=HealthCheckResponseSchema,
    tags=["health"],
    summary="헬스체크",
)
async def health_check() -> HealthCheckResponseSchema:
    """서비스 헬스체크."""
    return HealthCheckResponseSchema(status="ok", service="wizarding")


# 고정 경로 먼저 등록 (/{resource}/{record_id} 보다 우선)
router.include_router(status_router)
router.include_router(catalog_router)
