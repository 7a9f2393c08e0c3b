"""Wizarding Catalog Service Application.

캐릭터/주문/물약/도서/기숙사/영화 통합 카탈로그 서비스.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wizarding.presentation.http import router
from wizarding.presentation.http.errors import register_exception_handlers
from wizarding.setup.config import get_settings
from wizarding.setup.dependencies import cleanup, get_bootstrap_command
from wizarding.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    프리로드는 백그라운드로 실행하여 로드 중에도 요청을 받습니다.
    """
    settings = get_settings()
    setup_logging()
    logger.info(
        "Wizarding service starting",
        extra={
            "environment": settings.environment,
            "retry_delay": settings.load_retry_delay,
            "wait_ceiling": settings.load_wait_ceiling,
            "preload": settings.preload_on_startup,
        },
    )

    preload: asyncio.Task | None = None
    if settings.preload_on_startup:
        preload = asyncio.create_task(get_bootstrap_command().execute(), name="catalog-preload")

    yield

    if preload is not None and not preload.done():
        preload.cancel()
        await asyncio.gather(preload, return_exceptions=True)
    await cleanup()
    logger.info("Wizarding service shutting down")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    app = FastAPI(
        title="Wizarding Catalog Service",
        description="여러 외부 provider를 병합한 Harry Potter 카탈로그 조회 서비스",
        version=settings.service_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # Router
    app.include_router(router)

    return app


# Uvicorn entrypoint
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wizarding.main:app",
        host="0.0.0.0",
        port=3001,
        reload=True,
    )
