"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답 형식: {"ok": false, "error": {"message", "code", "path"}}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wizarding.application.exceptions import (
    ApplicationError,
    UnknownResourceTypeError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


def _error(request: Request, status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "ok": False,
            "error": {"message": message, "code": code, "path": request.url.path},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(UnknownResourceTypeError)
    async def unknown_resource_handler(request: Request, exc: UnknownResourceTypeError):
        return _error(request, 404, "Route not found", "UNKNOWN_RESOURCE")

    @app.exception_handler(UpstreamUnavailableError)
    async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailableError):
        logger.error(
            "Upstream error reached HTTP layer",
            extra={"source": exc.source, "detail": exc.detail},
        )
        return _error(request, 503, exc.message, "UPSTREAM_UNAVAILABLE")

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error(request, 400, exc.message, "APPLICATION_ERROR")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = "Route not found" if exc.detail == "Not Found" else str(exc.detail)
        return _error(request, exc.status_code, message, "HTTP_ERROR")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return _error(request, 500, "Internal server error", "INTERNAL_ERROR")
