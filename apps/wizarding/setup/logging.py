"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import ecs_logging

from wizarding.setup.config import get_settings

# 최초 호출 시점의 record factory (재호출 시 래퍼가 중첩되지 않도록 항상 이것을 감쌈)
_base_record_factory: Callable[..., logging.LogRecord] | None = None


def setup_logging() -> None:
    """로깅 설정.

    같은 프로세스에서 여러 번 호출해도 결과는 한 번 호출한 것과 같습니다.
    """
    global _base_record_factory
    settings = get_settings()

    # ECS JSON 포맷터
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가
    if _base_record_factory is None:
        _base_record_factory = logging.getLogRecordFactory()
    base_factory = _base_record_factory

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        record.service = {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
        }
        return record

    logging.setLogRecordFactory(record_factory)

    # 외부 라이브러리 로그 레벨 조정 (요청마다 INFO 로그를 남김)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
