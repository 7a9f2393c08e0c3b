"""Load State Enum."""

from enum import Enum


class LoadState(str, Enum):
    """리소스 캐시 로드 상태.

    NOT_LOADED → LOADING → LOADED 순으로 전이하며,
    실패 시 LOADING → NOT_LOADED 로 돌아가 재시도를 기다립니다.
    LOADED는 프로세스 수명 동안 종료 상태입니다.
    """

    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"
