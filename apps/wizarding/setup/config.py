"""Wizarding Service Configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Wizarding Catalog Service 설정."""

    # Service
    service_name: str = "wizarding"
    service_version: str = "0.1.0"

    # Environment
    environment: str = "local"
    debug: bool = False

    # CORS
    allowed_origins: list[str] = ["*"]

    # hp-api (캐릭터/주문 구조 소스)
    hp_api_url: str = "https://hp-api.onrender.com/api"

    # PotterDB (캐릭터 보강, 주문, 영화)
    potterdb_url: str = "https://api.potterdb.com/v1"
    potterdb_page_size: int = 100
    potterdb_character_max_pages: int = 60  # 60 × 100 = 6000
    potterdb_spell_max_pages: int = 5
    potterdb_movie_page_size: int = 20

    # potterapi (물약/도서/기숙사)
    potterapi_url: str = "https://potterapi-fedeperin.vercel.app"
    potterapi_language: str = "en"

    # Upstream 타임아웃 (초)
    character_api_timeout: float = 20.0
    upstream_api_timeout: float = 15.0

    # 캐시 로드 정책
    load_retry_delay: float = 8.0  # 실패 후 고정 재시도 지연
    load_wait_ceiling: float = 12.0  # 목록 요청의 콜드 로드 최대 대기
    preload_on_startup: bool = True

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "WIZARDING_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤."""
    return Settings()
