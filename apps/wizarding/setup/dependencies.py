"""Dependency Injection.

FastAPI 의존성 주입 팩토리.
카탈로그는 읽기 전용 - 프로세스 로컬 캐시 → 미스 시 upstream 로드.
"""

from __future__ import annotations

import httpx

from wizarding.application.commands import BootstrapCatalogCommand
from wizarding.application.loaders import (
    BooksLoader,
    CatalogLoaderRegistry,
    CharactersLoader,
    HousesLoader,
    MoviesLoader,
    PotionsLoader,
    SpellsLoader,
)
from wizarding.application.queries import (
    GetCacheStatusQuery,
    GetRecordQuery,
    GetUniverseQuery,
    QueryCatalogQuery,
)
from wizarding.application.services.cache_controller import CatalogCacheController
from wizarding.infrastructure.cache import InMemoryCatalogStore
from wizarding.infrastructure.integrations import (
    HpApiClient,
    PotterApiClient,
    PotterDbClient,
)
from wizarding.setup.config import Settings, get_settings

# 프로세스 싱글톤
_http_client: httpx.AsyncClient | None = None
_store: InMemoryCatalogStore | None = None
_controller: CatalogCacheController | None = None


def get_http_client() -> httpx.AsyncClient:
    """Upstream HTTP client (싱글톤)."""
    global _http_client
    if _http_client is None:
        settings = get_settings()
        _http_client = httpx.AsyncClient(
            timeout=settings.upstream_api_timeout,
            follow_redirects=True,
            headers={"User-Agent": f"{settings.service_name}/{settings.service_version}"},
        )
    return _http_client


def build_loader_registry(
    settings: Settings,
    http_client: httpx.AsyncClient,
) -> CatalogLoaderRegistry:
    """리소스 타입별 로더 구성."""
    hp_api = HpApiClient(
        http_client, base_url=settings.hp_api_url, timeout=settings.upstream_api_timeout
    )
    potterdb = PotterDbClient(
        http_client, base_url=settings.potterdb_url, timeout=settings.upstream_api_timeout
    )
    potterapi = PotterApiClient(
        http_client,
        base_url=settings.potterapi_url,
        language=settings.potterapi_language,
        timeout=settings.upstream_api_timeout,
    )

    return CatalogLoaderRegistry(
        [
            CharactersLoader(
                hp_api=hp_api,
                potterdb=potterdb,
                timeout=settings.character_api_timeout,
                page_size=settings.potterdb_page_size,
                max_pages=settings.potterdb_character_max_pages,
            ),
            SpellsLoader(
                potterdb=potterdb,
                hp_api=hp_api,
                timeout=settings.upstream_api_timeout,
                page_size=settings.potterdb_page_size,
                max_pages=settings.potterdb_spell_max_pages,
            ),
            PotionsLoader(potterapi, timeout=settings.upstream_api_timeout),
            BooksLoader(potterapi, timeout=settings.upstream_api_timeout),
            HousesLoader(potterapi, timeout=settings.upstream_api_timeout),
            MoviesLoader(
                potterdb,
                timeout=settings.upstream_api_timeout,
                page_size=settings.potterdb_movie_page_size,
            ),
        ]
    )


def get_catalog_store() -> InMemoryCatalogStore:
    """카탈로그 저장소 (싱글톤)."""
    if _store is None:
        get_cache_controller()
    assert _store is not None
    return _store


def get_cache_controller() -> CatalogCacheController:
    """캐시 컨트롤러 (싱글톤)."""
    global _store, _controller
    if _controller is None:
        settings = get_settings()
        registry = build_loader_registry(settings, get_http_client())
        _store = InMemoryCatalogStore(registry.resource_types)
        _controller = CatalogCacheController(
            store=_store,
            registry=registry,
            retry_delay=settings.load_retry_delay,
        )
    return _controller


def get_query_catalog_query() -> QueryCatalogQuery:
    """QueryCatalogQuery 의존성 주입."""
    return QueryCatalogQuery(
        controller=get_cache_controller(),
        store=get_catalog_store(),
        wait_ceiling=get_settings().load_wait_ceiling,
    )


def get_record_query() -> GetRecordQuery:
    """GetRecordQuery 의존성 주입."""
    return GetRecordQuery(controller=get_cache_controller(), store=get_catalog_store())


def get_universe_query() -> GetUniverseQuery:
    """GetUniverseQuery 의존성 주입."""
    return GetUniverseQuery(controller=get_cache_controller(), store=get_catalog_store())


def get_cache_status_query() -> GetCacheStatusQuery:
    """GetCacheStatusQuery 의존성 주입."""
    return GetCacheStatusQuery(store=get_catalog_store())


def get_bootstrap_command() -> BootstrapCatalogCommand:
    """BootstrapCatalogCommand 생성."""
    return BootstrapCatalogCommand(controller=get_cache_controller(), store=get_catalog_store())


async def cleanup() -> None:
    """리소스 정리 (재시도/로드 태스크 취소 → HTTP client 종료)."""
    global _http_client, _store, _controller

    if _controller:
        await _controller.shutdown()
        _controller = None
        _store = None

    if _http_client:
        await _http_client.aclose()
        _http_client = None
