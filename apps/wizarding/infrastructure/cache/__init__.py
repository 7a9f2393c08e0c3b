"""Cache Infrastructure."""

from wizarding.infrastructure.cache.in_memory_catalog_store import (
    CacheEntry,
    InMemoryCatalogStore,
)

__all__ = ["CacheEntry", "InMemoryCatalogStore"]
