"""Catalog Queries."""

from wizarding.application.queries.get_cache_status import GetCacheStatusQuery
from wizarding.application.queries.get_record import GetRecordQuery
from wizarding.application.queries.get_universe import GetUniverseQuery
from wizarding.application.queries.query_catalog import QueryCatalogQuery

__all__ = [
    "GetCacheStatusQuery",
    "GetRecordQuery",
    "GetUniverseQuery",
    "QueryCatalogQuery",
]
