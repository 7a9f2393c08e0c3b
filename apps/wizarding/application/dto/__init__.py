"""Application DTOs."""

from wizarding.application.dto.catalog_request import CatalogQueryRequest
from wizarding.application.dto.catalog_response import (
    CollectionSnapshot,
    PageResult,
    ResourceStatus,
)

__all__ = [
    "CatalogQueryRequest",
    "CollectionSnapshot",
    "PageResult",
    "ResourceStatus",
]
