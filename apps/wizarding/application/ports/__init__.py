"""Application Ports (Interfaces)."""

from wizarding.application.ports.catalog_loader import CatalogLoaderPort
from wizarding.application.ports.catalog_store import CatalogStorePort
from wizarding.application.ports.upstream_sources import (
    HpApiPort,
    PotterApiPort,
    PotterDbPort,
    RawRecord,
)

__all__ = [
    "CatalogLoaderPort",
    "CatalogStorePort",
    "HpApiPort",
    "PotterApiPort",
    "PotterDbPort",
    "RawRecord",
]
