"""Wizarding Catalog Domain Layer."""

from wizarding.domain.constants import RESOURCE_TYPES

__all__ = ["RESOURCE_TYPES"]
