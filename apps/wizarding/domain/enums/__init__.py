"""Wizarding Domain Enums."""

from wizarding.domain.enums.load_state import LoadState

__all__ = ["LoadState"]
