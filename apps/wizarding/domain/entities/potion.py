"""Potion Entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wizarding.domain.constants import MISSING_TEXT
from wizarding.domain.entities.catalog_record import CatalogRecord


@dataclass(frozen=True, eq=False)
class Potion(CatalogRecord):
    """물약 엔티티."""

    id: str
    name: str
    image: str
    effect: str = MISSING_TEXT
    difficulty: str = MISSING_TEXT
    ingredients: tuple[str, ...] = ()
    characteristics: str = MISSING_TEXT

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def filter_value(self) -> str | None:
        return self.difficulty

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "effect": self.effect,
            "difficulty": self.difficulty,
            "ingredients": list(self.ingredients),
            "characteristics": self.characteristics,
            "image": self.image,
        }
