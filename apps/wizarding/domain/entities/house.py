"""House Entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wizarding.domain.constants import MISSING_TEXT
from wizarding.domain.entities.catalog_record import CatalogRecord


@dataclass(frozen=True, eq=False)
class House(CatalogRecord):
    """기숙사 엔티티."""

    id: str
    name: str
    image: str
    emoji: str = ""
    founder: str = MISSING_TEXT
    colors: tuple[str, ...] = ()
    animal: str = MISSING_TEXT
    element: str = MISSING_TEXT
    ghost: str = MISSING_TEXT
    common_room: str = MISSING_TEXT
    heads: tuple[str, ...] = ()
    traits: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "emoji": self.emoji,
            "founder": self.founder,
            "colors": list(self.colors),
            "animal": self.animal,
            "element": self.element,
            "ghost": self.ghost,
            "commonRoom": self.common_room,
            "heads": list(self.heads),
            "traits": list(self.traits),
            "image": self.image,
        }
