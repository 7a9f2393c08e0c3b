"""Spell Entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wizarding.domain.constants import MISSING_TEXT
from wizarding.domain.entities.catalog_record import CatalogRecord


@dataclass(frozen=True, eq=False)
class Spell(CatalogRecord):
    """주문 엔티티.

    Attributes:
        id: PotterDB ID 또는 hp-api ID/순번
        name: 주문(incantation) 또는 이름
        description: 효과 설명
        category: 주문 분류 (Charm, Curse, ...)
        image: 이미지 URL
    """

    id: str
    name: str
    image: str
    description: str = MISSING_TEXT
    category: str = ""

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def filter_value(self) -> str | None:
        return self.category

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "image": self.image,
        }
