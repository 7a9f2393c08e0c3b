"""Movie Entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wizarding.domain.constants import MISSING_TEXT
from wizarding.domain.entities.catalog_record import CatalogRecord


@dataclass(frozen=True, eq=False)
class Movie(CatalogRecord):
    """영화 엔티티.

    year, duration_min은 provider에 값이 없으면 None입니다.
    """

    id: str
    title: str
    image: str
    year: int | None = None
    director: str = MISSING_TEXT
    duration_min: int | None = None
    summary: str = ""

    @property
    def display_name(self) -> str:
        return self.title

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "year": self.year,
            "director": self.director,
            "duration_min": self.duration_min,
            "image": self.image,
            "summary": self.summary,
        }
