"""Book Entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wizarding.domain.constants import MISSING_TEXT
from wizarding.domain.entities.catalog_record import CatalogRecord


@dataclass(frozen=True, eq=False)
class Book(CatalogRecord):
    """도서 엔티티.

    Attributes:
        id: potterapi index 또는 순번
        title: 제목
        original_title: 원제
        release_date: 출간일 (문자열 그대로)
        description: 줄거리
        pages: 쪽수 (provider 값 그대로, 없으면 "—")
        cover_type: 표지 종류
        image: 표지 URL
    """

    id: str
    title: str
    image: str
    original_title: str = MISSING_TEXT
    release_date: str = MISSING_TEXT
    description: str = MISSING_TEXT
    pages: int | str = MISSING_TEXT
    cover_type: str = MISSING_TEXT

    @property
    def display_name(self) -> str:
        return self.title

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "originalTitle": self.original_title,
            "releaseDate": self.release_date,
            "description": self.description,
            "pages": self.pages,
            "coverType": self.cover_type,
            "image": self.image,
        }
