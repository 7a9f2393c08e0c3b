"""Books Loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wizarding.application.ports import CatalogLoaderPort
from wizarding.domain.constants import MISSING_TEXT, UNKNOWN_NAME
from wizarding.domain.entities import Book
from wizarding.domain.services import resolve_image

if TYPE_CHECKING:
    from wizarding.application.ports import PotterApiPort, RawRecord


class BooksLoader(CatalogLoaderPort):
    """도서 로더 (potterapi 단독 소스, 실패 시 로드 실패)."""

    def __init__(self, potterapi: PotterApiPort, timeout: float = 15.0):
        self._potterapi = potterapi
        self._timeout = timeout

    @property
    def resource_type(self) -> str:
        return "books"

    async def load(self) -> list[Book]:
        records = await self._potterapi.fetch_books(timeout=self._timeout)
        return [self._from_potterapi(index, raw) for index, raw in enumerate(records)]

    @staticmethod
    def _from_potterapi(index: int, raw: RawRecord) -> Book:
        title = raw.get("title")
        upstream_index = raw.get("index")
        return Book(
            id=str(upstream_index if upstream_index is not None else index + 1),
            title=title or UNKNOWN_NAME,
            original_title=raw.get("originalTitle") or title or MISSING_TEXT,
            release_date=raw.get("releaseDate") or MISSING_TEXT,
            description=raw.get("description") or MISSING_TEXT,
            pages=raw.get("pages") or MISSING_TEXT,
            cover_type=raw.get("coverType") or MISSING_TEXT,
            image=resolve_image(raw.get("cover"), name=title or UNKNOWN_NAME),
        )
