"""Movies Loader.

영화 로더: PotterDB 영화 중 Harry Potter 시리즈만 사용.
상영 시간은 PotterDB에 없으므로 개봉 순서 기준 고정 테이블에서 채웁니다.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from wizarding.application.ports import CatalogLoaderPort
from wizarding.domain.constants import (
    MISSING_TEXT,
    MOVIE_DURATION_MINUTES,
    MOVIE_TITLE_KEYWORD,
    UNKNOWN_NAME,
)
from wizarding.domain.entities import Movie
from wizarding.domain.services import resolve_image, text_tuple

if TYPE_CHECKING:
    from wizarding.application.ports import PotterDbPort, RawRecord

logger = logging.getLogger(__name__)


class MoviesLoader(CatalogLoaderPort):
    """영화 로더."""

    def __init__(
        self,
        potterdb: PotterDbPort,
        timeout: float = 15.0,
        page_size: int = 20,
    ):
        self._potterdb = potterdb
        self._timeout = timeout
        self._page_size = page_size

    @property
    def resource_type(self) -> str:
        return "movies"

    async def load(self) -> list[Movie]:
        records = await self._potterdb.fetch_page(
            "movies", page_size=self._page_size, timeout=self._timeout
        )
        series = [
            raw
            for raw in records
            if MOVIE_TITLE_KEYWORD in ((raw.get("attributes") or {}).get("title") or "").lower()
        ]
        return [self._from_potterdb(index, raw) for index, raw in enumerate(series)]

    @staticmethod
    def _from_potterdb(index: int, raw: RawRecord) -> Movie:
        attributes = raw.get("attributes") or {}
        title = attributes.get("title") or UNKNOWN_NAME
        directors = text_tuple(attributes.get("directors"))
        return Movie(
            id=str(raw.get("id") or index + 1),
            title=title,
            year=MoviesLoader._release_year(attributes.get("release_date")),
            director=", ".join(directors) if directors else MISSING_TEXT,
            duration_min=MOVIE_DURATION_MINUTES.get(index + 1),
            summary=attributes.get("summary") or "",
            image=resolve_image(
                attributes.get("poster"),
                attributes.get("cover"),
                attributes.get("image"),
                name=title,
            ),
        )

    @staticmethod
    def _release_year(release_date: object) -> int | None:
        """개봉일 문자열에서 연도 추출 (파싱 실패 시 None)."""
        if not isinstance(release_date, str) or not release_date:
            return None
        try:
            return date.fromisoformat(release_date[:10]).year
        except ValueError:
            logger.debug("Failed to parse release date: %s", release_date)
            return None
