"""Spells Loader.

주문 로더: PotterDB 우선 (레코드 수가 많음), 실패/빈 결과 시 hp-api.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wizarding.application.exceptions import LoadFailureError, UpstreamUnavailableError
from wizarding.application.ports import CatalogLoaderPort
from wizarding.domain.constants import MISSING_TEXT, UNKNOWN_NAME
from wizarding.domain.entities import Spell
from wizarding.domain.services import resolve_image

if TYPE_CHECKING:
    from wizarding.application.ports import HpApiPort, PotterDbPort, RawRecord

logger = logging.getLogger(__name__)


class SpellsLoader(CatalogLoaderPort):
    """주문 로더."""

    def __init__(
        self,
        potterdb: PotterDbPort,
        hp_api: HpApiPort,
        timeout: float = 15.0,
        page_size: int = 100,
        max_pages: int = 5,
    ):
        self._potterdb = potterdb
        self._hp_api = hp_api
        self._timeout = timeout
        self._page_size = page_size
        self._max_pages = max_pages

    @property
    def resource_type(self) -> str:
        return "spells"

    async def load(self) -> list[Spell]:
        try:
            spells = await self._load_from_potterdb()
        except UpstreamUnavailableError as e:
            logger.warning(
                "PotterDB spells unavailable, falling back to hp-api",
                extra={"error": e.message},
            )
            spells = []

        if spells:
            return spells

        try:
            records = await self._hp_api.fetch_spells(timeout=self._timeout)
        except UpstreamUnavailableError as e:
            raise LoadFailureError(self.resource_type, e.message) from e
        return [self._from_hp_api(index, raw) for index, raw in enumerate(records)]

    async def _load_from_potterdb(self) -> list[Spell]:
        pages = await self._potterdb.fetch_pages(
            "spells",
            page_size=self._page_size,
            max_pages=self._max_pages,
            timeout=self._timeout,
        )
        return [
            self._from_potterdb(page_number, index, raw)
            for page_number, page in enumerate(pages, start=1)
            for index, raw in enumerate(page)
        ]

    @staticmethod
    def _from_potterdb(page_number: int, index: int, raw: RawRecord) -> Spell:
        attributes = raw.get("attributes") or {}
        name = attributes.get("incantation") or attributes.get("name")
        return Spell(
            id=str(raw.get("id") or f"spell-{page_number}-{index}"),
            name=name or UNKNOWN_NAME,
            description=attributes.get("effect") or MISSING_TEXT,
            category=attributes.get("category") or "",
            image=resolve_image(attributes.get("image"), name=name or UNKNOWN_NAME),
        )

    @staticmethod
    def _from_hp_api(index: int, raw: RawRecord) -> Spell:
        name = raw.get("name") or UNKNOWN_NAME
        return Spell(
            id=str(raw.get("id") or index + 1),
            name=name,
            description=raw.get("description") or MISSING_TEXT,
            category="",
            image=resolve_image(name=name),
        )
