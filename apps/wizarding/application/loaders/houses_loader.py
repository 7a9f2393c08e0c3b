"""Houses Loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wizarding.application.ports import CatalogLoaderPort
from wizarding.domain.constants import MISSING_TEXT, UNKNOWN_NAME
from wizarding.domain.entities import House
from wizarding.domain.services import resolve_image, text_tuple

if TYPE_CHECKING:
    from wizarding.application.ports import PotterApiPort, RawRecord


class HousesLoader(CatalogLoaderPort):
    """기숙사 로더 (potterapi 단독 소스)."""

    def __init__(self, potterapi: PotterApiPort, timeout: float = 15.0):
        self._potterapi = potterapi
        self._timeout = timeout

    @property
    def resource_type(self) -> str:
        return "houses"

    async def load(self) -> list[House]:
        records = await self._potterapi.fetch_houses(timeout=self._timeout)
        return [self._from_potterapi(index, raw) for index, raw in enumerate(records)]

    @staticmethod
    def _from_potterapi(index: int, raw: RawRecord) -> House:
        # potterapi는 이름을 "house" 키로 내려줌
        name = raw.get("house") or raw.get("name") or UNKNOWN_NAME
        upstream_index = raw.get("index")
        return House(
            id=str(upstream_index if upstream_index is not None else index + 1),
            name=name,
            emoji=raw.get("emoji") or "",
            founder=raw.get("founder") or MISSING_TEXT,
            colors=text_tuple(raw.get("colors")),
            animal=raw.get("animal") or MISSING_TEXT,
            element=raw.get("element") or MISSING_TEXT,
            ghost=raw.get("ghost") or MISSING_TEXT,
            common_room=raw.get("commonRoom") or MISSING_TEXT,
            heads=text_tuple(raw.get("heads")),
            traits=text_tuple(raw.get("traits")),
            image=resolve_image(raw.get("image"), name=name),
        )
