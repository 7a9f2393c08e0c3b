"""Potions Loader.

물약 로더: potterapi, 실패/빈 결과 시 내장 목록 사용.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wizarding.application.exceptions import UpstreamUnavailableError
from wizarding.application.ports import CatalogLoaderPort
from wizarding.domain.constants import MISSING_TEXT, UNKNOWN_NAME
from wizarding.domain.entities import Potion
from wizarding.domain.services import placeholder_avatar_url, resolve_image, text_tuple

if TYPE_CHECKING:
    from wizarding.application.ports import PotterApiPort, RawRecord

logger = logging.getLogger(__name__)


def _fallback(
    potion_id: str,
    name: str,
    effect: str,
    difficulty: str,
    ingredients: tuple[str, ...],
    characteristics: str,
) -> Potion:
    return Potion(
        id=potion_id,
        name=name,
        effect=effect,
        difficulty=difficulty,
        ingredients=ingredients,
        characteristics=characteristics,
        image=placeholder_avatar_url(name),
    )


# potterapi 장애 시 제공하는 내장 물약 목록
FALLBACK_POTIONS: tuple[Potion, ...] = (
    _fallback(
        "1",
        "Polyjuice Potion",
        "Allows the drinker to assume the physical form of another person for an hour.",
        "Advanced",
        ("Lacewing flies", "Leeches", "Powdered bicorn horn", "Shredded boomslang skin", "Knotgrass"),
        "Thick, bubbling and foul-tasting",
    ),
    _fallback(
        "2",
        "Felix Felicis",
        "Grants the drinker extraordinary luck for a limited time.",
        "Beyond the Wizarding standard",
        ("Ashwinder egg", "Squill bulb", "Murtlap tentacle", "Tincture of thyme"),
        "Golden and liquid like molten gold",
    ),
    _fallback(
        "3",
        "Veritaserum",
        "A truth serum that forces the drinker to answer questions truthfully.",
        "Advanced",
        ("Jobberknoll feathers", "Moonstone powder", "Essence of belladonna"),
        "Colourless and odourless, indistinguishable from water",
    ),
    _fallback(
        "4",
        "Draught of Peace",
        "Relieves anxiety and agitation.",
        "Ordinary Wizarding Level",
        ("Powdered moonstone", "Syrup of hellebore", "Powdered porcupine quills"),
        "Pale silver vapour",
    ),
    _fallback(
        "5",
        "Amortentia",
        "Induces a powerful infatuation or obsession in the drinker.",
        "Moderate",
        ("Ashwinder eggs", "Rose thorns", "Powdered moonstone", "Pearl dust"),
        "Mother-of-pearl sheen with spiralling steam",
    ),
    _fallback(
        "6",
        "Wit-Sharpening Potion",
        "Keeps the drinker alert and improves clear thinking.",
        "Ordinary Wizarding Level",
        ("Ground scarab beetles", "Cut ginger roots", "Armadillo bile"),
        "Orange and frothy",
    ),
    _fallback(
        "7",
        "Mandrake Restorative Draught",
        "Reverses the effects of petrification.",
        "Advanced",
        ("Stewed mandrake",),
        "Silvery and shimmering",
    ),
    _fallback(
        "8",
        "Draught of Confusion",
        "Causes severe confusion and loss of judgement.",
        "Advanced",
        ("Scurvy grass", "Lovage", "Sneezewort"),
        "Murky violet",
    ),
    _fallback(
        "9",
        "Invisibility Potion",
        "Temporarily renders the drinker invisible.",
        "Beyond the Wizarding standard",
        ("Demiguise hair", "Moonwater"),
        "Completely transparent",
    ),
    _fallback(
        "10",
        "Antidote to Common Poisons",
        "A general antidote against most common poisons.",
        "Ordinary Wizarding Level",
        ("Bezoar", "Standard ingredient", "Unicorn horn", "Mistletoe berries"),
        "Dark brown with a stony residue",
    ),
)


class PotionsLoader(CatalogLoaderPort):
    """물약 로더.

    provider가 내려가도 로드는 실패하지 않습니다 (내장 목록 반환).
    """

    def __init__(self, potterapi: PotterApiPort, timeout: float = 15.0):
        self._potterapi = potterapi
        self._timeout = timeout

    @property
    def resource_type(self) -> str:
        return "potions"

    async def load(self) -> list[Potion]:
        try:
            records = await self._potterapi.fetch_potions(timeout=self._timeout)
        except UpstreamUnavailableError as e:
            logger.warning(
                "potterapi potions unavailable, serving built-in list",
                extra={"error": e.message, "fallback_count": len(FALLBACK_POTIONS)},
            )
            return list(FALLBACK_POTIONS)

        if not records:
            logger.warning("potterapi returned no potions, serving built-in list")
            return list(FALLBACK_POTIONS)

        return [self._from_potterapi(index, raw) for index, raw in enumerate(records)]

    @staticmethod
    def _from_potterapi(index: int, raw: RawRecord) -> Potion:
        name = raw.get("name") or UNKNOWN_NAME
        upstream_index = raw.get("index")
        return Potion(
            id=str(upstream_index if upstream_index is not None else index + 1),
            name=name,
            effect=raw.get("effect") or MISSING_TEXT,
            difficulty=raw.get("difficulty") or MISSING_TEXT,
            ingredients=text_tuple(raw.get("ingredients")),
            characteristics=raw.get("characteristics") or MISSING_TEXT,
            image=resolve_image(raw.get("image"), name=name),
        )
