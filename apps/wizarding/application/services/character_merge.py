"""Character Merge Service.

구조 소스(hp-api)와 보강 소스(PotterDB)의 캐릭터를 하나의 레코드로 병합하는 서비스.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

from wizarding.domain.constants import UNKNOWN_NAME
from wizarding.domain.entities import Character
from wizarding.domain.services import resolve_image, text_tuple

if TYPE_CHECKING:
    from wizarding.application.ports import RawRecord

logger = logging.getLogger(__name__)

EXTRA_ID_PREFIX = "pd-"


@dataclass(frozen=True)
class EnrichmentAttributes:
    """보강 소스에서 가져온 속성 묶음.

    구조 소스에 없는 값(주로 이미지)만 채우는 용도이며 권위 있는 값이 아닙니다.
    """

    image: str | None = None
    house: str | None = None
    species: str | None = None
    gender: str | None = None
    born: str | None = None
    actor: str | None = None


class CharacterMergeService:
    """캐릭터 병합 서비스.

    정책:
    1. 구조 소스의 필드가 항상 우선 (값이 있으면 그대로 사용)
    2. 구조 소스에 없는 필드는 정규화된 이름으로 매칭한 보강 속성 → 기본값 순
    3. 구조 소스에 없는 보강 엔티티는 이미지가 있을 때만 추가 (ID 중복 시 먼저 나온 것만)
    4. 출력 순서: 구조 소스 순서 → 보강 소스 순서
    """

    @staticmethod
    def normalize_name(name: str | None) -> str:
        """매칭 키 생성 (소문자, 공백 정리)."""
        return " ".join((name or "").lower().split())

    @staticmethod
    def title_case_key(key: str) -> str:
        """정규화 키를 표시 이름으로 복원 (토큰별 첫 글자 대문자)."""
        return " ".join(token[:1].upper() + token[1:] for token in key.split(" "))

    @staticmethod
    def build_enrichment_map(
        records: Iterable[RawRecord],
    ) -> dict[str, EnrichmentAttributes]:
        """PotterDB 레코드를 정규화 이름 → 속성 맵으로 변환.

        같은 키가 다시 나오면 나중 값으로 덮어씁니다.

        Args:
            records: PotterDB 캐릭터 레코드 (JSON:API)

        Returns:
            정규화 이름 → 보강 속성
        """
        enrichment: dict[str, EnrichmentAttributes] = {}
        for record in records:
            attributes: dict[str, Any] = record.get("attributes") or {}
            key = CharacterMergeService.normalize_name(attributes.get("name"))
            if not key:
                continue
            enrichment[key] = EnrichmentAttributes(
                image=attributes.get("image") or None,
                house=attributes.get("house") or None,
                species=attributes.get("species") or None,
                gender=attributes.get("gender") or None,
                born=attributes.get("born") or None,
                actor=attributes.get("portrayed_by") or None,
            )
        return enrichment

    @staticmethod
    def merge(
        primary: list[RawRecord],
        enrichment: dict[str, EnrichmentAttributes],
    ) -> list[Character]:
        """구조 소스 + 보강 맵 병합.

        Args:
            primary: hp-api 캐릭터 목록 (순서 유지)
            enrichment: 정규화 이름 → 보강 속성

        Returns:
            병합된 캐릭터 목록 (구조 소스 레코드 + 이미지 있는 보강 전용 레코드)
        """
        merged: list[Character] = []
        matched_keys: set[str] = set()

        for index, raw in enumerate(primary):
            character = CharacterMergeService._from_primary(index, raw, enrichment)
            matched_keys.add(CharacterMergeService.normalize_name(character.name))
            merged.append(character)

        # "a b"와 "a-b"는 같은 ID가 되므로 먼저 나온 엔티티만 유지
        emitted_ids = {character.id for character in merged}
        extras: list[Character] = []
        for key, attributes in enrichment.items():
            if key in matched_keys or not attributes.image:
                continue
            candidate = CharacterMergeService._from_enrichment(key, attributes)
            if candidate.id in emitted_ids:
                logger.warning(
                    "Skipping enrichment character with duplicate id",
                    extra={"id": candidate.id, "name": candidate.name},
                )
                continue
            emitted_ids.add(candidate.id)
            extras.append(candidate)
        merged.extend(extras)

        logger.debug(
            "Merged characters",
            extra={
                "primary": len(primary),
                "enrichment": len(enrichment),
                "extras": len(extras),
            },
        )
        return merged

    @staticmethod
    def _from_primary(
        index: int,
        raw: RawRecord,
        enrichment: dict[str, EnrichmentAttributes],
    ) -> Character:
        """구조 소스 레코드 → Character (보강 속성으로 빈 필드 채움)."""
        raw_name = raw.get("name")
        bag = enrichment.get(
            CharacterMergeService.normalize_name(raw_name), EnrichmentAttributes()
        )
        alive = raw.get("alive")

        return Character(
            id=str(raw.get("id") or index + 1),
            name=raw_name or UNKNOWN_NAME,
            house=raw.get("house") or bag.house or "",
            species=raw.get("species") or bag.species or "",
            gender=raw.get("gender") or bag.gender or "",
            ancestry=raw.get("ancestry") or "",
            eye_colour=raw.get("eyeColour") or "",
            hair_colour=raw.get("hairColour") or "",
            wand=raw.get("wand") or {},
            patronus=raw.get("patronus") or "",
            hogwarts_student=bool(raw.get("hogwartsStudent")),
            hogwarts_staff=bool(raw.get("hogwartsStaff")),
            actor=raw.get("actor") or bag.actor or "",
            alternate_actors=text_tuple(raw.get("alternate_actors")),
            alternate_names=text_tuple(raw.get("alternate_names")),
            alive=True if alive is None else bool(alive),
            image=resolve_image(raw.get("image"), bag.image, name=raw_name or UNKNOWN_NAME),
        )

    @staticmethod
    def _from_enrichment(key: str, attributes: EnrichmentAttributes) -> Character:
        """보강 전용 엔티티 → Character (구조 필드는 기본값)."""
        name = CharacterMergeService.title_case_key(key)
        return Character(
            id=EXTRA_ID_PREFIX + key.replace(" ", "-"),
            name=name,
            house=attributes.house or "",
            species=attributes.species or "",
            gender=attributes.gender or "",
            actor=attributes.actor or "",
            image=resolve_image(attributes.image, name=name),
        )
