"""Character Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from wizarding.domain.entities.catalog_record import CatalogRecord


@dataclass(frozen=True, eq=False)
class Character(CatalogRecord):
    """캐릭터 엔티티.

    hp-api(구조 소스)와 PotterDB(보강 소스)를 병합한 결과입니다.
    모든 필드는 기본값으로 채워지며 None이 되지 않습니다.

    Attributes:
        id: hp-api ID, 순번, 또는 "pd-<slug>" (PotterDB 전용 캐릭터)
        name: 캐릭터 이름
        house: 기숙사
        species: 종족
        gender: 성별
        ancestry: 혈통
        eye_colour: 눈 색
        hair_colour: 머리 색
        wand: 지팡이 정보 (wood, core, length)
        patronus: 패트로누스
        hogwarts_student: 호그와트 학생 여부
        hogwarts_staff: 호그와트 교직원 여부
        actor: 배우
        alternate_actors: 다른 배우 목록
        alternate_names: 다른 이름 목록
        alive: 생존 여부
        image: 이미지 URL
    """

    id: str
    name: str
    image: str
    house: str = ""
    species: str = ""
    gender: str = ""
    ancestry: str = ""
    eye_colour: str = ""
    hair_colour: str = ""
    wand: dict[str, Any] = field(default_factory=dict)
    patronus: str = ""
    hogwarts_student: bool = False
    hogwarts_staff: bool = False
    actor: str = ""
    alternate_actors: tuple[str, ...] = ()
    alternate_names: tuple[str, ...] = ()
    alive: bool = True

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def filter_value(self) -> str | None:
        return self.house

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "house": self.house,
            "species": self.species,
            "gender": self.gender,
            "ancestry": self.ancestry,
            "eyeColour": self.eye_colour,
            "hairColour": self.hair_colour,
            "wand": dict(self.wand),
            "patronus": self.patronus,
            "hogwartsStudent": self.hogwarts_student,
            "hogwartsStaff": self.hogwarts_staff,
            "actor": self.actor,
            "alternate_actors": list(self.alternate_actors),
            "alternate_names": list(self.alternate_names),
            "alive": self.alive,
            "image": self.image,
        }
