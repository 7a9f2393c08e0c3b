"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from wizarding.domain.entities import Character, Spell
from wizarding.domain.services import placeholder_avatar_url

# pytest-asyncio 자동 모드 설정
pytest_plugins = ("pytest_asyncio",)


# ============================================================
# Environment
# ============================================================


@pytest.fixture(scope="session", autouse=True)
def _test_env() -> Generator[None, None, None]:
    """Set test environment variables."""
    original = os.environ.copy()
    os.environ.update(
        {
            "WIZARDING_ENVIRONMENT": "test",
            "WIZARDING_PRELOAD_ON_STARTUP": "false",
            "WIZARDING_LOAD_RETRY_DELAY": "0.01",
            "WIZARDING_LOAD_WAIT_CEILING": "0.1",
        }
    )
    yield
    os.environ.clear()
    os.environ.update(original)


# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def sample_spells() -> list[Spell]:
    """샘플 주문 25개 (spell-1 ~ spell-25)."""
    return [
        Spell(
            id=f"spell-{i}",
            name=f"Spell {i}",
            description="Test spell",
            category="Charm" if i % 2 else "Curse",
            image=placeholder_avatar_url(f"Spell {i}"),
        )
        for i in range(1, 26)
    ]


@pytest.fixture
def sample_characters() -> list[Character]:
    """샘플 캐릭터 목록."""
    return [
        Character(
            id="1",
            name="Harry Potter",
            house="Gryffindor",
            image="https://example.com/harry.jpg",
        ),
        Character(
            id="2",
            name="Lily Potter",
            house="Gryffindor",
            image="https://example.com/lily.jpg",
        ),
        Character(
            id="3",
            name="Draco Malfoy",
            house="Slytherin",
            image="https://example.com/draco.jpg",
        ),
        Character(
            id="4",
            name="James Potter II",
            house="",
            image="https://example.com/james.jpg",
        ),
    ]


@pytest.fixture
def hp_api_characters() -> list[dict[str, Any]]:
    """hp-api 캐릭터 응답 샘플."""
    return [
        {
            "id": "9e3f7ce4-b9a7-4244-b709-dae5c1f1d4a8",
            "name": "Harry Potter",
            "house": "Gryffindor",
            "species": "human",
            "gender": "male",
            "ancestry": "half-blood",
            "eyeColour": "green",
            "hairColour": "black",
            "wand": {"wood": "holly", "core": "phoenix tail feather", "length": 11},
            "patronus": "stag",
            "hogwartsStudent": True,
            "hogwartsStaff": False,
            "actor": "Daniel Radcliffe",
            "alternate_actors": [],
            "alternate_names": ["The Boy Who Lived", "The Chosen One"],
            "alive": True,
            "image": "https://ik.imagekit.io/hpapi/harry.jpg",
        },
        {
            "id": "",
            "name": "Cormac McLaggen",
            "house": "Gryffindor",
            "species": "",
            "image": "",
        },
    ]


@pytest.fixture
def potterdb_characters() -> list[dict[str, Any]]:
    """PotterDB 캐릭터 응답 샘플 (JSON:API data 항목)."""
    return [
        {
            "id": "pdb-harry",
            "attributes": {
                "name": "HARRY   potter",
                "image": "https://potterdb.com/harry.png",
                "species": "Wizard",
            },
        },
        {
            "id": "pdb-cormac",
            "attributes": {
                "name": "Cormac McLaggen",
                "image": "https://potterdb.com/cormac.png",
                "species": "Human",
                "portrayed_by": "Freddie Stroma",
            },
        },
        {
            "id": "pdb-abbott",
            "attributes": {
                "name": "Hannah Abbott",
                "image": "https://potterdb.com/hannah.png",
                "house": "Hufflepuff",
            },
        },
        {
            "id": "pdb-nobody",
            "attributes": {"name": "Nameless Ghoul", "image": None},
        },
    ]


# ============================================================
# Port Mocks
# ============================================================


@pytest.fixture
def make_loader() -> Callable[..., MagicMock]:
    """Mock CatalogLoaderPort 팩토리.

    load 동작은 AsyncMock의 return_value / side_effect로 지정합니다.
    """

    def _make(resource_type: str, records: list | None = None, side_effect: Any = None) -> MagicMock:
        loader = MagicMock()
        loader.resource_type = resource_type
        loader.load = AsyncMock(return_value=records or [], side_effect=side_effect)
        return loader

    return _make


@pytest.fixture
def mock_hp_api() -> AsyncMock:
    """Mock HpApiPort."""
    mock = AsyncMock()
    mock.fetch_characters = AsyncMock(return_value=[])
    mock.fetch_spells = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def mock_potterdb() -> AsyncMock:
    """Mock PotterDbPort."""
    mock = AsyncMock()
    mock.fetch_pages = AsyncMock(return_value=[])
    mock.fetch_page = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def mock_potterapi() -> AsyncMock:
    """Mock PotterApiPort."""
    mock = AsyncMock()
    mock.fetch_potions = AsyncMock(return_value=[])
    mock.fetch_books = AsyncMock(return_value=[])
    mock.fetch_houses = AsyncMock(return_value=[])
    return mock
