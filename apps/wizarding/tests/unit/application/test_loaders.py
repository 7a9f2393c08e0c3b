"""Catalog Loader Unit Tests.

provider 체인(우선 소스 → 대체 소스 → 내장 목록)과 필드 매핑을 검증합니다.
"""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from wizarding.application.exceptions import (
    LoadFailureError,
    UnknownResourceTypeError,
    UpstreamUnavailableError,
)
from wizarding.application.loaders import (
    FALLBACK_POTIONS,
    BooksLoader,
    CatalogLoaderRegistry,
    CharactersLoader,
    HousesLoader,
    MoviesLoader,
    PotionsLoader,
    SpellsLoader,
)
from wizarding.domain.constants import MISSING_TEXT
from wizarding.domain.services import placeholder_avatar_url
from wizarding.infrastructure.integrations import PotterDbClient


class TestCharactersLoader:
    """CharactersLoader 테스트."""

    @pytest.mark.asyncio
    async def test_merges_both_sources(
        self,
        mock_hp_api: AsyncMock,
        mock_potterdb: AsyncMock,
        hp_api_characters: list[dict[str, Any]],
        potterdb_characters: list[dict[str, Any]],
    ) -> None:
        mock_hp_api.fetch_characters.return_value = hp_api_characters
        mock_potterdb.fetch_pages.return_value = [potterdb_characters[:2], potterdb_characters[2:]]
        loader = CharactersLoader(hp_api=mock_hp_api, potterdb=mock_potterdb)

        result = await loader.load()

        assert [c.name for c in result] == ["Harry Potter", "Cormac McLaggen", "Hannah Abbott"]
        mock_potterdb.fetch_pages.assert_awaited_once_with(
            "characters", page_size=100, max_pages=60, timeout=20.0, keep_partial=True
        )
        mock_hp_api.fetch_characters.assert_awaited_once_with(timeout=20.0)

    @pytest.mark.asyncio
    async def test_enrichment_failure_is_isolated(
        self,
        mock_hp_api: AsyncMock,
        mock_potterdb: AsyncMock,
        hp_api_characters: list[dict[str, Any]],
    ) -> None:
        """PotterDB 실패 시 hp-api 레코드만으로 로드 성공."""
        mock_hp_api.fetch_characters.return_value = hp_api_characters
        mock_potterdb.fetch_pages.side_effect = UpstreamUnavailableError("potterdb", "HTTP 502")
        loader = CharactersLoader(hp_api=mock_hp_api, potterdb=mock_potterdb)

        result = await loader.load()

        assert len(result) == 2
        assert result[1].image == placeholder_avatar_url("Cormac McLaggen")

    @pytest.mark.asyncio
    async def test_enrichment_keeps_pages_fetched_before_failure(
        self,
        mock_hp_api: AsyncMock,
    ) -> None:
        """PotterDB 2페이지 실패 시 1페이지 보강 데이터는 병합에 사용."""
        # Arrange
        first_page = MagicMock()
        first_page.raise_for_status = MagicMock()
        first_page.json.return_value = {
            "data": [
                {
                    "id": "c2",
                    "attributes": {
                        "name": "Hannah Abbott",
                        "image": "https://potterdb.com/hannah.png",
                    },
                }
            ],
            "meta": {"pagination": {"current": 1, "next": 2}},
        }
        http_client = AsyncMock()
        http_client.get.side_effect = [first_page, httpx.ReadTimeout("read timed out")]
        mock_hp_api.fetch_characters.return_value = [{"id": "hp-1", "name": "Harry Potter"}]
        loader = CharactersLoader(hp_api=mock_hp_api, potterdb=PotterDbClient(http_client))

        # Act
        result = await loader.load()

        # Assert
        assert [c.id for c in result] == ["hp-1", "pd-hannah-abbott"]
        assert result[1].image == "https://potterdb.com/hannah.png"
        assert http_client.get.await_count == 2

    @pytest.mark.asyncio
    async def test_primary_failure_propagates(
        self,
        mock_hp_api: AsyncMock,
        mock_potterdb: AsyncMock,
    ) -> None:
        """hp-api 실패는 로드 실패 (컨트롤러 재시도 대상)."""
        mock_hp_api.fetch_characters.side_effect = UpstreamUnavailableError("hp-api", "timeout")
        loader = CharactersLoader(hp_api=mock_hp_api, potterdb=mock_potterdb)

        with pytest.raises(LoadFailureError):
            await loader.load()


class TestSpellsLoader:
    """SpellsLoader 테스트."""

    @pytest.mark.asyncio
    async def test_prefers_potterdb(
        self,
        mock_hp_api: AsyncMock,
        mock_potterdb: AsyncMock,
    ) -> None:
        mock_potterdb.fetch_pages.return_value = [
            [
                {
                    "id": "a1",
                    "attributes": {
                        "incantation": "Expelliarmus",
                        "name": "Disarming Charm",
                        "effect": "Disarms the opponent",
                        "category": "Charm",
                        "image": "https://potterdb.com/expelliarmus.png",
                    },
                }
            ],
            [{"attributes": {"name": "Obliviate"}}],
        ]
        loader = SpellsLoader(potterdb=mock_potterdb, hp_api=mock_hp_api)

        result = await loader.load()

        assert [s.name for s in result] == ["Expelliarmus", "Obliviate"]
        assert result[0].id == "a1"
        assert result[0].category == "Charm"
        assert result[1].id == "spell-2-0"
        assert result[1].description == MISSING_TEXT
        mock_hp_api.fetch_spells.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_falls_back_to_hp_api_on_error(
        self,
        mock_hp_api: AsyncMock,
        mock_potterdb: AsyncMock,
    ) -> None:
        mock_potterdb.fetch_pages.side_effect = UpstreamUnavailableError("potterdb", "HTTP 500")
        mock_hp_api.fetch_spells.return_value = [
            {"id": "s-1", "name": "Lumos", "description": "Lights the wand tip"},
            {"name": "Nox", "description": ""},
        ]
        loader = SpellsLoader(potterdb=mock_potterdb, hp_api=mock_hp_api)

        result = await loader.load()

        assert [s.id for s in result] == ["s-1", "2"]
        assert result[1].description == MISSING_TEXT
        assert result[0].image == placeholder_avatar_url("Lumos")

    @pytest.mark.asyncio
    async def test_falls_back_to_hp_api_on_empty(
        self,
        mock_hp_api: AsyncMock,
        mock_potterdb: AsyncMock,
    ) -> None:
        mock_potterdb.fetch_pages.return_value = [[]]
        mock_hp_api.fetch_spells.return_value = [{"name": "Lumos"}]
        loader = SpellsLoader(potterdb=mock_potterdb, hp_api=mock_hp_api)

        result = await loader.load()

        assert [s.name for s in result] == ["Lumos"]

    @pytest.mark.asyncio
    async def test_fails_when_both_sources_fail(
        self,
        mock_hp_api: AsyncMock,
        mock_potterdb: AsyncMock,
    ) -> None:
        mock_potterdb.fetch_pages.side_effect = UpstreamUnavailableError("potterdb", "down")
        mock_hp_api.fetch_spells.side_effect = UpstreamUnavailableError("hp-api", "down")
        loader = SpellsLoader(potterdb=mock_potterdb, hp_api=mock_hp_api)

        with pytest.raises(LoadFailureError):
            await loader.load()


class TestPotionsLoader:
    """PotionsLoader 테스트."""

    @pytest.mark.asyncio
    async def test_maps_potterapi_records(self, mock_potterapi: AsyncMock) -> None:
        mock_potterapi.fetch_potions.return_value = [
            {
                "index": 0,
                "name": "Polyjuice Potion",
                "effect": "Transforms the drinker",
                "difficulty": "Advanced",
                "ingredients": "Lacewing flies, Leeches",
                "image": "https://potterapi/polyjuice.png",
            }
        ]
        loader = PotionsLoader(mock_potterapi)

        result = await loader.load()

        assert result[0].id == "0"
        assert result[0].ingredients == ("Lacewing flies", "Leeches")
        assert result[0].characteristics == MISSING_TEXT

    @pytest.mark.asyncio
    async def test_error_serves_fallback(self, mock_potterapi: AsyncMock) -> None:
        """provider 장애에도 로드 실패 없음."""
        mock_potterapi.fetch_potions.side_effect = UpstreamUnavailableError("potterapi", "down")

        result = await PotionsLoader(mock_potterapi).load()

        assert len(result) == len(FALLBACK_POTIONS) == 10
        assert result[0].name == "Polyjuice Potion"

    @pytest.mark.asyncio
    async def test_empty_serves_fallback(self, mock_potterapi: AsyncMock) -> None:
        result = await PotionsLoader(mock_potterapi).load()

        assert [p.id for p in result] == [str(i) for i in range(1, 11)]


class TestBooksAndHousesLoaders:
    """BooksLoader / HousesLoader 테스트."""

    @pytest.mark.asyncio
    async def test_books_mapping(self, mock_potterapi: AsyncMock) -> None:
        mock_potterapi.fetch_books.return_value = [
            {
                "index": 0,
                "title": "Harry Potter and the Philosopher's Stone",
                "releaseDate": "Jun 26, 1997",
                "pages": 223,
                "cover": "https://potterapi/book1.png",
            },
            {"title": "Untitled"},
        ]

        result = await BooksLoader(mock_potterapi).load()

        assert result[0].id == "0"
        assert result[0].original_title == "Harry Potter and the Philosopher's Stone"
        assert result[0].pages == 223
        assert result[1].id == "2"
        assert result[1].cover_type == MISSING_TEXT
        assert result[1].image == placeholder_avatar_url("Untitled")

    @pytest.mark.asyncio
    async def test_books_failure_propagates(self, mock_potterapi: AsyncMock) -> None:
        mock_potterapi.fetch_books.side_effect = UpstreamUnavailableError("potterapi", "down")

        with pytest.raises(UpstreamUnavailableError):
            await BooksLoader(mock_potterapi).load()

    @pytest.mark.asyncio
    async def test_houses_mapping(self, mock_potterapi: AsyncMock) -> None:
        mock_potterapi.fetch_houses.return_value = [
            {
                "house": "Gryffindor",
                "emoji": "🦁",
                "founder": "Godric Gryffindor",
                "colors": ["red", "gold"],
                "animal": "Lion",
                "index": 0,
            }
        ]

        result = await HousesLoader(mock_potterapi).load()

        house = result[0]
        assert house.name == "Gryffindor"
        assert house.colors == ("red", "gold")
        assert house.ghost == MISSING_TEXT
        assert house.to_dict()["commonRoom"] == MISSING_TEXT


class TestMoviesLoader:
    """MoviesLoader 테스트."""

    @pytest.mark.asyncio
    async def test_filters_series_and_fills_duration(self, mock_potterdb: AsyncMock) -> None:
        mock_potterdb.fetch_page.return_value = [
            {
                "id": "m1",
                "attributes": {
                    "title": "Harry Potter and the Philosopher's Stone",
                    "release_date": "2001-11-16",
                    "directors": ["Chris Columbus"],
                    "poster": "https://potterdb.com/m1.jpg",
                },
            },
            {
                "id": "fb1",
                "attributes": {"title": "Fantastic Beasts and Where to Find Them"},
            },
            {
                "id": "m2",
                "attributes": {
                    "title": "Harry Potter and the Chamber of Secrets",
                    "release_date": "not a date",
                },
            },
        ]

        result = await MoviesLoader(mock_potterdb).load()

        assert [m.id for m in result] == ["m1", "m2"]
        assert result[0].year == 2001
        assert result[0].director == "Chris Columbus"
        assert result[0].duration_min == 152
        assert result[1].duration_min == 161
        assert result[1].year is None
        assert result[1].director == MISSING_TEXT
        mock_potterdb.fetch_page.assert_awaited_once_with("movies", page_size=20, timeout=15.0)

    @pytest.mark.asyncio
    async def test_malformed_director_and_release_date(self, mock_potterdb: AsyncMock) -> None:
        """비문자열 감독/개봉일은 예외 없이 문자열화 또는 None 처리."""
        mock_potterdb.fetch_page.return_value = [
            {
                "id": "m1",
                "attributes": {
                    "title": "Harry Potter and the Philosopher's Stone",
                    "release_date": 20011116,
                    "directors": ["Chris Columbus", None, 42],
                },
            },
        ]

        result = await MoviesLoader(mock_potterdb).load()

        assert result[0].year is None
        assert result[0].director == "Chris Columbus, 42"


class TestCatalogLoaderRegistry:
    """CatalogLoaderRegistry 테스트."""

    def test_preserves_registration_order(self, make_loader: Callable[..., MagicMock]) -> None:
        registry = CatalogLoaderRegistry([make_loader("spells"), make_loader("books")])

        assert registry.resource_types == ("spells", "books")
        assert "books" in registry

    def test_duplicate_registration_fails(self, make_loader: Callable[..., MagicMock]) -> None:
        with pytest.raises(ValueError):
            CatalogLoaderRegistry([make_loader("spells"), make_loader("spells")])

    def test_unknown_resource(self, make_loader: Callable[..., MagicMock]) -> None:
        registry = CatalogLoaderRegistry([make_loader("spells")])

        with pytest.raises(UnknownResourceTypeError):
            registry.get("wands")
