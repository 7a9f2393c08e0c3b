"""Wizarding Domain Entities."""

from wizarding.domain.entities.book import Book
from wizarding.domain.entities.catalog_record import CatalogRecord
from wizarding.domain.entities.character import Character
from wizarding.domain.entities.house import House
from wizarding.domain.entities.movie import Movie
from wizarding.domain.entities.potion import Potion
from wizarding.domain.entities.spell import Spell

__all__ = [
    "Book",
    "CatalogRecord",
    "Character",
    "House",
    "Movie",
    "Potion",
    "Spell",
]
