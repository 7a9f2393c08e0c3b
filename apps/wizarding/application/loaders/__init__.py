"""Catalog Loaders."""

from wizarding.application.loaders.books_loader import BooksLoader
from wizarding.application.loaders.characters_loader import CharactersLoader
from wizarding.application.loaders.houses_loader import HousesLoader
from wizarding.application.loaders.movies_loader import MoviesLoader
from wizarding.application.loaders.potions_loader import FALLBACK_POTIONS, PotionsLoader
from wizarding.application.loaders.registry import CatalogLoaderRegistry
from wizarding.application.loaders.spells_loader import SpellsLoader

__all__ = [
    "BooksLoader",
    "CatalogLoaderRegistry",
    "CharactersLoader",
    "FALLBACK_POTIONS",
    "HousesLoader",
    "MoviesLoader",
    "PotionsLoader",
    "SpellsLoader",
]
