"""Catalog Commands."""

from wizarding.application.commands.bootstrap_catalog_command import BootstrapCatalogCommand

__all__ = ["BootstrapCatalogCommand"]
