"""Catalog Loader Registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from wizarding.application.exceptions import UnknownResourceTypeError

if TYPE_CHECKING:
    from wizarding.application.ports import CatalogLoaderPort


class CatalogLoaderRegistry:
    """리소스 타입 → 로더 매핑.

    등록 순서가 부트스트랩 순서입니다.
    """

    def __init__(self, loaders: Iterable[CatalogLoaderPort]) -> None:
        self._loaders: dict[str, CatalogLoaderPort] = {}
        for loader in loaders:
            if loader.resource_type in self._loaders:
                raise ValueError(f"Duplicate loader for '{loader.resource_type}'")
            self._loaders[loader.resource_type] = loader

    @property
    def resource_types(self) -> tuple[str, ...]:
        return tuple(self._loaders)

    def get(self, resource_type: str) -> CatalogLoaderPort:
        try:
            return self._loaders[resource_type]
        except KeyError:
            raise UnknownResourceTypeError(resource_type) from None

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._loaders
