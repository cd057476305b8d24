"""Content-oriented groupings over an entity graph."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

from seograph.domain.model import Item, ItemType, ResourceType, Site

from .errors import MissingSingletonError

if TYPE_CHECKING:
    from .graph import EntityGraph


class TypedCollectionView:
    """Per-request façade exposing sites, items and item types of a graph.

    The graph is immutable, so every derived grouping is computed once and kept
    for the lifetime of the view. Content types are addressed by api key only.
    """

    def __init__(self, graph: EntityGraph) -> None:
        self._graph = graph
        self._items_by_api_key: dict[str, tuple[Item, ...]] = {}

    @property
    def graph(self) -> EntityGraph:
        return self._graph

    @cached_property
    def site(self) -> Site:
        sites = [
            entity
            for entity in self._graph.entities_of_type(ResourceType.SITE)
            if isinstance(entity, Site)
        ]
        if len(sites) != 1:
            raise MissingSingletonError(ResourceType.SITE, len(sites))
        return sites[0]

    @cached_property
    def items(self) -> tuple[Item, ...]:
        return tuple(
            entity
            for entity in self._graph.entities_of_type(ResourceType.ITEM)
            if isinstance(entity, Item)
        )

    @cached_property
    def item_types(self) -> tuple[ItemType, ...]:
        return tuple(
            entity
            for entity in self._graph.entities_of_type(ResourceType.ITEM_TYPE)
            if isinstance(entity, ItemType)
        )

    def item(self, item_id: str) -> Item | None:
        entity = self._graph.entity(ResourceType.ITEM, item_id)
        return entity if isinstance(entity, Item) else None

    def item_type(self, api_key: str) -> ItemType | None:
        return next(
            (item_type for item_type in self.item_types if item_type.api_key == api_key), None
        )

    def items_of_type(self, api_key: str) -> tuple[Item, ...]:
        cached = self._items_by_api_key.get(api_key)
        if cached is None:
            cached = tuple(item for item in self.items if _api_key_of(item) == api_key)
            self._items_by_api_key[api_key] = cached
        return cached

    def singleton(self, api_key: str) -> Item | None:
        item_type = self.item_type(api_key)
        if item_type is None or not item_type.singleton:
            return None
        return item_type.singleton_item


def _api_key_of(item: Item) -> str | None:
    item_type = item.item_type
    return None if item_type is None else item_type.api_key


ItemsView = TypedCollectionView
