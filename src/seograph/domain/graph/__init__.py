"""Entity graph built from flat, relationship-linked resource records."""

from __future__ import annotations

from .errors import DuplicateResourceError, GraphError, ItemNotFoundError, MissingSingletonError
from .graph import EntityGraph
from .index import ResourceIndex
from .views import ItemsView, TypedCollectionView

__all__ = [
    "DuplicateResourceError",
    "EntityGraph",
    "GraphError",
    "ItemNotFoundError",
    "ItemsView",
    "MissingSingletonError",
    "ResourceIndex",
    "TypedCollectionView",
]
