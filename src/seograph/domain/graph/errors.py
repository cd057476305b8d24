"""Errors raised while building or querying an entity graph.

Absence is not an error: unknown keys, dangling links and missing attributes
all resolve to ``None`` or an empty tuple. Only malformed documents raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seograph.domain.model import ResourceKey


class GraphError(ValueError):
    """Base class for entity graph failures."""


class DuplicateResourceError(GraphError):
    """Raised when two records share the same ``(type, id)`` pair."""

    def __init__(self, key: ResourceKey) -> None:
        self.key = key
        super().__init__(f"Duplicate resource in document: {key}")


class MissingSingletonError(GraphError):
    """Raised when a resource type expected exactly once is absent or repeated."""

    def __init__(self, resource_type: str, count: int) -> None:
        self.resource_type = str(resource_type)
        self.count = count
        super().__init__(
            f"Expected exactly one {self.resource_type!r} resource, found {count}"
        )


class ItemNotFoundError(GraphError):
    """Raised by entry points when an explicitly requested item is not in the graph."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Item {item_id!r} is not part of the document")
