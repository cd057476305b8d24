"""Flat resource records and the relationship links between them.

Resources never embed each other: a relationship only carries the ``(type, id)``
key of its target, and the graph resolves it against an index on access.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias


@dataclass(frozen=True, slots=True, order=True)
class ResourceKey:
    """Identity of a resource: unique per ``(type, id)`` pair."""

    type: str
    id: str

    def __str__(self) -> str:
        return f"{self.type}:{self.id}"


@dataclass(frozen=True, slots=True)
class ToOne:
    target: ResourceKey | None = None


@dataclass(frozen=True, slots=True)
class ToMany:
    targets: tuple[ResourceKey, ...] = ()


RelationshipLink: TypeAlias = ToOne | ToMany


def _empty_mapping() -> Mapping[str, object]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Resource:
    """A typed, identified record with raw attributes and relationship links."""

    type: str
    id: str
    attributes: Mapping[str, object] = field(default_factory=_empty_mapping)
    relationships: Mapping[str, RelationshipLink] = field(default_factory=_empty_mapping)

    def __post_init__(self) -> None:
        if not self.type or not self.id:
            raise ValueError(f"Resource requires a type and an id, got {self.type!r}/{self.id!r}")
        # read-only views so a built index cannot be mutated through its records
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "relationships", MappingProxyType(dict(self.relationships)))

    @property
    def key(self) -> ResourceKey:
        return ResourceKey(self.type, self.id)

    def attribute(self, name: str, default: object = None) -> object:
        value = self.attributes.get(name)
        return default if value is None else value

    def relationship(self, name: str) -> RelationshipLink | None:
        return self.relationships.get(name)
