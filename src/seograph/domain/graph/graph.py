"""Entity graph with lazy relationship resolution.

Relationships are resolved against the index each time they are read, never at
construction, so a document that only includes part of its related resources
still builds. Links whose target is not indexed resolve to ``None`` (to-one)
or are skipped (to-many).
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from seograph.domain.model import Entity, ResourceKey, ToMany, ToOne, entity_class_for

from .index import ResourceIndex

if TYPE_CHECKING:
    from collections.abc import Iterable

    from seograph.domain.model import Resource


log = getLogger(__name__)


class EntityGraph:
    __slots__ = ("_index",)

    def __init__(self, index: ResourceIndex) -> None:
        self._index = index

    @classmethod
    def from_resources(cls, resources: Iterable[Resource]) -> EntityGraph:
        return cls(ResourceIndex(resources))

    def wrap(self, resource: Resource) -> Entity:
        return entity_class_for(resource.type)(resource, self)

    def entity(self, resource_type: str, resource_id: str) -> Entity | None:
        resource = self._index.lookup(resource_type, resource_id)
        return None if resource is None else self.wrap(resource)

    def entity_for(self, key: ResourceKey) -> Entity | None:
        resource = self._index.get(key)
        return None if resource is None else self.wrap(resource)

    def entities_of_type(self, resource_type: str) -> tuple[Entity, ...]:
        return tuple(self.wrap(resource) for resource in self._index.of_type(resource_type))

    def to_one(self, resource: Resource, name: str) -> Entity | None:
        """Resolve a to-one link; missing, null and dangling links all give ``None``."""

        link = resource.relationship(name)
        if link is None:
            return None
        if isinstance(link, ToMany):
            log.debug("Relationship %s.%s is to-many, not to-one", resource.key, name)
            return None
        if link.target is None:
            return None
        related = self.entity_for(link.target)
        if related is None:
            log.debug("Dangling link %s.%s -> %s", resource.key, name, link.target)
        return related

    def to_many(self, resource: Resource, name: str) -> tuple[Entity, ...]:
        """Resolve a to-many link in link order, dropping targets that are not indexed."""

        link = resource.relationship(name)
        if link is None:
            return ()
        targets = _targets(link)
        resolved: list[Entity] = []
        for target in targets:
            related = self.entity_for(target)
            if related is None:
                log.debug("Dropping dangling target %s.%s -> %s", resource.key, name, target)
                continue
            resolved.append(related)
        return tuple(resolved)


def _targets(link: ToOne | ToMany) -> tuple[ResourceKey, ...]:
    if isinstance(link, ToMany):
        return link.targets
    return () if link.target is None else (link.target,)
