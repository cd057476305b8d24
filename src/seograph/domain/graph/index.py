"""Resource index keyed by ``(type, id)``."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from seograph.domain.model import ResourceKey

from .errors import DuplicateResourceError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from seograph.domain.model import Resource


log = getLogger(__name__)


class ResourceIndex:
    """Immutable lookup table over a flat collection of resources.

    Insertion order is kept both globally and per type so that every derived
    sequence follows document order.
    """

    __slots__ = ("_by_key", "_keys_by_type")

    def __init__(self, resources: Iterable[Resource]) -> None:
        by_key: dict[ResourceKey, Resource] = {}
        keys_by_type: dict[str, list[ResourceKey]] = {}
        for resource in resources:
            key = resource.key
            if key in by_key:
                raise DuplicateResourceError(key)
            by_key[key] = resource
            keys_by_type.setdefault(resource.type, []).append(key)

        self._by_key = by_key
        self._keys_by_type = {
            resource_type: tuple(keys) for resource_type, keys in keys_by_type.items()
        }
        log.debug(
            "Indexed %s resources across %s types", len(by_key), len(self._keys_by_type)
        )

    def lookup(self, resource_type: str, resource_id: str) -> Resource | None:
        return self._by_key.get(ResourceKey(resource_type, resource_id))

    def get(self, key: ResourceKey) -> Resource | None:
        return self._by_key.get(key)

    def of_type(self, resource_type: str) -> tuple[Resource, ...]:
        keys = self._keys_by_type.get(resource_type, ())
        return tuple(self._by_key[key] for key in keys)

    @property
    def types(self) -> tuple[str, ...]:
        return tuple(self._keys_by_type)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)
