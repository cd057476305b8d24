"""Typed entity wrappers over graph resources.

An entity is a thin view: it holds its ``Resource`` and the graph it came from,
reads attributes on access and resolves relationships through the graph every
time they are requested. Two wrappers of the same ``(type, id)`` compare equal.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING, ClassVar, TypeVar, cast

from .enums import ResourceType
from .resource import ResourceKey, ToMany
from .values import GlobalSeo, Image, SeoSettings, as_mapping, text_or_none

if TYPE_CHECKING:
    from seograph.domain.graph.graph import EntityGraph

    from .resource import Resource


E = TypeVar("E", bound="Entity")


def parse_timestamp(value: object) -> datetime | None:
    """Return an aware datetime for an ISO-8601 attribute; naive values are taken as UTC."""

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _attribute_name(api_key: str) -> str:
    # field api keys are snake_case, stored attributes are camelCase
    head, *rest = api_key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class Entity:
    """Base wrapper; used as-is for resource types without a dedicated class."""

    RESOURCE_TYPE: ClassVar[str | None] = None

    __slots__ = ("_graph", "_resource")

    def __init__(self, resource: Resource, graph: EntityGraph) -> None:
        self._resource = resource
        self._graph = graph

    @property
    def id(self) -> str:
        return self._resource.id

    @property
    def type(self) -> str:
        return self._resource.type

    @property
    def key(self) -> ResourceKey:
        return self._resource.key

    @property
    def resource(self) -> Resource:
        return self._resource

    @property
    def graph(self) -> EntityGraph:
        return self._graph

    def get(self, name: str, default: object = None) -> object:
        """Return a raw attribute by its (camelCase) name."""
        return self._resource.attribute(name, default)

    def _text(self, name: str) -> str | None:
        return text_or_none(self._resource.attributes.get(name))

    def _flag(self, name: str) -> bool:
        return self._resource.attributes.get(name) is True

    def _to_one(self, name: str, entity_cls: type[E]) -> E | None:
        related = self._graph.to_one(self._resource, name)
        return related if isinstance(related, entity_cls) else None

    def _to_many(self, name: str, entity_cls: type[E]) -> tuple[E, ...]:
        return tuple(
            related
            for related in self._graph.to_many(self._resource, name)
            if isinstance(related, entity_cls)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key})"


class Item(Entity):
    RESOURCE_TYPE = ResourceType.ITEM

    __slots__ = ()

    @property
    def updated_at(self) -> datetime | None:
        return parse_timestamp(self._resource.attributes.get("updatedAt"))

    @property
    def is_valid(self) -> bool:
        return self._flag("isValid")

    @property
    def title(self) -> str | None:
        return self._text("title")

    @property
    def seo_settings(self) -> SeoSettings | None:
        return SeoSettings.from_mapping(self._resource.attributes.get("seoSettings"))

    @property
    def image(self) -> Image | None:
        return Image.from_mapping(self._resource.attributes.get("image"))

    @property
    def item_type(self) -> ItemType | None:
        return self._to_one("itemType", ItemType)

    def fields(self) -> Mapping[str, object]:
        """Raw values keyed by the api key of each field of the item type, in field order."""
        item_type = self.item_type
        if item_type is None:
            return {}
        return {
            api_key: self.get(_attribute_name(api_key))
            for field in item_type.fields
            if (api_key := field.api_key) is not None
        }


class Site(Entity):
    RESOURCE_TYPE = ResourceType.SITE

    __slots__ = ()

    @property
    def name(self) -> str | None:
        return self._text("name")

    @property
    def locales(self) -> tuple[str, ...]:
        value = self._resource.attributes.get("locales")
        if not isinstance(value, Sequence) or isinstance(value, str):
            return ()
        return tuple(locale for locale in cast(Sequence[object], value) if isinstance(locale, str))

    @property
    def domain(self) -> str | None:
        return self._text("domain")

    @property
    def internal_domain(self) -> str | None:
        return self._text("internalDomain")

    @property
    def global_seo(self) -> GlobalSeo | None:
        return GlobalSeo.from_mapping(self._resource.attributes.get("globalSeo"))

    @property
    def no_index(self) -> bool:
        return self._flag("noIndex")

    @property
    def item_types(self) -> tuple[ItemType, ...]:
        return self._to_many("itemTypes", ItemType)

    @property
    def menu_item_keys(self) -> tuple[ResourceKey, ...]:
        """Raw keys of the menu items; menu items themselves are not modelled."""
        link = self._resource.relationship("menuItems")
        return link.targets if isinstance(link, ToMany) else ()


class ItemType(Entity):
    RESOURCE_TYPE = ResourceType.ITEM_TYPE

    __slots__ = ()

    @property
    def name(self) -> str | None:
        return self._text("name")

    @property
    def api_key(self) -> str | None:
        return self._text("apiKey")

    @property
    def singleton(self) -> bool:
        return self._flag("singleton")

    @property
    def sortable(self) -> bool:
        return self._flag("sortable")

    @property
    def fields(self) -> tuple[Field, ...]:
        """Fields ordered by ``position``; fields without one keep document order at the end."""
        fields = self._to_many("fields", Field)
        return tuple(
            sorted(fields, key=lambda field: (field.position is None, field.position or 0))
        )

    @property
    def singleton_item(self) -> Item | None:
        return self._to_one("singletonItem", Item)


class Field(Entity):
    RESOURCE_TYPE = ResourceType.FIELD

    __slots__ = ()

    @property
    def label(self) -> str | None:
        return self._text("label")

    @property
    def field_type(self) -> str | None:
        return self._text("fieldType")

    @property
    def api_key(self) -> str | None:
        return self._text("apiKey")

    @property
    def hint(self) -> str | None:
        return self._text("hint")

    @property
    def localized(self) -> bool:
        return self._flag("localized")

    @property
    def validators(self) -> Mapping[str, object]:
        return as_mapping(self._resource.attributes.get("validators")) or {}

    @property
    def position(self) -> int | None:
        value = self._resource.attributes.get("position")
        return value if isinstance(value, int) and not isinstance(value, bool) else None

    @property
    def appearance(self) -> Mapping[str, object]:
        attributes = self._resource.attributes
        # the API has historically spelled this attribute "appeareance"
        value = attributes.get("appearance", attributes.get("appeareance"))
        return as_mapping(value) or {}

    @property
    def item_type(self) -> ItemType | None:
        return self._to_one("itemType", ItemType)


ENTITY_CLASSES: Mapping[str, type[Entity]] = {
    ResourceType.ITEM: Item,
    ResourceType.SITE: Site,
    ResourceType.ITEM_TYPE: ItemType,
    ResourceType.FIELD: Field,
}


def entity_class_for(resource_type: str) -> type[Entity]:
    return ENTITY_CLASSES.get(resource_type, Entity)
