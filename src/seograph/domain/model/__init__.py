"""Public domain model surface."""

from __future__ import annotations

from seograph.domain.model.entities import (
    ENTITY_CLASSES,
    Entity,
    Field,
    Item,
    ItemType,
    Site,
    entity_class_for,
    parse_timestamp,
)
from seograph.domain.model.enums import ResourceType
from seograph.domain.model.resource import (
    RelationshipLink,
    Resource,
    ResourceKey,
    ToMany,
    ToOne,
)
from seograph.domain.model.values import GlobalSeo, Image, SeoSettings

__all__ = [  # noqa: RUF022
    # records
    "Resource",
    "ResourceKey",
    "RelationshipLink",
    "ToOne",
    "ToMany",
    # enums
    "ResourceType",
    # values
    "Image",
    "SeoSettings",
    "GlobalSeo",
    # entities
    "ENTITY_CLASSES",
    "Entity",
    "Item",
    "Site",
    "ItemType",
    "Field",
    "entity_class_for",
    "parse_timestamp",
]
