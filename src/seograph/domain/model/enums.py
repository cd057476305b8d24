"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ResourceType(StrEnum):
    """Resource ``type`` discriminators the graph knows how to wrap."""

    ITEM = "item"
    SITE = "site"
    ITEM_TYPE = "item_type"
    FIELD = "field"
