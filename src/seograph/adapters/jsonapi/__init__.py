"""Public interface for the JSON:API document adapter."""

from __future__ import annotations

from .casing import camelize, camelize_keys
from .schema import DocumentPayload, RelationshipPayload, ResourceIdentifier, ResourcePayload
from .translator import DocumentError, DocumentInput, load_resources, parse_document, to_resources

__all__ = [
    "DocumentError",
    "DocumentInput",
    "DocumentPayload",
    "RelationshipPayload",
    "ResourceIdentifier",
    "ResourcePayload",
    "camelize",
    "camelize_keys",
    "load_resources",
    "parse_document",
    "to_resources",
]
