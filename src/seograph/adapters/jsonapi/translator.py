"""Translate JSON:API documents into flat domain resources."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from seograph.domain.model import Resource, ResourceKey, ToMany, ToOne

from .casing import camelize_keys
from .schema import DocumentPayload, ResourceIdentifier

if TYPE_CHECKING:
    from seograph.domain.model import RelationshipLink

    from .schema import RelationshipPayload, ResourcePayload


log = getLogger(__name__)

DocumentInput = DocumentPayload | Mapping[str, object]


class DocumentError(ValueError):
    """Raised when a payload is not a valid JSON:API document."""


def parse_document(payload: DocumentInput, *, camelize: bool = True) -> DocumentPayload:
    """Validate ``payload``; raw snake_case keys are camelized first unless disabled."""

    if isinstance(payload, DocumentPayload):
        return payload
    source = camelize_keys(payload) if camelize else payload
    try:
        return DocumentPayload.model_validate(source)
    except ValidationError as exc:
        raise DocumentError(f"Invalid JSON:API document: {exc}") from exc


def to_resources(document: DocumentPayload) -> tuple[Resource, ...]:
    resources = tuple(_to_resource(payload) for payload in document.resources)
    log.debug(
        "Translated document: data=%s, included=%s",
        len(document.data),
        len(document.included),
    )
    return resources


def load_resources(payload: DocumentInput, *, camelize: bool = True) -> tuple[Resource, ...]:
    return to_resources(parse_document(payload, camelize=camelize))


def _to_resource(payload: ResourcePayload) -> Resource:
    relationships: dict[str, RelationshipLink] = {}
    for name, relationship in payload.relationships.items():
        link = _to_link(relationship)
        if link is None:
            log.debug(
                "Skipping relationship %s of %s:%s without data", name, payload.type, payload.id
            )
            continue
        relationships[name] = link
    return Resource(
        type=payload.type,
        id=payload.id,
        attributes=payload.attributes,
        relationships=relationships,
    )


def _to_link(relationship: RelationshipPayload) -> RelationshipLink | None:
    if not relationship.has_data:
        return None
    data = relationship.data
    if data is None:
        return ToOne(None)
    if isinstance(data, ResourceIdentifier):
        return ToOne(_to_key(data))
    return ToMany(tuple(_to_key(identifier) for identifier in data))


def _to_key(identifier: ResourceIdentifier) -> ResourceKey:
    return ResourceKey(identifier.type, identifier.id)
