"""Pydantic models describing JSON:API documents (camelCase keys)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _stringify_id(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class JsonApiBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ResourceIdentifier(JsonApiBaseModel):
    type: str = Field(min_length=1)
    id: str = Field(min_length=1)

    _coerce_id = field_validator("id", mode="before")(_stringify_id)


class RelationshipPayload(JsonApiBaseModel):
    """One entry of ``relationships``; ``data`` may be absent when only links are sent."""

    data: list[ResourceIdentifier] | ResourceIdentifier | None = None

    @property
    def has_data(self) -> bool:
        return "data" in self.model_fields_set


class ResourcePayload(JsonApiBaseModel):
    type: str = Field(min_length=1)
    id: str = Field(min_length=1)
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, RelationshipPayload] = Field(default_factory=dict)

    _coerce_id = field_validator("id", mode="before")(_stringify_id)

    @field_validator("attributes", "relationships", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return {} if value is None else value


class DocumentPayload(JsonApiBaseModel):
    data: list[ResourcePayload]
    included: list[ResourcePayload] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _wrap_single_resource(cls, value: object) -> object:
        if isinstance(value, Mapping):
            return [value]
        return value

    @field_validator("included", mode="before")
    @classmethod
    def _null_included(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def resources(self) -> Sequence[ResourcePayload]:
        return [*self.data, *self.included]
