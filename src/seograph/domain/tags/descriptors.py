"""Tag descriptors and the result variant produced by resolution rules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, TypeAlias, assert_never


def _empty_attributes() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class TagDescriptor:
    """A head tag to render: its name, attributes and optional inner text."""

    tag_name: str
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes)
    content: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def as_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "tagName": self.tag_name,
            "attributes": dict(self.attributes),
        }
        if self.content is not None:
            payload["content"] = self.content
        return payload


def meta_tag(name: str, content: str) -> TagDescriptor:
    return TagDescriptor("meta", {"name": name, "content": content})


def og_tag(property_name: str, content: str) -> TagDescriptor:
    return TagDescriptor("meta", {"property": property_name, "content": content})


def card_tag(name: str, content: str) -> TagDescriptor:
    return TagDescriptor("meta", {"name": name, "content": content})


def title_tag(content: str) -> TagDescriptor:
    return TagDescriptor("title", content=content)


@dataclass(frozen=True, slots=True)
class NoTags:
    pass


@dataclass(frozen=True, slots=True)
class SingleTag:
    tag: TagDescriptor


@dataclass(frozen=True, slots=True)
class MultipleTags:
    tags: tuple[TagDescriptor, ...]


TagResult: TypeAlias = NoTags | SingleTag | MultipleTags

NO_TAGS: Final[NoTags] = NoTags()


def flatten(result: TagResult) -> tuple[TagDescriptor, ...]:
    match result:
        case NoTags():
            return ()
        case SingleTag(tag=tag):
            return (tag,)
        case MultipleTags(tags=tags):
            return tags
        case _:
            assert_never(result)
