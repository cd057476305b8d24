"""Value objects stored inside resource attributes.

These are not entities: they have no identity and are rebuilt from the raw
(camelCase) attribute mappings every time an entity accessor reads them.
Blank strings are treated as missing so rules never see empty content.
Non-blank strings are kept verbatim, surrounding whitespace included.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import cast


def text_or_none(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    return value if value.strip() else None


def _int_or_none(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


def as_mapping(value: object) -> Mapping[str, object] | None:
    if isinstance(value, Mapping) and value:
        return cast(Mapping[str, object], value)
    return None


@dataclass(frozen=True, slots=True)
class Image:
    path: str
    width: int | None = None
    height: int | None = None
    format: str | None = None
    size: int | None = None

    @classmethod
    def from_mapping(cls, value: object) -> Image | None:
        """Return an image for a stored upload payload, or ``None`` when it has no path."""

        if isinstance(value, Image):
            return value
        payload = as_mapping(value)
        if payload is None:
            return None
        path = text_or_none(payload.get("path"))
        if path is None:
            return None
        return cls(
            path=path,
            width=_int_or_none(payload.get("width")),
            height=_int_or_none(payload.get("height")),
            format=text_or_none(payload.get("format")),
            size=_int_or_none(payload.get("size")),
        )


@dataclass(frozen=True, slots=True)
class SeoSettings:
    title: str | None = None
    description: str | None = None
    image: Image | None = None

    @classmethod
    def from_mapping(cls, value: object) -> SeoSettings | None:
        if isinstance(value, SeoSettings):
            return value
        payload = as_mapping(value)
        if payload is None:
            return None
        return cls(
            title=text_or_none(payload.get("title")),
            description=text_or_none(payload.get("description")),
            image=Image.from_mapping(payload.get("image")),
        )


@dataclass(frozen=True, slots=True)
class GlobalSeo:
    site_name: str | None = None
    title_suffix: str | None = None
    twitter_account: str | None = None
    facebook_page_url: str | None = None
    fallback_seo: SeoSettings | None = None

    @classmethod
    def from_mapping(cls, value: object) -> GlobalSeo | None:
        if isinstance(value, GlobalSeo):
            return value
        payload = as_mapping(value)
        if payload is None:
            return None
        return cls(
            site_name=text_or_none(payload.get("siteName")),
            title_suffix=text_or_none(payload.get("titleSuffix")),
            twitter_account=text_or_none(payload.get("twitterAccount")),
            facebook_page_url=text_or_none(payload.get("facebookPageUrl")),
            fallback_seo=SeoSettings.from_mapping(payload.get("fallbackSeo")),
        )
