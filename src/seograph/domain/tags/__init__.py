"""SEO and social-sharing tag resolution."""

from __future__ import annotations

from .assembler import TagAssembler
from .descriptors import (
    NO_TAGS,
    MultipleTags,
    NoTags,
    SingleTag,
    TagDescriptor,
    TagResult,
    card_tag,
    flatten,
    meta_tag,
    og_tag,
    title_tag,
)
from .rules import (
    TAG_RULES,
    RuleContext,
    TagRule,
    og_locale_code,
    seo_value_with_fallback,
)

__all__ = [
    "NO_TAGS",
    "TAG_RULES",
    "MultipleTags",
    "NoTags",
    "RuleContext",
    "SingleTag",
    "TagAssembler",
    "TagDescriptor",
    "TagResult",
    "TagRule",
    "card_tag",
    "flatten",
    "meta_tag",
    "og_locale_code",
    "og_tag",
    "seo_value_with_fallback",
    "title_tag",
]
