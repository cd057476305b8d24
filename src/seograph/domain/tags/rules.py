"""Tag resolution rules and their fixed registry.

Every rule is a pure function of ``(item, site, context)``: ``item`` is the
page's content item (``None`` for non-item pages such as the home page),
``site`` is the site the page belongs to, and ``context`` carries values that
come from outside the document (request locale, image URL builder, title
length limit, article-like content types).

Item-level SEO settings always win over the site's fallback SEO settings; a
rule whose value cannot be resolved contributes no tags at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC
from typing import TYPE_CHECKING, Final, TypeAlias, TypeVar

from .descriptors import (
    NO_TAGS,
    MultipleTags,
    SingleTag,
    card_tag,
    meta_tag,
    og_tag,
    title_tag,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from seograph.domain.model import GlobalSeo, Image, Item, SeoSettings, Site
    from seograph.domain.ports import ImageUrlBuilder

    from .descriptors import TagResult

DEFAULT_TITLE_MAX_LENGTH: Final[int] = 60
MODIFIED_TIME_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True, slots=True)
class RuleContext:
    locale: str
    image_urls: ImageUrlBuilder
    title_max_length: int = DEFAULT_TITLE_MAX_LENGTH
    article_types: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if not self.locale.strip():
            raise ValueError("Rule context requires a locale")


TagRule: TypeAlias = "Callable[[Item | None, Site | None, RuleContext], TagResult]"

T = TypeVar("T")


def _present(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _global_seo(site: Site | None) -> GlobalSeo | None:
    return None if site is None else site.global_seo


def seo_value_with_fallback(
    select: Callable[[SeoSettings], T | None],
    item: Item | None,
    site: Site | None,
    *,
    alternative: Callable[[Item], T | None] | None = None,
) -> T | None:
    """Resolve one SEO attribute along the fallback chain.

    Order: the item's own SEO settings, then ``alternative`` read from the item
    (e.g. its plain title or image), then the site's fallback SEO settings.
    Only a non-empty value is accepted at each step.
    """

    if item is not None:
        seo_settings = item.seo_settings
        if seo_settings is not None:
            value = select(seo_settings)
            if _present(value):
                return value
        if alternative is not None:
            value = alternative(item)
            if _present(value):
                return value

    global_seo = _global_seo(site)
    if global_seo is not None and global_seo.fallback_seo is not None:
        value = select(global_seo.fallback_seo)
        if _present(value):
            return value
    return None


def og_locale_code(locale: str) -> str:
    """Format ``en`` as ``en_EN`` and ``en-us`` / ``en_US`` as ``en_US``.

    Only language and region survive: a script subtag (``zh-Hant-TW``) or a
    variant is dropped, so the result is ``zh_TW``.
    """

    language, *subtags = locale.strip().replace("-", "_").split("_")
    region = next((subtag for subtag in subtags if _is_region(subtag)), language)
    return f"{language.lower()}_{region.upper()}"


def _is_region(subtag: str) -> bool:
    return (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit())


def title(item: Item | None, site: Site | None, context: RuleContext) -> TagResult:
    resolved = seo_value_with_fallback(
        lambda seo: seo.title, item, site, alternative=lambda page_item: page_item.title
    )
    if resolved is None:
        return NO_TAGS

    global_seo = _global_seo(site)
    suffix = global_seo.title_suffix if global_seo is not None else None
    full_title = resolved
    if suffix and len(resolved + suffix) <= context.title_max_length:
        full_title = resolved + suffix

    return MultipleTags(
        (
            title_tag(full_title),
            og_tag("og:title", resolved),
            card_tag("twitter:title", resolved),
        )
    )


def description(item: Item | None, site: Site | None, _context: RuleContext) -> TagResult:
    resolved = seo_value_with_fallback(lambda seo: seo.description, item, site)
    if resolved is None:
        return NO_TAGS
    return MultipleTags(
        (
            meta_tag("description", resolved),
            og_tag("og:description", resolved),
            card_tag("twitter:description", resolved),
        )
    )


def image(item: Item | None, site: Site | None, context: RuleContext) -> TagResult:
    resolved: Image | None = seo_value_with_fallback(
        lambda seo: seo.image, item, site, alternative=lambda page_item: page_item.image
    )
    if resolved is None:
        return NO_TAGS
    url = context.image_urls(resolved)
    if not url:
        return NO_TAGS
    return MultipleTags((og_tag("og:image", url), card_tag("twitter:image", url)))


def robots(_item: Item | None, site: Site | None, _context: RuleContext) -> TagResult:
    if site is None or not site.no_index:
        return NO_TAGS
    return SingleTag(meta_tag("robots", "noindex"))


def twitter_card(_item: Item | None, _site: Site | None, _context: RuleContext) -> TagResult:
    return SingleTag(card_tag("twitter:card", "summary"))


def twitter_site(_item: Item | None, site: Site | None, _context: RuleContext) -> TagResult:
    global_seo = _global_seo(site)
    if global_seo is None or global_seo.twitter_account is None:
        return NO_TAGS
    return SingleTag(card_tag("twitter:site", global_seo.twitter_account))


def article_modified_time(
    item: Item | None, _site: Site | None, _context: RuleContext
) -> TagResult:
    if item is None:
        return NO_TAGS
    updated_at = item.updated_at
    if updated_at is None:
        return NO_TAGS
    return SingleTag(
        og_tag("article:modified_time", updated_at.astimezone(UTC).strftime(MODIFIED_TIME_FORMAT))
    )


def article_publisher(_item: Item | None, site: Site | None, _context: RuleContext) -> TagResult:
    global_seo = _global_seo(site)
    if global_seo is None or global_seo.facebook_page_url is None:
        return NO_TAGS
    return SingleTag(og_tag("article:publisher", global_seo.facebook_page_url))


def og_site_name(_item: Item | None, site: Site | None, _context: RuleContext) -> TagResult:
    global_seo = _global_seo(site)
    if global_seo is None or global_seo.site_name is None:
        return NO_TAGS
    return SingleTag(og_tag("og:site_name", global_seo.site_name))


def og_type(item: Item | None, _site: Site | None, context: RuleContext) -> TagResult:
    return SingleTag(og_tag("og:type", "article" if _is_article(item, context) else "website"))


def og_locale(_item: Item | None, _site: Site | None, context: RuleContext) -> TagResult:
    return SingleTag(og_tag("og:locale", og_locale_code(context.locale)))


def _is_article(item: Item | None, context: RuleContext) -> bool:
    if item is None:
        return False
    if not context.article_types:
        return True
    item_type = item.item_type
    return item_type is not None and item_type.api_key in context.article_types


# Declaration order is the order tags appear in the document head.
TAG_RULES: Final[tuple[tuple[str, TagRule], ...]] = (
    ("title", title),
    ("description", description),
    ("image", image),
    ("robots", robots),
    ("twitterCard", twitter_card),
    ("twitterSite", twitter_site),
    ("articleModifiedTime", article_modified_time),
    ("articlePublisher", article_publisher),
    ("ogSiteName", og_site_name),
    ("ogType", og_type),
    ("ogLocale", og_locale),
)
