"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from seograph.adapters.images import AssetHostUrlBuilder
from seograph.adapters.jsonapi import load_resources
from seograph.config import FALLBACK_LOCALE, SeoConfig, get_seo_config
from seograph.domain.graph import EntityGraph, ItemNotFoundError, TypedCollectionView
from seograph.domain.tags import RuleContext, TagAssembler

if TYPE_CHECKING:
    from seograph.adapters.jsonapi import DocumentInput
    from seograph.domain.model import Site
    from seograph.domain.ports import ImageUrlBuilder
    from seograph.domain.tags import TagDescriptor


log = getLogger(__name__)


def build_collection_view(document: DocumentInput) -> TypedCollectionView:
    """Index ``document`` and return a fresh view over its entity graph."""

    return TypedCollectionView(EntityGraph.from_resources(load_resources(document)))


def resolve_locale(site: Site | None, locale: str | None, config: SeoConfig) -> str:
    """Explicit locale, then configured default, then the site's first locale."""

    if locale:
        return locale
    if config.default_locale:
        return config.default_locale
    if site is not None and site.locales:
        return site.locales[0]
    return FALLBACK_LOCALE


def build_tag_assembler(
    *,
    locale: str,
    config: SeoConfig | None = None,
    image_urls: ImageUrlBuilder | None = None,
) -> TagAssembler:
    effective_config = config or get_seo_config()
    context = RuleContext(
        locale=locale,
        image_urls=image_urls or AssetHostUrlBuilder(host=effective_config.image_host),
        title_max_length=effective_config.title_max_length,
        article_types=effective_config.article_types,
    )
    return TagAssembler(context)


def build_seo_tags(
    document: DocumentInput,
    *,
    item_id: str | None = None,
    locale: str | None = None,
    config: SeoConfig | None = None,
    image_urls: ImageUrlBuilder | None = None,
) -> tuple[TagDescriptor, ...]:
    """Resolve the head tags for one page of ``document``.

    Without ``item_id`` the tags describe a site-level page; an ``item_id``
    that the document does not contain raises ``ItemNotFoundError``.
    """

    effective_config = config or get_seo_config()
    view = build_collection_view(document)
    site = view.site

    item = None
    if item_id is not None:
        item = view.item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)

    effective_locale = resolve_locale(site, locale, effective_config)
    log.info(
        "Building SEO tags: site=%s, item=%s, locale=%s", site.id, item_id, effective_locale
    )
    assembler = build_tag_assembler(
        locale=effective_locale, config=effective_config, image_urls=image_urls
    )
    return assembler.assemble(item, site)
