from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from seograph.adapters.images import AssetHostUrlBuilder
from seograph.adapters.jsonapi import load_resources
from seograph.domain.graph import EntityGraph, TypedCollectionView
from seograph.domain.tags import RuleContext
from tests.support.documents import make_document

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def make_view() -> Callable[..., TypedCollectionView]:
    """Build a collection view over ``make_document(**overrides)``."""

    def factory(**overrides: Any) -> TypedCollectionView:
        resources = load_resources(make_document(**overrides))
        return TypedCollectionView(EntityGraph.from_resources(resources))

    return factory


@pytest.fixture
def rule_context() -> RuleContext:
    return RuleContext(locale="en", image_urls=AssetHostUrlBuilder())
