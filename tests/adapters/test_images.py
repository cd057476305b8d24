from __future__ import annotations

from seograph.adapters.images import AssetHostUrlBuilder
from seograph.domain.model import Image
from seograph.domain.ports import ImageUrlBuilder


def test_default_host() -> None:
    builder = AssetHostUrlBuilder()

    assert builder(Image(path="/seo.png")) == "https://www.datocms-assets.com/seo.png"
    assert isinstance(builder, ImageUrlBuilder)


def test_custom_host_and_params() -> None:
    builder = AssetHostUrlBuilder(
        host="https://cdn.example.com/", params={"w": "1200", "fm": "jpg"}
    )

    assert builder(Image(path="seo.png")) == "https://cdn.example.com/seo.png?fm=jpg&w=1200"
