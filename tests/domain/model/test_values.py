from __future__ import annotations

import pytest

from seograph.domain.model import GlobalSeo, Image, SeoSettings


def test_image_from_mapping() -> None:
    image = Image.from_mapping(
        {"path": "/seo.png", "width": 569, "height": 629, "format": "png", "size": 572451}
    )

    assert image == Image(path="/seo.png", width=569, height=629, format="png", size=572451)


@pytest.mark.parametrize("value", [None, {}, {"path": ""}, {"width": 10}, "not-an-image"])
def test_image_without_path_is_absent(value: object) -> None:
    assert Image.from_mapping(value) is None


def test_seo_settings_blank_values_are_absent() -> None:
    settings = SeoSettings.from_mapping({"title": "  ", "description": "Text", "image": None})

    assert settings == SeoSettings(title=None, description="Text", image=None)


def test_global_seo_from_camel_case_mapping() -> None:
    global_seo = GlobalSeo.from_mapping(
        {
            "siteName": "My site",
            "titleSuffix": " - My site",
            "twitterAccount": "@steffoz",
            "facebookPageUrl": "http://facebook.com/mark.smith",
            "fallbackSeo": {"description": "Default description"},
        }
    )

    assert global_seo is not None
    assert global_seo.site_name == "My site"
    assert global_seo.title_suffix == " - My site"
    assert global_seo.twitter_account == "@steffoz"
    assert global_seo.facebook_page_url == "http://facebook.com/mark.smith"
    assert global_seo.fallback_seo == SeoSettings(description="Default description")


def test_global_seo_absent_for_empty_payload() -> None:
    assert GlobalSeo.from_mapping(None) is None
    assert GlobalSeo.from_mapping({}) is None


def test_global_seo_keeps_non_blank_values_verbatim() -> None:
    global_seo = GlobalSeo.from_mapping(
        {"siteName": " My site ", "twitterAccount": "@steffoz ", "facebookPageUrl": "   "}
    )

    assert global_seo == GlobalSeo(site_name=" My site ", twitter_account="@steffoz ")
