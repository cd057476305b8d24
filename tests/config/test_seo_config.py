from __future__ import annotations

import pytest

from seograph.config import (
    DEFAULT_IMAGE_HOST,
    ConfigurationError,
    SeoConfig,
    get_seo_config,
    read_env_int,
    read_env_list,
    read_env_var,
)

ENV_VARS = (
    "SEOGRAPH_IMAGE_HOST",
    "SEOGRAPH_DEFAULT_LOCALE",
    "SEOGRAPH_TITLE_MAX_LENGTH",
    "SEOGRAPH_ARTICLE_TYPES",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment() -> None:
    config = get_seo_config()

    assert config == SeoConfig()
    assert config.image_host == DEFAULT_IMAGE_HOST
    assert config.default_locale is None
    assert config.title_max_length == 60
    assert config.article_types == frozenset()


def test_values_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEOGRAPH_IMAGE_HOST", "https://cdn.example.com")
    monkeypatch.setenv("SEOGRAPH_DEFAULT_LOCALE", "it")
    monkeypatch.setenv("SEOGRAPH_TITLE_MAX_LENGTH", "70")
    monkeypatch.setenv("SEOGRAPH_ARTICLE_TYPES", "article, blog_post,,")

    config = get_seo_config()

    assert config.image_host == "https://cdn.example.com"
    assert config.default_locale == "it"
    assert config.title_max_length == 70
    assert config.article_types == frozenset({"article", "blog_post"})


def test_blank_values_count_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEOGRAPH_DEFAULT_LOCALE", "   ")

    assert read_env_var("SEOGRAPH_DEFAULT_LOCALE") is None
    assert read_env_var("SEOGRAPH_DEFAULT_LOCALE", "en") == "en"
    assert read_env_list("SEOGRAPH_ARTICLE_TYPES") == ()


def test_malformed_integer_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEOGRAPH_TITLE_MAX_LENGTH", "sixty")

    with pytest.raises(ConfigurationError) as exc:
        read_env_int("SEOGRAPH_TITLE_MAX_LENGTH", 60)

    assert "SEOGRAPH_TITLE_MAX_LENGTH" in str(exc.value)


def test_non_positive_title_length_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEOGRAPH_TITLE_MAX_LENGTH", "0")

    with pytest.raises(ConfigurationError, match="must be positive"):
        get_seo_config()
