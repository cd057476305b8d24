"""Tag resolution configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import read_env_int, read_env_list, read_env_var
from .errors import ConfigurationError

DEFAULT_IMAGE_HOST: Final[str] = "https://www.datocms-assets.com"
DEFAULT_TITLE_MAX_LENGTH: Final[int] = 60
FALLBACK_LOCALE: Final[str] = "en"


@dataclass(frozen=True, slots=True)
class SeoConfig:
    """Holds the knobs of tag resolution that are not part of the document."""

    image_host: str = DEFAULT_IMAGE_HOST
    default_locale: str | None = None
    title_max_length: int = DEFAULT_TITLE_MAX_LENGTH
    article_types: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if self.title_max_length <= 0:
            raise ConfigurationError(
                f"Title max length must be positive, got {self.title_max_length}"
            )
        if not self.image_host:
            raise ConfigurationError("Image host must not be empty")


def get_seo_config() -> SeoConfig:
    return SeoConfig(
        image_host=read_env_var("SEOGRAPH_IMAGE_HOST") or DEFAULT_IMAGE_HOST,
        default_locale=read_env_var("SEOGRAPH_DEFAULT_LOCALE"),
        title_max_length=read_env_int("SEOGRAPH_TITLE_MAX_LENGTH", DEFAULT_TITLE_MAX_LENGTH),
        article_types=frozenset(read_env_list("SEOGRAPH_ARTICLE_TYPES")),
    )
