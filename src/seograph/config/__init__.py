"""Application configuration helpers."""

from __future__ import annotations

from .env import read_env_int, read_env_list, read_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .seo import (
    DEFAULT_IMAGE_HOST,
    DEFAULT_TITLE_MAX_LENGTH,
    FALLBACK_LOCALE,
    SeoConfig,
    get_seo_config,
)

__all__ = [
    "DEFAULT_IMAGE_HOST",
    "DEFAULT_TITLE_MAX_LENGTH",
    "FALLBACK_LOCALE",
    "ConfigurationError",
    "SeoConfig",
    "configure_logging",
    "get_seo_config",
    "read_env_int",
    "read_env_list",
    "read_env_var",
]
