"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def read_env_var(name: str, default: str | None = None) -> str | None:
    """Return the stripped value of ``name``, treating blank values as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def read_env_int(name: str, default: int) -> int:
    value = read_env_var(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid integer for {name}: {value!r}") from exc


def read_env_list(name: str) -> tuple[str, ...]:
    """Return the comma separated entries of ``name`` without blanks."""

    value = read_env_var(name)
    if value is None:
        return ()
    return tuple(entry.strip() for entry in value.split(",") if entry.strip())
