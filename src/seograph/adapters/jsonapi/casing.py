"""Key casing for raw API payloads (``updated_at`` -> ``updatedAt``)."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import cast

_SEPARATED_SEGMENT = re.compile(r"(?<=[^\-_])[\-_]+([^\-_])")


def camelize(key: str) -> str:
    """Camelize one snake_case or kebab-case key the way ``humps.camelize`` does.

    Underscores and hyphens both separate words and the first character is
    lowercased unless the key opens with an acronym (``URLPath``). All-caps
    and numeric keys, leading separators and camelCase keys are kept.
    """

    if key.isupper() or key.isnumeric():
        return key
    if key and not key[:2].isupper():
        key = key[0].lower() + key[1:]
    return _SEPARATED_SEGMENT.sub(lambda match: match.group(1).upper(), key)


def camelize_keys(value: object) -> object:
    """Return ``value`` with every mapping key camelized, recursively.

    Only keys change: string values such as ``"item_type"`` in a relationship
    identifier are left alone.
    """

    if isinstance(value, Mapping):
        mapping = cast(Mapping[object, object], value)
        return {
            (camelize(key) if isinstance(key, str) else key): camelize_keys(item)
            for key, item in mapping.items()
        }
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return [camelize_keys(item) for item in cast(Sequence[object], value)]
    return value
