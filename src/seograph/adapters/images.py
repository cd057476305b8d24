"""Asset-host implementation of the image URL port."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from seograph.config import DEFAULT_IMAGE_HOST

if TYPE_CHECKING:
    from collections.abc import Mapping

    from seograph.domain.model import Image


@dataclass(frozen=True, slots=True)
class AssetHostUrlBuilder:
    """Join an upload path onto the asset host, with optional transformation params."""

    host: str = DEFAULT_IMAGE_HOST
    params: Mapping[str, str] = field(default_factory=dict)

    def __call__(self, image: Image) -> str:
        url = f"{self.host.rstrip('/')}/{image.path.lstrip('/')}"
        if self.params:
            url = f"{url}?{urlencode(sorted(self.params.items()))}"
        return url
