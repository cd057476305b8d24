"""Port for turning stored image metadata into public URLs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from seograph.domain.model import Image


@runtime_checkable
class ImageUrlBuilder(Protocol):
    """Callable port returning the absolute URL of an uploaded image."""

    def __call__(self, image: Image) -> str:
        ...


__all__ = ["ImageUrlBuilder"]
