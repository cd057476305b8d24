"""Domain ports (protocols) implemented by adapters."""

from __future__ import annotations

from .images import ImageUrlBuilder

__all__ = ["ImageUrlBuilder"]
