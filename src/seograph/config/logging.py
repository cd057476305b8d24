"""Logging setup for the seograph command line."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)-7s %(name)s: %(message)s"


def configure_logging(*, level: int | str = logging.WARNING, force: bool = False) -> None:
    """Send seograph log records to stderr.

    Standard output carries the JSON tag list, so logs never go there. ``level``
    accepts a number or a level name such as ``"debug"``. Third-party loggers stay
    at WARNING whatever the level; only ``seograph.*`` follows it.
    """

    resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr, force=force)
    logging.getLogger("seograph").setLevel(resolved)
