from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from seograph.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def restore_package_level() -> Iterator[None]:
    package_logger = logging.getLogger("seograph")
    previous = package_logger.level
    yield
    package_logger.setLevel(previous)


def test_level_applies_to_package_loggers_only() -> None:
    configure_logging(level=logging.DEBUG)

    assert logging.getLogger("seograph.domain.graph").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("seograph").level == logging.DEBUG


def test_level_accepts_names() -> None:
    configure_logging(level="info")

    assert logging.getLogger("seograph").level == logging.INFO


def test_unknown_level_name_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(level="chatty")
