"""Mini README: Tests for the package logging helpers.

Checks that explicit levels are applied after import-time configuration
and that repeated configuration never stacks handlers.
"""

from __future__ import annotations

import logging

import pytest

from accessory_detector.logging_utils import configure_root_logger, get_logger


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    original = logger.level
    yield logger
    logger.setLevel(original)


def test_explicit_level_overrides_import_time_default(root_logger: logging.Logger) -> None:
    handlers_before = list(root_logger.handlers)

    configure_root_logger("debug")
    assert root_logger.level == logging.DEBUG
    configure_root_logger(logging.WARNING)
    assert root_logger.level == logging.WARNING

    assert root_logger.handlers == handlers_before


def test_get_logger_keeps_configured_level(root_logger: logging.Logger) -> None:
    """Module loggers created later must not reset the chosen level."""

    configure_root_logger("ERROR")
    get_logger("accessory_detector.late_import")

    assert root_logger.level == logging.ERROR


def test_unknown_level_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        configure_root_logger("chatty")
