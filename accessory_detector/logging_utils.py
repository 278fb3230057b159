"""Mini README: Package-wide logging helpers for the accessory detector.

Structure:
    * configure_root_logger - one-shot handler installation plus level control.
    * get_logger - module logger factory used across the package.

Usage:
    Modules call ``get_logger(__name__)`` at import time. Host applications
    that already configure logging can call ``configure_root_logger`` with
    their own level at any time; the handler is only added once so embedding
    the detector never duplicates output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _resolve_level(level: Union[int, str]) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Install the package handler once and apply ``level`` to the root logger.

    The handler is only ever added on the first call. ``level`` is applied on
    every call that passes one, so a CLI flag read after modules have been
    imported still takes effect. The first call defaults to INFO.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()

    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(handler)
        _LOGGER_INITIALISED = True
        if level is None:
            level = logging.INFO

    if level is not None:
        root_logger.setLevel(_resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger without overriding the configured level."""

    configure_root_logger()
    return logging.getLogger(name)
