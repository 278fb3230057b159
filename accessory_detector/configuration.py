"""Mini README: Centralised configuration for the accessory detector.

Structure:
    * AccessoryDetectorSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.
    * build_attachment_table - turn settings into the table the classifier uses.

Usage:
    Settings come from ``ACCESSORY_DETECTOR_*`` environment variables or a
    ``.env`` file. Point ``ACCESSORY_DETECTOR_ATTACHMENT_TABLE_PATH`` at a
    JSON table to support a custom avatar rig, and set
    ``ACCESSORY_DETECTOR_CATEGORY_PRIORITY`` (a JSON list) to change which
    category wins when a handle carries markers from several.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .classification.attachments import (
    CLASSIFIABLE_CATEGORIES,
    DEFAULT_ATTACHMENT_TABLE,
    AttachmentTable,
    load_attachment_table,
    normalise_priority,
)


class AccessoryDetectorSettings(BaseSettings):
    """Runtime configuration for the accessory detector."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level used by the CLI and embedding hosts.",
    )
    attachment_table_path: Optional[Path] = Field(
        None,
        description="JSON attachment table overriding the stock humanoid rig.",
    )
    category_priority: List[str] = Field(
        default_factory=lambda: [category.value for category in CLASSIFIABLE_CATEGORIES],
        description="Order in which Hair, Face and Hat are tested during classification.",
    )

    class Config:
        env_prefix = "ACCESSORY_DETECTOR_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def known_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @validator("attachment_table_path", pre=True)
    def expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser().resolve()

    @validator("category_priority")
    def valid_priority(cls, value: List[str]) -> List[str]:
        return [category.value for category in normalise_priority(value)]


@lru_cache()
def get_settings() -> AccessoryDetectorSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return AccessoryDetectorSettings()


def build_attachment_table(settings: AccessoryDetectorSettings) -> AttachmentTable:
    """Return the attachment table described by ``settings``."""

    if settings.attachment_table_path is not None:
        table = load_attachment_table(settings.attachment_table_path)
    else:
        table = DEFAULT_ATTACHMENT_TABLE
    return table.with_priority(settings.category_priority)
