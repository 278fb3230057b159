"""Mini README: Module-level shortcuts backed by a shared classifier.

Structure:
    * get_classifier - cached classifier built from the active settings.
    * is_head_part, get_accessory_type, get_accessories_by_type,
      has_head_accessories, is_headshot, get_character_accessory_info -
      thin delegates for callers that do not need a custom table.

Gameplay code usually wants one call per hit event; these helpers keep
that call short while ``AccessoryClassifier`` stays available for tests
and custom rigs.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Union

from .classification import AccessoryCategory, AccessoryClassifier, CharacterAccessoryInfo
from .configuration import build_attachment_table, get_settings
from .logging_utils import get_logger
from .scene import SceneNode

LOGGER = get_logger(__name__)


@lru_cache()
def get_classifier() -> AccessoryClassifier:
    """Return the process-wide classifier configured from settings."""

    settings = get_settings()
    LOGGER.info("Building default classifier for environment '%s'", settings.environment)
    return AccessoryClassifier(build_attachment_table(settings))


def is_head_part(part: Optional[SceneNode]) -> bool:
    """Return whether ``part`` is a character head."""

    return get_classifier().is_head_part(part)


def get_accessory_type(accessory: Optional[SceneNode]) -> Optional[AccessoryCategory]:
    """Classify ``accessory`` by its handle markers, or ``None`` if it cannot be."""

    return get_classifier().get_accessory_type(accessory)


def get_accessories_by_type(
    character: Optional[SceneNode], category: Union[str, AccessoryCategory, None]
) -> List[SceneNode]:
    """Return the character's accessories of ``category``."""

    return get_classifier().get_accessories_by_type(character, category)


def has_head_accessories(character: Optional[SceneNode]) -> bool:
    """Return whether the character wears any hair, hat or face accessory."""

    return get_classifier().has_head_accessories(character)


def is_headshot(hit_part: Optional[SceneNode], character: Optional[SceneNode]) -> bool:
    """Return whether a hit on ``hit_part`` counts as a headshot."""

    return get_classifier().is_headshot(hit_part, character)


def get_character_accessory_info(character: Optional[SceneNode]) -> CharacterAccessoryInfo:
    """Break down the character's head accessories by category."""

    return get_classifier().get_character_accessory_info(character)
