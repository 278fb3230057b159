"""Mini README: Core package initialiser for the accessory detector.

Classifies character accessories as Hair, Hat or Face from their
attachment markers and decides whether a hit part counts as a headshot.
The common entry points are re-exported here so gameplay code can simply
``from accessory_detector import is_headshot``.
"""

from .classification import (
    AccessoryCategory,
    AccessoryClassifier,
    AttachmentTable,
    CharacterAccessoryInfo,
    DEFAULT_ATTACHMENT_TABLE,
)
from .detector import (
    get_accessories_by_type,
    get_accessory_type,
    get_character_accessory_info,
    get_classifier,
    has_head_accessories,
    is_head_part,
    is_headshot,
)
from .logging_utils import get_logger
from .scene import REGISTRY, InstanceNode, MemoryNode, SceneNode

__all__ = [
    "AccessoryCategory",
    "AccessoryClassifier",
    "AttachmentTable",
    "CharacterAccessoryInfo",
    "DEFAULT_ATTACHMENT_TABLE",
    "InstanceNode",
    "MemoryNode",
    "REGISTRY",
    "SceneNode",
    "get_accessories_by_type",
    "get_accessory_type",
    "get_character_accessory_info",
    "get_classifier",
    "get_logger",
    "has_head_accessories",
    "is_head_part",
    "is_headshot",
]
