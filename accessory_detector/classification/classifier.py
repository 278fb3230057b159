"""Mini README: Attachment-based accessory classification and headshot checks.

Structure:
    * CharacterAccessoryInfo - per-category breakdown of a character's accessories.
    * AccessoryClassifier - stateless queries over a character's scene tree.

Every query reads the scene as it is at call time and never raises on
missing or malformed nodes: it returns ``False``, ``None``, an empty list or
an empty breakdown instead. Nothing is cached between calls because the
host engine may change the tree at any moment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from .attachments import (
    ACCESSORY_CAPABILITY,
    CLASSIFIABLE_CATEGORIES,
    DEFAULT_ATTACHMENT_TABLE,
    FACE_DECAL_NAME,
    HANDLE_NAME,
    HEAD_PART_NAMES,
    AccessoryCategory,
    AttachmentTable,
)
from ..logging_utils import get_logger
from ..scene.base import SceneNode

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class CharacterAccessoryInfo:
    """Accessories worn by a character, grouped by category."""

    hair: Tuple[SceneNode, ...] = ()
    hat: Tuple[SceneNode, ...] = ()
    face: Tuple[SceneNode, ...] = ()

    @property
    def total(self) -> int:
        return len(self.hair) + len(self.hat) + len(self.face)

    def by_category(self, category: Union[str, AccessoryCategory]) -> Tuple[SceneNode, ...]:
        """Return the accessories recorded for ``category``."""

        resolved = AccessoryCategory.lookup(category)
        if resolved is AccessoryCategory.HAIR:
            return self.hair
        if resolved is AccessoryCategory.HAT:
            return self.hat
        if resolved is AccessoryCategory.FACE:
            return self.face
        return ()

    def as_dict(self) -> Dict[str, object]:
        """Accessory names per category plus the total, for debug output."""

        return {
            "Hair": [node.name for node in self.hair],
            "Hat": [node.name for node in self.hat],
            "Face": [node.name for node in self.face],
            "Total": self.total,
        }


def _is_node(value: object) -> bool:
    return isinstance(value, SceneNode)


class AccessoryClassifier:
    """Classify accessories by the attachment markers under their handle."""

    def __init__(self, table: Optional[AttachmentTable] = None) -> None:
        self.table = table or DEFAULT_ATTACHMENT_TABLE
        LOGGER.debug(
            "AccessoryClassifier initialised with priority: %s",
            [category.value for category in self.table.priority],
        )

    def is_head_part(self, part: Optional[SceneNode]) -> bool:
        """Return whether ``part`` is the character's head.

        A part counts as the head when it is named like one, carries the
        face decal, or holds any of the head attachment markers.
        """

        if not _is_node(part):
            return False
        if part.name in HEAD_PART_NAMES:
            return True
        if part.find_child(FACE_DECAL_NAME) is not None:
            return True
        return any(part.find_child(marker) is not None for marker in self.table.head_markers())

    def get_accessory_type(self, accessory: Optional[SceneNode]) -> Optional[AccessoryCategory]:
        """Classify an accessory, or return ``None`` when it cannot be classified.

        ``None`` means the node is not an accessory or has no ``Handle``.
        ``AccessoryCategory.UNKNOWN`` means the handle carries no recognised
        marker. When markers of several categories are present the table's
        priority decides.
        """

        if not _is_node(accessory) or not accessory.has_capability(ACCESSORY_CAPABILITY):
            return None

        handle = accessory.find_child(HANDLE_NAME)
        if handle is None:
            LOGGER.debug("Accessory %s has no %s; cannot classify", accessory.full_name, HANDLE_NAME)
            return None

        for category in self.table.classifiable_categories():
            for attachment_name in self.table.names_for(category):
                if handle.find_child(attachment_name) is not None:
                    LOGGER.debug(
                        "Accessory %s classified as %s via %s",
                        accessory.full_name,
                        category.value,
                        attachment_name,
                    )
                    return category
        return AccessoryCategory.UNKNOWN

    def get_accessories_by_type(
        self,
        character: Optional[SceneNode],
        category: Union[str, AccessoryCategory, None],
    ) -> List[SceneNode]:
        """Return the character's direct accessory children of ``category``.

        Category names are matched case-insensitively, so ``"hair"`` and
        ``"Hair"`` are equivalent. ``Head``, ``Unknown`` and unrecognised names
        yield an empty list.
        """

        resolved = AccessoryCategory.lookup(category)
        if not _is_node(character) or resolved not in CLASSIFIABLE_CATEGORIES:
            if resolved is None and category is not None:
                LOGGER.debug("Ignoring query for unsupported category %r", category)
            return []

        return [
            child
            for child in character.children()
            if child.has_capability(ACCESSORY_CAPABILITY) and self.get_accessory_type(child) is resolved
        ]

    def has_head_accessories(self, character: Optional[SceneNode]) -> bool:
        """Return whether the character wears any hair, hat or face accessory."""

        if not _is_node(character):
            return False
        return any(
            self.get_accessories_by_type(character, category)
            for category in (AccessoryCategory.HAIR, AccessoryCategory.HAT, AccessoryCategory.FACE)
        )

    def is_headshot(self, hit_part: Optional[SceneNode], character: Optional[SceneNode]) -> bool:
        """Decide whether a hit on ``hit_part`` counts as a headshot.

        Direct hits on the head count, as do hits on any part of a hair,
        hat or face accessory (not only its handle).
        """

        if not _is_node(hit_part) or not _is_node(character):
            return False

        if self.is_head_part(hit_part):
            return True

        accessory = hit_part.parent
        if accessory is not None and accessory.has_capability(ACCESSORY_CAPABILITY):
            accessory_type = self.get_accessory_type(accessory)
            if accessory_type in CLASSIFIABLE_CATEGORIES:
                LOGGER.debug("Hit on %s counts as headshot via %s accessory", hit_part.full_name, accessory_type.value)
                return True

        return False

    def get_character_accessory_info(self, character: Optional[SceneNode]) -> CharacterAccessoryInfo:
        """Break down the character's head accessories by category."""

        if not _is_node(character):
            return CharacterAccessoryInfo()

        return CharacterAccessoryInfo(
            hair=tuple(self.get_accessories_by_type(character, AccessoryCategory.HAIR)),
            hat=tuple(self.get_accessories_by_type(character, AccessoryCategory.HAT)),
            face=tuple(self.get_accessories_by_type(character, AccessoryCategory.FACE)),
        )
