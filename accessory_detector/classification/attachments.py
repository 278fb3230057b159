"""Mini README: Attachment-name tables that drive accessory classification.

Structure:
    * AccessoryCategory - string enum of categories and the ``Unknown`` result.
    * AttachmentTable - immutable category -> attachment-name lookup with an
      explicit classification priority.
    * DEFAULT_ATTACHMENT_TABLE - the stock humanoid rig table.
    * load_attachment_table - JSON loader for custom rigs.

Engines tag accessories with a coarse type that players and creators often
get wrong. The attachment markers under an accessory's ``Handle`` are what
actually place it on the avatar, so their names are a far better signal.
Tables are plain data: build one per rig and hand it to the classifier.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, validator

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

HEAD_PART_NAMES: Tuple[str, ...] = ("Head", "Cabesa")
FACE_DECAL_NAME = "face"
HANDLE_NAME = "Handle"
ACCESSORY_CAPABILITY = "Accessory"


class AccessoryCategory(str, Enum):
    """Categories an accessory can be classified into."""

    HAIR = "Hair"
    FACE = "Face"
    HAT = "Hat"
    HEAD = "Head"
    UNKNOWN = "Unknown"

    @classmethod
    def from_str(cls, value: str) -> "AccessoryCategory":
        """Coerce arbitrary casing into a category, raising on unknown names."""

        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported accessory category: {value!r}") from error
        for member in cls:
            if member.value.lower() == normalised:
                return member
        raise ValueError(f"Unsupported accessory category: {value!r}")

    @classmethod
    def lookup(cls, value: object) -> Optional["AccessoryCategory"]:
        """Tolerant variant of ``from_str`` returning ``None`` for bad input."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls.from_str(value)
        except ValueError:
            return None


CLASSIFIABLE_CATEGORIES: Tuple[AccessoryCategory, ...] = (
    AccessoryCategory.HAIR,
    AccessoryCategory.FACE,
    AccessoryCategory.HAT,
)


def normalise_priority(
    values: Iterable[Union[str, AccessoryCategory]],
) -> Tuple[AccessoryCategory, ...]:
    """Validate a priority list as an ordering of Hair, Face and Hat."""

    priority = tuple(AccessoryCategory.from_str(getattr(value, "value", value)) for value in values)
    if sorted(priority) != sorted(CLASSIFIABLE_CATEGORIES):
        raise ValueError(
            "Category priority must list Hair, Face and Hat exactly once, "
            f"got {[category.value for category in priority]}"
        )
    return priority


@dataclass(frozen=True)
class AttachmentTable:
    """Read-only category -> attachment-name lookup."""

    categories: Mapping[AccessoryCategory, Tuple[str, ...]]
    priority: Tuple[AccessoryCategory, ...] = CLASSIFIABLE_CATEGORIES

    def __post_init__(self) -> None:
        frozen = {
            AccessoryCategory.from_str(getattr(key, "value", key)): tuple(names)
            for key, names in self.categories.items()
        }
        if AccessoryCategory.UNKNOWN in frozen:
            raise ValueError("The Unknown category cannot carry attachment names")
        object.__setattr__(self, "categories", MappingProxyType(frozen))
        object.__setattr__(self, "priority", normalise_priority(self.priority))

    def names_for(self, category: Union[str, AccessoryCategory]) -> Tuple[str, ...]:
        """Return the attachment names listed for ``category`` (empty if none)."""

        resolved = AccessoryCategory.lookup(category)
        if resolved is None:
            return ()
        return self.categories.get(resolved, ())

    def head_markers(self) -> Tuple[str, ...]:
        return self.names_for(AccessoryCategory.HEAD)

    def classifiable_categories(self) -> Tuple[AccessoryCategory, ...]:
        """Categories in the order classification checks them."""

        return self.priority

    def with_priority(self, priority: Iterable[Union[str, AccessoryCategory]]) -> "AttachmentTable":
        """Return a copy of the table using a different tie-break order."""

        return AttachmentTable(categories=dict(self.categories), priority=tuple(priority))

    def as_dict(self) -> Dict[str, object]:
        """Serialisable view, the same shape ``from_mapping`` accepts."""

        return {
            "categories": {category.value: list(names) for category, names in self.categories.items()},
            "priority": [category.value for category in self.priority],
        }

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> "AttachmentTable":
        """Build a table from a JSON-style document.

        Categories the document omits keep their default attachment names so
        a rig only needs to describe what it changes.
        """

        try:
            document = AttachmentTableDocument.parse_obj(payload)
        except ValueError as error:
            raise ValueError(f"Invalid attachment table: {error}") from error

        categories: Dict[AccessoryCategory, Tuple[str, ...]] = dict(DEFAULT_ATTACHMENT_TABLE.categories)
        for key, names in document.categories.items():
            categories[AccessoryCategory.from_str(key)] = tuple(names)
        priority = document.priority or [category.value for category in CLASSIFIABLE_CATEGORIES]
        return cls(categories=categories, priority=tuple(priority))


class AttachmentTableDocument(BaseModel):
    """Schema for attachment tables stored as JSON."""

    categories: Dict[str, List[str]] = Field(default_factory=dict)
    priority: Optional[List[str]] = None

    @validator("categories")
    def known_categories(cls, value: Dict[str, List[str]]) -> Dict[str, List[str]]:
        for key, names in value.items():
            category = AccessoryCategory.from_str(key)
            if category is AccessoryCategory.UNKNOWN:
                raise ValueError("The Unknown category cannot carry attachment names")
            if any(not name.strip() for name in names):
                raise ValueError(f"Empty attachment name listed under {key}")
        return value

    @validator("priority")
    def valid_priority(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is not None:
            normalise_priority(value)
        return value


DEFAULT_ATTACHMENT_TABLE = AttachmentTable(
    categories={
        AccessoryCategory.HAIR: (
            "HairAttachment",
            "HairTopAttachment",
            "HairBackAttachment",
            "HairFrontAttachment",
        ),
        AccessoryCategory.FACE: (
            "FaceFrontAttachment",
            "FaceCenterAttachment",
            "NeckRigAttachment",
        ),
        AccessoryCategory.HAT: (
            "HatAttachment",
            "TopHatAttachment",
        ),
        # Only consulted for head-part detection, never a classification result.
        AccessoryCategory.HEAD: (
            "HairAttachment",
            "HatAttachment",
            "NeckRigAttachment",
            "FaceFrontAttachment",
            "FaceCenterAttachment",
            FACE_DECAL_NAME,
        ),
    },
)


def load_attachment_table(path: Union[str, Path]) -> AttachmentTable:
    """Read an attachment table from a JSON file."""

    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise ValueError(f"Attachment table {path} is invalid JSON") from error
    if not isinstance(payload, dict):
        raise ValueError(f"Attachment table {path} must be a JSON object")

    table = AttachmentTable.from_mapping(payload)
    LOGGER.info("Loaded attachment table from %s", path)
    return table
