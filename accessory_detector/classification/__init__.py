"""Mini README: Accessory classification subsystem.

Exports the attachment tables and the classifier. Tables are data and can
be swapped per avatar rig without touching the classifier code.
"""

from .attachments import (
    CLASSIFIABLE_CATEGORIES,
    DEFAULT_ATTACHMENT_TABLE,
    AccessoryCategory,
    AttachmentTable,
    load_attachment_table,
)
from .classifier import AccessoryClassifier, CharacterAccessoryInfo

__all__ = [
    "AccessoryCategory",
    "AccessoryClassifier",
    "AttachmentTable",
    "CLASSIFIABLE_CATEGORIES",
    "CharacterAccessoryInfo",
    "DEFAULT_ATTACHMENT_TABLE",
    "load_attachment_table",
]
