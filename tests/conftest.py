"""Mini README: Shared fixtures for the accessory detector tests.

Structure:
    * character_payload - JSON-style dump of a typical avatar.
    * character - the same avatar as a ``MemoryNode`` tree.
    * make_accessory - factory for standalone accessory nodes.
    * fresh_settings - clears cached settings/classifier around a test.
"""

from __future__ import annotations

import pytest

from accessory_detector.configuration import get_settings
from accessory_detector.detector import get_classifier
from accessory_detector.scene import MemoryNode


def _accessory(name: str, *markers: str, extra_parts=()) -> dict:
    """Build an accessory document whose handle carries ``markers``."""

    return {
        "name": name,
        "class": "Accessory",
        "children": [{"name": "Handle", "children": [{"name": marker} for marker in markers]}]
        + [{"name": part} for part in extra_parts],
    }


@pytest.fixture
def character_payload() -> dict:
    return {
        "name": "Avatar",
        "children": [
            {"name": "Head", "children": [{"name": "face"}, {"name": "HatAttachment"}]},
            {"name": "Torso", "children": [{"name": "BodyBackAttachment"}]},
            _accessory("Ponytail", "HairBackAttachment"),
            _accessory("Cap", "HatAttachment", extra_parts=("Brim",)),
            _accessory("Glasses", "FaceFrontAttachment"),
            _accessory("Backpack", "BodyBackAttachment", extra_parts=("Strap",)),
            {"name": "Broken", "class": "Accessory", "children": [{"name": "Mesh"}]},
            {"name": "Sword", "class": "Tool", "children": [{"name": "Handle", "children": [{"name": "HatAttachment"}]}]},
        ],
    }


@pytest.fixture
def character(character_payload: dict) -> MemoryNode:
    return MemoryNode.from_dict(character_payload)


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    get_classifier.cache_clear()
    yield
    get_settings.cache_clear()
    get_classifier.cache_clear()


@pytest.fixture
def make_accessory():
    """Factory returning ``MemoryNode`` accessories with the given handle markers."""

    def factory(name: str, *markers: str, extra_parts=()) -> MemoryNode:
        return MemoryNode.from_dict(_accessory(name, *markers, extra_parts=extra_parts))

    return factory
