"""Mini README: Tests for settings, attachment tables and the shared classifier.

Structure:
    * settings tests - environment variables drive priority and table paths.
    * table tests - JSON tables are validated and merged with the defaults.
    * detector tests - module-level shortcuts honour the configuration.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from accessory_detector import detector
from accessory_detector.classification import (
    AccessoryCategory,
    AttachmentTable,
    DEFAULT_ATTACHMENT_TABLE,
    load_attachment_table,
)
from accessory_detector.configuration import AccessoryDetectorSettings, build_attachment_table


def test_default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ACCESSORY_DETECTOR_CATEGORY_PRIORITY", raising=False)
    monkeypatch.delenv("ACCESSORY_DETECTOR_ATTACHMENT_TABLE_PATH", raising=False)

    settings = AccessoryDetectorSettings()

    assert settings.category_priority == ["Hair", "Face", "Hat"]
    assert settings.attachment_table_path is None
    assert build_attachment_table(settings) == DEFAULT_ATTACHMENT_TABLE


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Environment variables select a custom table and tie-break order."""

    table_path = tmp_path / "rig.json"
    table_path.write_text(json.dumps({"categories": {"Face": ["VisorAttachment"]}}), encoding="utf-8")
    monkeypatch.setenv("ACCESSORY_DETECTOR_ATTACHMENT_TABLE_PATH", str(table_path))
    monkeypatch.setenv("ACCESSORY_DETECTOR_CATEGORY_PRIORITY", '["hat", "face", "hair"]')
    monkeypatch.setenv("ACCESSORY_DETECTOR_LOG_LEVEL", "debug")

    settings = AccessoryDetectorSettings()
    table = build_attachment_table(settings)

    assert settings.log_level == "DEBUG"
    assert settings.category_priority == ["Hat", "Face", "Hair"]
    assert table.names_for(AccessoryCategory.FACE) == ("VisorAttachment",)
    assert table.priority == (AccessoryCategory.HAT, AccessoryCategory.FACE, AccessoryCategory.HAIR)


@pytest.mark.parametrize("priority", ['["Hair", "Hat"]', '["Hair", "Hair", "Hat"]', '["Hair", "Face", "Head"]'])
def test_settings_reject_bad_priority(monkeypatch: pytest.MonkeyPatch, priority: str) -> None:
    monkeypatch.setenv("ACCESSORY_DETECTOR_CATEGORY_PRIORITY", priority)

    with pytest.raises(ValueError):
        AccessoryDetectorSettings()


def test_settings_reject_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACCESSORY_DETECTOR_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        AccessoryDetectorSettings()


def test_default_table_contents() -> None:
    assert DEFAULT_ATTACHMENT_TABLE.names_for("Hat") == ("HatAttachment", "TopHatAttachment")
    assert "face" in DEFAULT_ATTACHMENT_TABLE.head_markers()
    assert DEFAULT_ATTACHMENT_TABLE.names_for("Unknown") == ()
    assert DEFAULT_ATTACHMENT_TABLE.classifiable_categories() == (
        AccessoryCategory.HAIR,
        AccessoryCategory.FACE,
        AccessoryCategory.HAT,
    )


@pytest.mark.parametrize(
    "payload",
    [
        {"categories": {"Shoes": ["FootAttachment"]}},
        {"categories": {"Unknown": ["Anything"]}},
        {"categories": {"Hat": [" "]}},
        {"categories": {"Hat": "HatAttachment"}},
        {"priority": ["Hat"]},
    ],
)
def test_attachment_table_rejects_invalid_documents(payload: dict) -> None:
    with pytest.raises(ValueError):
        AttachmentTable.from_mapping(payload)


def test_load_attachment_table_round_trips_as_dict(tmp_path: Path) -> None:
    table_path = tmp_path / "table.json"
    table_path.write_text(json.dumps(DEFAULT_ATTACHMENT_TABLE.as_dict()), encoding="utf-8")

    assert load_attachment_table(table_path) == DEFAULT_ATTACHMENT_TABLE


def test_load_attachment_table_rejects_non_objects(tmp_path: Path) -> None:
    table_path = tmp_path / "table.json"
    table_path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_attachment_table(table_path)


def test_module_level_shortcuts_use_configuration(
    monkeypatch: pytest.MonkeyPatch, fresh_settings, make_accessory
) -> None:
    """The shared classifier is built from settings and cached."""

    monkeypatch.setenv("ACCESSORY_DETECTOR_CATEGORY_PRIORITY", '["Hat", "Hair", "Face"]')
    hybrid = make_accessory("Hybrid", "HairAttachment", "HatAttachment")

    assert detector.get_accessory_type(hybrid) is AccessoryCategory.HAT
    assert detector.get_classifier() is detector.get_classifier()


def test_module_level_shortcuts_match_classifier(fresh_settings, character) -> None:
    assert detector.is_head_part(character.find_child("Head")) is True
    assert [node.name for node in detector.get_accessories_by_type(character, "Face")] == ["Glasses"]
    assert detector.has_head_accessories(character) is True
    assert detector.is_headshot(character.find_path("Cap/Brim"), character) is True
    assert detector.get_character_accessory_info(character).total == 3
