"""Mini README: Tests for entry point discovery of scene adapters.

Verifies that discovered adapters land in the registry and that a broken
plugin is logged and skipped instead of aborting discovery.
"""

from __future__ import annotations

from accessory_detector.scene import MemoryNode, SceneAdapterRegistry
from accessory_detector.utils import plugin_loader


class RigNode(MemoryNode):
    adapter_name = "rig"


class FakeEntryPoint:
    def __init__(self, name: str, target) -> None:
        self.name = name
        self._target = target

    def load(self):
        if isinstance(self._target, Exception):
            raise self._target
        return self._target


def test_entry_point_adapters_are_registered(monkeypatch) -> None:
    discovered = [
        FakeEntryPoint("rig", RigNode),
        FakeEntryPoint("broken", ImportError("missing engine bindings")),
    ]
    requested = []

    def fake_entry_points(group: str):
        requested.append(group)
        return discovered

    monkeypatch.setattr(plugin_loader, "entry_points", fake_entry_points)
    registry = SceneAdapterRegistry()

    loaded = plugin_loader.load_entry_point_plugins(registry=registry)

    assert loaded == [RigNode]
    assert requested == ["accessory_detector.adapters"]
    assert list(registry.available_adapters()) == ["rig"]
    assert isinstance(registry.adapt("rig", {"name": "Avatar"}), RigNode)
