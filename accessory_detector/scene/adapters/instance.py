"""Mini README: Adapter for engine objects with an instance-style API.

Structure:
    * InstanceNode - wraps any object exposing ``Name``, ``Parent``,
      ``GetChildren()``, ``FindFirstChild(name)`` and ``IsA(class_name)``.

This is the shape most embedded game runtimes hand to scripting bridges.
Wrappers are created on demand and compare equal when they wrap the same
host object, so results stay comparable across calls.
"""

from __future__ import annotations

from typing import List, Optional

from ..base import SceneNode
from ..registry import REGISTRY


class InstanceNode(SceneNode):
    """Read-only view over a host instance."""

    adapter_name = "instance"

    def __init__(self, instance: object) -> None:
        self._instance = instance

    @property
    def instance(self) -> object:
        return self._instance

    @property
    def name(self) -> str:
        return str(getattr(self._instance, "Name", ""))

    @property
    def parent(self) -> Optional["InstanceNode"]:
        parent = getattr(self._instance, "Parent", None)
        return InstanceNode(parent) if parent is not None else None

    def has_capability(self, tag: str) -> bool:
        is_a = getattr(self._instance, "IsA", None)
        if callable(is_a):
            return bool(is_a(tag))
        return getattr(self._instance, "ClassName", None) == tag

    def children(self) -> List[SceneNode]:
        get_children = getattr(self._instance, "GetChildren", None)
        if not callable(get_children):
            return []
        return [InstanceNode(child) for child in get_children()]

    def find_child(self, name: str) -> Optional[SceneNode]:
        find_first_child = getattr(self._instance, "FindFirstChild", None)
        if not callable(find_first_child):
            return super().find_child(name)
        child = find_first_child(name)
        return InstanceNode(child) if child is not None else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InstanceNode):
            return NotImplemented
        return self._instance is other._instance

    def __hash__(self) -> int:
        return id(self._instance)

    @classmethod
    def wrap(cls, host_object: object) -> "InstanceNode":
        if isinstance(host_object, InstanceNode):
            return host_object
        return cls(host_object)


REGISTRY.register(InstanceNode)
