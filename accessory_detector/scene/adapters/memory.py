"""Mini README: In-memory scene tree used for tooling, fixtures and replays.

Structure:
    * MemoryNode - mutable node with capability tags and ordered children.
    * load_scene - read a character tree from a JSON document.

Documents mirror what an engine exporter would dump::

    {"name": "Character", "children": [
        {"name": "Head", "children": [{"name": "face"}]},
        {"name": "Cap", "class": "Accessory", "children": [
            {"name": "Handle", "children": [{"name": "HatAttachment"}]}
        ]}
    ]}

``class`` is shorthand for a single capability; ``capabilities`` lists
several. Validation errors raise ``ValueError`` with the offending path.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

from ..base import SceneNode
from ..registry import REGISTRY
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class MemoryNode(SceneNode):
    """Plain Python scene node."""

    adapter_name = "memory"

    def __init__(
        self,
        name: str,
        *,
        capabilities: Iterable[str] = (),
        children: Iterable["MemoryNode"] = (),
    ) -> None:
        self._name = name
        self._capabilities = frozenset(capabilities)
        self._parent: Optional[MemoryNode] = None
        self._children: List[MemoryNode] = []
        for child in children:
            self.add_child(child)

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional["MemoryNode"]:
        return self._parent

    @property
    def capabilities(self) -> frozenset:
        return self._capabilities

    def has_capability(self, tag: str) -> bool:
        return tag in self._capabilities

    def children(self) -> List[SceneNode]:
        return list(self._children)

    def add_child(self, child: "MemoryNode") -> "MemoryNode":
        """Attach ``child`` (re-parenting it if needed) and return it."""

        if child._parent is not None:
            child._parent.remove_child(child)
        child._parent = self
        self._children.append(child)
        return child

    def remove_child(self, child: "MemoryNode") -> None:
        self._children.remove(child)
        child._parent = None

    def find_path(self, path: str) -> Optional[SceneNode]:
        """Resolve a slash-separated path of child names relative to this node."""

        node: Optional[SceneNode] = self
        for segment in filter(None, path.split("/")):
            if node is None:
                return None
            node = node.find_child(segment)
        return node

    def to_dict(self) -> dict:
        payload: dict = {"name": self._name}
        if self._capabilities:
            payload["capabilities"] = sorted(self._capabilities)
        if self._children:
            payload["children"] = [child.to_dict() for child in self._children]
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, object], *, _path: str = "") -> "MemoryNode":
        """Build a tree from a JSON-style document."""

        if not isinstance(payload, Mapping):
            raise ValueError(f"Scene node at '{_path or '/'}' must be an object")
        name = payload.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f"Scene node at '{_path or '/'}' requires a non-empty name")
        location = f"{_path}/{name}"

        raw_capabilities = payload.get("capabilities", []) or []
        if not isinstance(raw_capabilities, list):
            raise ValueError(f"Capabilities of '{location}' must be a list")
        capabilities = list(raw_capabilities)
        class_name = payload.get("class")
        if class_name:
            capabilities.append(class_name)
        if not all(isinstance(tag, str) for tag in capabilities):
            raise ValueError(f"Capabilities of '{location}' must be strings")

        raw_children = payload.get("children", []) or []
        if not isinstance(raw_children, list):
            raise ValueError(f"Children of '{location}' must be a list")

        return cls(
            name,
            capabilities=capabilities,
            children=[cls.from_dict(child, _path=location) for child in raw_children],
        )

    @classmethod
    def wrap(cls, host_object: object) -> "MemoryNode":
        if isinstance(host_object, MemoryNode):
            return host_object
        if isinstance(host_object, Mapping):
            return cls.from_dict(host_object)
        raise ValueError(f"Cannot build a MemoryNode from {type(host_object).__name__}")


def load_scene(path: Union[str, Path]) -> MemoryNode:
    """Read a scene tree from a JSON file."""

    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise ValueError(f"Scene file {path} is invalid JSON") from error

    root = MemoryNode.from_dict(payload)
    LOGGER.debug("Loaded scene '%s' with %s direct children from %s", root.name, len(root.children()), path)
    return root


REGISTRY.register(MemoryNode)
