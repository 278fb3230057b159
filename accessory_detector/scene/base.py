"""Mini README: Read-only view of a host engine's scene hierarchy.

Structure:
    * SceneNode - abstract interface the classifier relies on.

The host engine owns and mutates its scene tree; the detector only ever
reads it through this narrow surface. Adapters in ``scene.adapters`` bridge
concrete engines (or in-memory fakes) to the interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional


class SceneNode(ABC):
    """Base interface for nodes in a host-owned scene tree."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the node as reported by the host."""

    @property
    @abstractmethod
    def parent(self) -> Optional["SceneNode"]:
        """Direct parent, or ``None`` for detached or root nodes."""

    @abstractmethod
    def has_capability(self, tag: str) -> bool:
        """Return whether the host reports the node as a ``tag`` (e.g. ``Accessory``)."""

    @abstractmethod
    def children(self) -> List["SceneNode"]:
        """Return direct children in host-defined order."""

    def find_child(self, name: str) -> Optional["SceneNode"]:
        """Return the first direct child named ``name``."""

        for child in self.children():
            if child.name == name:
                return child
        return None

    @property
    def full_name(self) -> str:
        """Slash-joined path from the root, used in log messages."""

        parts = [self.name]
        node = self.parent
        while node is not None:
            parts.append(node.name)
            node = node.parent
        return "/".join(reversed(parts))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.full_name!r}>"
