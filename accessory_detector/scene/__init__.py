"""Mini README: Scene access subsystem package initialiser.

Re-exports the node interface, the adapter registry and the built-in
adapters. ``base`` holds the abstract interface, ``registry`` the plugin
mapping and ``adapters`` the concrete bridges.
"""

from .base import SceneNode
from .registry import REGISTRY, SceneAdapterRegistry
from .adapters import InstanceNode, MemoryNode, load_scene  # noqa: F401  # registers built-ins

__all__ = [
    "InstanceNode",
    "MemoryNode",
    "REGISTRY",
    "SceneAdapterRegistry",
    "SceneNode",
    "load_scene",
]
