"""Mini README: Built-in scene adapters.

New adapters should subclass ``SceneNode``, set ``adapter_name``, provide a
``wrap`` classmethod and call ``REGISTRY.register`` during module import.
"""

from .instance import InstanceNode
from .memory import MemoryNode, load_scene

__all__ = ["InstanceNode", "MemoryNode", "load_scene"]
