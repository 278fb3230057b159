"""Mini README: Registry of adapters that expose host objects as scene nodes.

Structure:
    * SceneAdapterRegistry - maps adapter identifiers to ``SceneNode``
      subclasses able to wrap a host object.

Adapters declare an ``adapter_name`` and a ``wrap`` classmethod. Built-in
adapters register themselves on import; third-party packages can plug in
through the ``accessory_detector.adapters`` entry point group.
"""

from __future__ import annotations

from typing import Dict, Iterable, Type

from .base import SceneNode
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class SceneAdapterRegistry:
    """Simple registry for mapping adapter identifiers to classes."""

    def __init__(self) -> None:
        self._adapters: Dict[str, Type[SceneNode]] = {}

    def register(self, adapter: Type[SceneNode]) -> Type[SceneNode]:
        """Register an adapter class; returns it so it can decorate classes."""

        identifier = getattr(adapter, "adapter_name", None)
        if not identifier or not callable(getattr(adapter, "wrap", None)):
            raise ValueError(f"{adapter!r} must define adapter_name and a wrap() classmethod")
        identifier = identifier.lower()
        LOGGER.debug("Registering scene adapter '%s'", identifier)
        self._adapters[identifier] = adapter
        return adapter

    def available_adapters(self) -> Iterable[str]:
        """Return iterable of adapter identifiers for display."""

        return sorted(self._adapters.keys())

    def adapt(self, identifier: str, host_object: object) -> SceneNode:
        """Wrap ``host_object`` with the adapter matching the identifier."""

        adapter_cls = self._adapters.get(identifier.lower())
        if not adapter_cls:
            raise KeyError(f"Unknown scene adapter '{identifier}'")
        LOGGER.debug("Adapting %r with '%s'", host_object, identifier)
        return adapter_cls.wrap(host_object)


REGISTRY = SceneAdapterRegistry()
