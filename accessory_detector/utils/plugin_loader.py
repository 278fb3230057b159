"""Mini README: Dynamic scene adapter discovery.

Structure:
    * load_entry_point_plugins - load entry point-based adapters and
      register them with the scene adapter registry.

Engine bridges shipped as separate packages expose their ``SceneNode``
subclass under the ``accessory_detector.adapters`` entry point group.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import List, Optional

from ..logging_utils import get_logger
from ..scene.registry import REGISTRY, SceneAdapterRegistry

LOGGER = get_logger(__name__)


def load_entry_point_plugins(
    group: str = "accessory_detector.adapters",
    registry: Optional[SceneAdapterRegistry] = None,
) -> List[type]:
    """Load adapters registered via entry points and add them to ``registry``."""

    registry = registry or REGISTRY
    loaded_plugins = []
    for entry_point in entry_points(group=group):
        try:
            plugin = entry_point.load()
            registry.register(plugin)
        except Exception as exc:
            LOGGER.exception("Failed to load scene adapter '%s': %s", entry_point.name, exc)
            continue
        loaded_plugins.append(plugin)
        LOGGER.info("Loaded scene adapter '%s'", entry_point.name)
    return loaded_plugins
