"""Mini README: Utility helpers for the accessory detector.

Currently exports the entry point loader used to discover third-party
scene adapters at runtime.
"""

from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins"]
