"""
service_locator.py
------------------
Shared access to the core managers and global settings for scenes.
"""

from typing import Any


class ServiceLocator:
    """Container for core managers plus a registry of global values."""

    __slots__ = (
        "scene_manager",
        "display_manager",
        "draw_manager",
        "_global_systems",
    )

    def __init__(self, scene_manager):
        """
        Args:
            scene_manager: The SceneManager instance
        """
        self.scene_manager = scene_manager
        self.display_manager = None
        self.draw_manager = None
        self._global_systems = {}

    # ===========================================================
    # Manager Registration
    # ===========================================================

    def register_managers(self, display=None, draw=None):
        """
        Args:
            display: DisplayManager instance
            draw: DrawManager instance
        """
        if display:
            self.display_manager = display
        if draw:
            self.draw_manager = draw

    # ===========================================================
    # Global System Access
    # ===========================================================

    def register_global(self, name: str, system: Any) -> None:
        """Register a value that persists across scenes."""
        self._global_systems[name] = system

    def get_global(self, name: str, default: Any = None) -> Any:
        return self._global_systems.get(name, default)
