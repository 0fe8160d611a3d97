"""
base_scene.py
-------------
Abstract base class for all scenes.

Provides:
- Lifecycle hooks (load, enter, exit)
- Scene-owned ScreenResources, released by the SceneManager on exit
- Service locator access
- Abstract methods for update and handle_event
"""

from abc import ABC, abstractmethod

from src.scenes.scene_state import SceneState
from src.scenes.screen_resources import ScreenResources


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        state: Current lifecycle state
        services: ServiceLocator for accessing managers
        resources: Display elements owned by this scene
    """

    def __init__(self, services):
        """
        Initialize scene with service locator.

        Args:
            services: ServiceLocator instance for dependency injection
        """
        self.services = services
        self.state = SceneState.INACTIVE
        self.resources = ScreenResources(owner=self.__class__.__name__)

        # Convenience access to frequently used managers
        self.scene_manager = services.scene_manager
        self.draw_manager = services.draw_manager

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_load(self, **scene_data):
        """Called once right after construction."""
        pass

    def on_enter(self):
        """Called when scene becomes active."""
        pass

    def on_exit(self):
        """Called before the scene's resources are released."""
        pass

    def release_resources(self):
        """Scoped teardown of everything in self.resources."""
        self.resources.release()

    # ===========================================================
    # Standard Methods
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """
        Update scene logic.

        Args:
            dt: Delta time in seconds
        """
        pass

    def draw(self, draw_manager):
        """Queue every display element the scene owns."""
        self.resources.draw(draw_manager)

    @abstractmethod
    def handle_event(self, event):
        """
        Handle input events.

        Args:
            event: pygame event object
        """
        pass
