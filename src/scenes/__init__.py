"""
Scene module exports.

Provides the base scene class, lifecycle states and scene-owned resources.
"""

from src.scenes.scene_state import SceneState
from src.scenes.screen_resources import ScreenResources
from src.scenes.base_scene import BaseScene

__all__ = [
    # Core
    'BaseScene',
    'SceneState',
    'ScreenResources',
]
