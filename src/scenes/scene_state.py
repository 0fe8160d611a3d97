"""
scene_state.py
--------------
Lifecycle states a scene passes through.
"""

from enum import Enum


class SceneState(Enum):
    """Lifecycle states for scene management."""
    INACTIVE = "inactive"       # Constructed, not loaded
    LOADING = "loading"         # on_load() running
    ACTIVE = "active"           # Receiving update/draw/events
    EXITING = "exiting"         # on_exit() running, resources being released
