"""
Runtime configuration exports.

Provides game-wide constants and the global screen states. All exports are
lightweight class constants with no initialization overhead.
"""

from src.core.runtime.game_settings import (
    Display,
    Physics,
    Fonts,
    Colors,
    Layers,
    Intro,
    Flow,
)
from src.core.runtime.app_state import AppState

__all__ = [
    # Display & Rendering
    'Display',
    'Layers',
    'Colors',
    # Configuration
    'Physics',
    'Fonts',
    'Intro',
    'Flow',
    # States
    'AppState',
]
