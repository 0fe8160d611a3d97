"""
game_settings.py
----------------
Centralized constants for window, timing, fonts and the title intro.
"""

import os

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Tennis for Two (text)"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    DIR: str = os.path.join(PROJECT_ROOT, "assets", "fonts")
    TITLE: str = "FiraSans-Bold.ttf"
    BODY: str = "FiraMono-Medium.ttf"


# ===========================================================
# Colors
# ===========================================================

class Colors:
    BACKGROUND = (0, 0, 0)
    TEXT = (255, 255, 255)
    HINT = (150, 150, 150)


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    TEXT: int = 100


# ===========================================================
# Title Intro
# ===========================================================

class Intro:
    """Title screen text and preset selection."""
    TITLE_TEXT: str = "TENNIS FOR TWO"
    SUBTITLE_TEXT: str = "a text-only homage"
    PRESETS_FILE: str = "intro_presets.yaml"
    DEFAULT_PRESET: str = "default"
    SKIPPABLE: bool = True


# ===========================================================
# Screen Flow
# ===========================================================

class Flow:
    """Text-card screens between the title and the exit."""
    SCREENS_FILE: str = "screens.yaml"
    # Seconds before a card advances on its own; None waits for a key press
    DEFAULT_AUTO_ADVANCE = None
