"""
sequence_config.py
------------------
Immutable timing and layout parameters for the title intro.

Presets are stored in src/config/intro_presets.yaml; each preset overrides
any subset of the fields below and the rest keep their defaults.
"""

import math
from dataclasses import dataclass, fields, replace
from typing import Dict, Optional

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display, Intro
from src.core.services.config_manager import load_config
from src.scenes.intro.easing import EASINGS
from src.scenes.intro.phase import Phase

TITLE_SIZE = 96.0
SUBTITLE_SIZE = 60.0
TITLE_SUBTITLE_GAP = 20.0


@dataclass(frozen=True)
class SequenceConfig:
    """Phase durations (seconds) plus title/subtitle layout (pixels)."""

    # Durations
    black_hold: float = 1.0
    drop_duration: float = 1.0
    after_drop_pause: float = 1.0
    subtitle_reveal_pause: float = 1.0
    final_hold: float = 10.0

    # Title travels from above the screen to just over the center line
    start_y: float = -TITLE_SIZE
    end_y: float = Display.HEIGHT / 2 - TITLE_SIZE - TITLE_SUBTITLE_GAP / 2

    # Layout
    title_size: float = TITLE_SIZE
    subtitle_size: float = SUBTITLE_SIZE
    subtitle_y: float = Display.HEIGHT / 2 + TITLE_SUBTITLE_GAP / 2

    easing: str = "back_out"

    DURATION_FIELDS = (
        "black_hold",
        "drop_duration",
        "after_drop_pause",
        "subtitle_reveal_pause",
        "final_hold",
    )

    def __post_init__(self):
        for name in self.DURATION_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite value >= 0, got {value}")

        for name in ("start_y", "end_y", "title_size", "subtitle_size", "subtitle_y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")

        if self.easing not in EASINGS:
            raise ValueError(
                f"Unknown easing '{self.easing}' (expected one of {sorted(EASINGS)})"
            )

    # ===========================================================
    # Derived Views
    # ===========================================================

    def durations(self) -> Dict[Phase, float]:
        """Map each phase to its duration, in phase order."""
        return {
            Phase.INITIAL_HOLD: float(self.black_hold),
            Phase.REVEAL: float(self.drop_duration),
            Phase.INTER_STAGE_PAUSE: float(self.after_drop_pause),
            Phase.REVEAL_SECONDARY: float(self.subtitle_reveal_pause),
            Phase.FINAL_HOLD: float(self.final_hold),
        }

    @property
    def total_duration(self) -> float:
        return sum(self.durations().values())

    def with_overrides(self, **overrides) -> "SequenceConfig":
        """Return a copy with the given fields replaced (validated again)."""
        return replace(self, **overrides)

    # ===========================================================
    # Construction from Data
    # ===========================================================

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "SequenceConfig":
        """
        Build a config from a plain dict, ignoring unknown keys.

        Raises:
            ValueError: If any known field has an invalid value.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in (data or {}).items():
            if key in known:
                values[key] = value
            elif key != "_notes":
                DebugLogger.warn(f"Ignoring unknown intro setting '{key}'", category="intro")
        return cls(**values)


def load_presets(filename: str = Intro.PRESETS_FILE) -> Dict[str, dict]:
    """Load the raw preset table (preset name -> overrides)."""
    data = load_config(filename, {"presets": {}})
    presets = data.get("presets") or {}
    if not isinstance(presets, dict):
        DebugLogger.warn(f"'presets' in {filename} is not a mapping", category="intro")
        return {}
    return presets


def load_preset(name: str = Intro.DEFAULT_PRESET,
                filename: str = Intro.PRESETS_FILE) -> SequenceConfig:
    """
    Build the SequenceConfig for a named preset.

    Unknown names fall back to the default preset, and a missing default
    falls back to the built-in field defaults.
    """
    presets = load_presets(filename)

    if name not in presets:
        DebugLogger.warn(f"Unknown intro preset '{name}', using '{Intro.DEFAULT_PRESET}'",
                         category="intro")
        name = Intro.DEFAULT_PRESET

    config = SequenceConfig.from_dict(presets.get(name))
    DebugLogger.system(
        f"Intro preset '{name}' loaded ({config.total_duration:.2f}s total)",
        category="intro"
    )
    return config
