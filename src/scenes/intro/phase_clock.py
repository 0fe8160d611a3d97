"""
phase_clock.py
--------------
Tracks the current intro phase and the time spent in it.

The clock only moves forward: one phase per advance() call at most, with
elapsed time reset to zero on every step. Once the terminal phase's
duration is reached the clock freezes and keeps reporting completion.
"""

import math
from typing import Mapping, Optional

from src.scenes.intro.phase import (
    Phase,
    PHASE_ORDER,
    PhaseEvent,
    PhaseTransition,
    SequenceComplete,
)


class PhaseClock:
    """Forward-only phase tracker driven by per-tick time deltas."""

    def __init__(self, durations: Mapping[Phase, float]):
        """
        Args:
            durations: Seconds to spend in each phase. Every phase must be
                present and non-negative.
        """
        missing = [p.name for p in PHASE_ORDER if p not in durations]
        if missing:
            raise ValueError(f"Missing durations for phases: {missing}")

        self._durations = {p: float(durations[p]) for p in PHASE_ORDER}
        for phase, seconds in self._durations.items():
            if seconds < 0:
                raise ValueError(f"Duration for {phase.name} must be >= 0, got {seconds}")

        self.phase = PHASE_ORDER[0]
        self.elapsed = 0.0
        self._complete = False

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def progress(self) -> float:
        """Fraction of the current phase elapsed, clamped to [0, 1]."""
        duration = self._durations[self.phase]
        if duration <= 0:
            return 1.0
        return min(max(self.elapsed / duration, 0.0), 1.0)

    # ===========================================================
    # Advancing
    # ===========================================================

    def advance(self, dt: float) -> Optional[PhaseEvent]:
        """
        Accumulate dt and step to the next phase if the current one is done.

        Args:
            dt: Seconds since the last call. Negative or non-finite
                values count as 0.

        Returns:
            PhaseTransition on a step, SequenceComplete once the terminal
            phase is done (and on every call after that), otherwise None.
        """
        if self._complete:
            return SequenceComplete()

        if math.isfinite(dt) and dt > 0:
            self.elapsed += dt

        if self.elapsed < self._durations[self.phase]:
            return None

        if self.phase.is_terminal:
            self._complete = True
            return SequenceComplete(self.phase)

        old = self.phase
        self.phase = old.next
        self.elapsed = 0.0
        return PhaseTransition(old, self.phase)
