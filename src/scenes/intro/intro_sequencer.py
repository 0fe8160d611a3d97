"""
intro_sequencer.py
------------------
Drives the title intro: a timed title drop followed by a subtitle reveal.

Responsibilities
----------------
- Advance a PhaseClock once per tick, passing through zero-length phases
  in the same tick.
- Expose the title's vertical offset and the subtitle's visibility for the
  current tick.
- Report completion to the owner exactly once.

The sequencer knows nothing about pygame; the Title scene reads its
outputs and positions the actual text surfaces.
"""

from typing import Callable, Optional

from src.core.debug.debug_logger import DebugLogger
from src.scenes.intro.easing import clamp01, get_easing, lerp
from src.scenes.intro.phase import Phase, PhaseTransition, SequenceComplete
from src.scenes.intro.phase_clock import PhaseClock
from src.scenes.intro.sequence_config import SequenceConfig


class IntroSequencer:
    """One-shot title reveal. Build a new instance to replay it."""

    def __init__(self, config: Optional[SequenceConfig] = None,
                 on_complete: Optional[Callable[[], None]] = None,
                 on_transition: Optional[Callable[[PhaseTransition], None]] = None):
        """
        Args:
            config: Timing and layout; defaults to SequenceConfig().
            on_complete: Called once when the final hold has elapsed.
            on_transition: Called for every phase step, in order.
        """
        self.config = config or SequenceConfig()
        self.on_complete = on_complete
        self.on_transition = on_transition

        self._clock = PhaseClock(self.config.durations())
        self._ease = get_easing(self.config.easing)
        self._subtitle_visible = False
        self._completion_fired = False

        DebugLogger.state(f"Intro started in {self._clock.phase.name}", category="intro")

    # ===========================================================
    # State Queries
    # ===========================================================

    @property
    def phase(self) -> Phase:
        return self._clock.phase

    @property
    def elapsed(self) -> float:
        """Seconds spent in the current phase."""
        return self._clock.elapsed

    @property
    def is_complete(self) -> bool:
        return self._completion_fired

    # ===========================================================
    # Outputs
    # ===========================================================

    @property
    def title_y(self) -> float:
        """Vertical offset of the title for the current tick."""
        phase = self._clock.phase
        if phase is Phase.INITIAL_HOLD:
            return self.config.start_y
        if phase is Phase.REVEAL:
            t = self._ease(clamp01(self._clock.progress))
            return lerp(self.config.start_y, self.config.end_y, t)
        return self.config.end_y

    @property
    def subtitle_visible(self) -> bool:
        return self._subtitle_visible

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt: float) -> bool:
        """
        Advance the intro by dt seconds.

        Returns:
            True only on the tick where the intro completes.
        """
        if self._completion_fired:
            return False

        event = self._clock.advance(dt)

        # Zero-length phases are entered and left within the same tick
        while isinstance(event, PhaseTransition):
            self._enter_phase(event)
            event = self._clock.advance(0.0)

        if isinstance(event, SequenceComplete):
            self._complete()
            return True
        return False

    def _enter_phase(self, transition: PhaseTransition):
        DebugLogger.state(
            f"{transition.old.name} → {transition.new.name}", category="intro"
        )

        if transition.new is Phase.REVEAL_SECONDARY:
            self._subtitle_visible = True

        if self.on_transition:
            self.on_transition(transition)

    def _complete(self):
        self._completion_fired = True
        DebugLogger.action("Intro sequence complete", category="intro")
        if self.on_complete:
            self.on_complete()
