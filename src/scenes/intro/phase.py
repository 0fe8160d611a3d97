"""
phase.py
--------
Intro phases and the events the phase clock reports.

Phases are visited exactly once, in declaration order.
"""

from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    """Ordered stages of the title reveal."""
    INITIAL_HOLD = "initial_hold"
    REVEAL = "reveal"
    INTER_STAGE_PAUSE = "inter_stage_pause"
    REVEAL_SECONDARY = "reveal_secondary"
    FINAL_HOLD = "final_hold"

    @property
    def index(self) -> int:
        return PHASE_ORDER.index(self)

    @property
    def next(self):
        """Following phase, or None for the terminal one."""
        i = self.index + 1
        return PHASE_ORDER[i] if i < len(PHASE_ORDER) else None

    @property
    def is_terminal(self) -> bool:
        return self is PHASE_ORDER[-1]


PHASE_ORDER = tuple(Phase)


# ===========================================================
# Clock Events
# ===========================================================

@dataclass(frozen=True)
class PhaseEvent:
    """Base class for events returned by PhaseClock.advance()."""
    pass


@dataclass(frozen=True)
class PhaseTransition(PhaseEvent):
    """The clock moved from one phase to the next."""
    old: Phase
    new: Phase


@dataclass(frozen=True)
class SequenceComplete(PhaseEvent):
    """The terminal phase's duration has elapsed."""
    phase: Phase = Phase.FINAL_HOLD
