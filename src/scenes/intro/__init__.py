from .phase import Phase, PHASE_ORDER, PhaseEvent, PhaseTransition, SequenceComplete
from .phase_clock import PhaseClock
from .easing import lerp, ease_out_back, linear
from .sequence_config import SequenceConfig, load_preset, load_presets
from .intro_sequencer import IntroSequencer
