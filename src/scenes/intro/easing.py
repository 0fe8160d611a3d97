"""
easing.py
---------
Interpolation primitives for the title reveal.

Every easing maps [0, 1] onto a curve with f(0) == 0 and f(1) == 1.
"""

BACK_OVERSHOOT = 1.70158


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b."""
    return a + (b - a) * t


def clamp01(t: float) -> float:
    return min(max(t, 0.0), 1.0)


def linear(t: float) -> float:
    return t


def ease_out_back(t: float) -> float:
    """
    Cubic ease-out that overshoots the target slightly before settling.

    Args:
        t (float): Normalized progress (0.0 → 1.0).
    """
    if t >= 1.0:
        return 1.0
    if t <= 0.0:
        return 0.0
    c1 = BACK_OVERSHOOT
    c3 = c1 + 1
    u = t - 1
    return 1 + c3 * u ** 3 + c1 * u ** 2


EASINGS = {
    "linear": linear,
    "back_out": ease_out_back,
}


def get_easing(name: str):
    """Look up an easing function by name; raises KeyError if unknown."""
    return EASINGS[name]
