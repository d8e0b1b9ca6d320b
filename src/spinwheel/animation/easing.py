"""Deceleration curves for the spin animation.

Every curve maps normalized time t (0.0 to 1.0) to normalized progress,
starts at 0, ends at exactly 1 and never moves backward, so the wheel
always comes to rest on its target angle. The wheel uses ease_out_cubic
unless configured otherwise.
"""

from enum import Enum
from typing import Callable
import math


class Easing(Enum):
    """Available spin curves, ordered from gentlest to hardest braking."""

    LINEAR = "linear"
    EASE_OUT_SINE = "ease_out_sine"
    EASE_OUT_QUAD = "ease_out_quad"
    EASE_OUT_CUBIC = "ease_out_cubic"
    EASE_OUT_QUART = "ease_out_quart"
    EASE_OUT_QUINT = "ease_out_quint"
    EASE_OUT_CIRC = "ease_out_circ"
    EASE_OUT_EXPO = "ease_out_expo"


EasingFunc = Callable[[float], float]


def linear(t: float) -> float:
    """Constant speed, stops dead."""
    return t


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def ease_out_quad(t: float) -> float:
    """Decelerate to zero velocity."""
    return 1 - (1 - t) * (1 - t)


def ease_out_cubic(t: float) -> float:
    """Decelerate to zero velocity (cubic).

    Fast start and a long slow finish, close to a wheel braking on friction.
    """
    return 1 - pow(1 - t, 3)


def ease_out_quart(t: float) -> float:
    return 1 - pow(1 - t, 4)


def ease_out_quint(t: float) -> float:
    return 1 - pow(1 - t, 5)


def ease_out_circ(t: float) -> float:
    return math.sqrt(1 - pow(t - 1, 2))


def ease_out_expo(t: float) -> float:
    # 2^-10t never reaches 0, pin the end
    if t >= 1:
        return 1.0
    return 1 - pow(2, -10 * t)


_EASING_FUNCTIONS: dict[Easing, EasingFunc] = {
    Easing.LINEAR: linear,
    Easing.EASE_OUT_SINE: ease_out_sine,
    Easing.EASE_OUT_QUAD: ease_out_quad,
    Easing.EASE_OUT_CUBIC: ease_out_cubic,
    Easing.EASE_OUT_QUART: ease_out_quart,
    Easing.EASE_OUT_QUINT: ease_out_quint,
    Easing.EASE_OUT_CIRC: ease_out_circ,
    Easing.EASE_OUT_EXPO: ease_out_expo,
}


def get_easing(easing: Easing | str) -> EasingFunc:
    """Curve for an Easing member or its settings name, case-insensitive.

    Raises:
        ValueError: For a name that is not an Easing value
    """
    if isinstance(easing, str):
        try:
            easing = Easing(easing.lower())
        except ValueError:
            raise ValueError(f"Unknown easing function: {easing}") from None

    return _EASING_FUNCTIONS[easing]


def progress(elapsed_ms: float, duration_ms: float) -> float:
    """Fraction of the animation elapsed, clamped to [0, 1].

    A non-positive duration counts as already finished.
    """
    if duration_ms <= 0:
        return 1.0
    return max(0.0, min(1.0, elapsed_ms / duration_ms))
