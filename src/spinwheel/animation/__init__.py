"""Animation helpers for SPINWHEEL."""

from spinwheel.animation.easing import (
    Easing,
    ease_out_cubic,
    get_easing,
    progress,
)

__all__ = [
    "Easing",
    "ease_out_cubic",
    "get_easing",
    "progress",
]
