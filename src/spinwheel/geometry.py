"""Wheel geometry: slice angles, angle normalization and spin targets.

All angles are radians in screen space: 0 points right (+x) and angles
grow clockwise because the y axis points down. The pointer sits at the top
of the wheel, which is -pi/2 in this frame.

Slice ``i`` of ``n`` covers ``[rotation + i * slice, rotation + (i + 1) * slice)``.
"""

import math
import random
from typing import Optional

TWO_PI = 2 * math.pi

# Pointer at 12 o'clock
POINTER_ANGLE = -math.pi / 2


def slice_angle(n: int) -> float:
    """Angular span of one slice for ``n`` items.

    Raises:
        ValueError: If ``n`` is not positive. Check for an empty wheel first.
    """
    if n <= 0:
        raise ValueError(f"slice_angle needs at least one item, got {n}")
    return TWO_PI / n


def slice_center_angle(index: int, n: int) -> float:
    """Angle of the middle of slice ``index`` before any rotation."""
    span = slice_angle(n)
    return index * span + span / 2


def slice_bounds(index: int, n: int, rotation: float = 0.0) -> tuple[float, float]:
    """Start and end angle of slice ``index`` with the wheel rotated by ``rotation``."""
    span = slice_angle(n)
    start = rotation + index * span
    return start, start + span


def normalize_angle(angle: float) -> float:
    """Wrap ``angle`` into ``[0, 2*pi)``."""
    wrapped = ((angle % TWO_PI) + TWO_PI) % TWO_PI
    # Tiny negative inputs round up to exactly 2*pi
    if wrapped >= TWO_PI:
        return 0.0
    return wrapped


def compute_target_angle(
    current_angle: float,
    target_index: int,
    n: int,
    extra_spins: int = 3,
    pointer_angle: float = POINTER_ANGLE,
) -> float:
    """Rotation that parks the centre of slice ``target_index`` under the pointer.

    The result is ``pointer_angle - slice_center_angle(target_index, n)`` plus
    however many whole turns it takes to land strictly ahead of
    ``current_angle``, plus ``extra_spins`` further turns so the wheel always
    visibly spins forward.

    Args:
        current_angle: Where the wheel rests now (any finite value)
        target_index: Slice to land on, in ``[0, n)``
        n: Number of slices
        extra_spins: Full turns added on top of the minimum forward motion
        pointer_angle: Screen angle of the fixed pointer

    Returns:
        Target rotation angle, always greater than ``current_angle``
    """
    if not 0 <= target_index < n:
        raise ValueError(f"target_index {target_index} out of range for {n} items")
    if extra_spins < 1:
        raise ValueError(f"extra_spins must be >= 1, got {extra_spins}")

    base = pointer_angle - slice_center_angle(target_index, n)
    # Smallest k with base + k * 2pi > current_angle
    turns = math.floor((current_angle - base) / TWO_PI) + 1
    target = base + turns * TWO_PI
    if target <= current_angle:
        target += TWO_PI
    return target + extra_spins * TWO_PI


def pick_index(n: int, rng: Optional[random.Random] = None) -> int:
    """Draw a slice index uniformly from ``[0, n)``."""
    if n <= 0:
        raise ValueError(f"cannot pick from {n} items")
    source = rng or random
    return source.randrange(n)


def index_at_pointer(
    rotation: float,
    n: int,
    pointer_angle: float = POINTER_ANGLE,
) -> int:
    """Index of the slice currently under the pointer."""
    # Position of the pointer in the wheel's own (unrotated) frame
    local = normalize_angle(pointer_angle - rotation)
    index = int(local // slice_angle(n))
    return min(index, n - 1)
