"""Color helpers for slice fills."""

from typing import Tuple


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """Convert HSL to an RGB tuple.

    Args:
        h: Hue in degrees (any value, wrapped to 0-360)
        s: Saturation in percent (0-100)
        l: Lightness in percent (0-100)

    Returns:
        RGB tuple (0-255 each)
    """
    h = (h % 360) / 360.0
    s = max(0.0, min(1.0, s / 100.0))
    l = max(0.0, min(1.0, l / 100.0))

    if s == 0:
        v = int(round(l * 255))
        return (v, v, v)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    def channel(t: float) -> float:
        t = t % 1.0
        if t < 1 / 6:
            return p + (q - p) * 6 * t
        if t < 1 / 2:
            return q
        if t < 2 / 3:
            return p + (q - p) * (2 / 3 - t) * 6
        return p

    r = channel(h + 1 / 3)
    g = channel(h)
    b = channel(h - 1 / 3)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def slice_color(index: int, count: int, saturation: float = 70, lightness: float = 55) -> Tuple[int, int, int]:
    """Fill color for slice index of count, hues spread evenly round the wheel."""
    hue = index * 360 / count
    return hsl_to_rgb(hue, saturation, lightness)
