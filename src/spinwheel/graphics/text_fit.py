"""Fitting wheel labels into the space a slice leaves for them.

Labels run radially from just outside the hub to just inside the rim, so
the room available is a length along the slice's centre line. Long labels
are cut back character by character and finished with an ellipsis.
"""

from typing import Callable

ELLIPSIS = "…"

MeasureFunc = Callable[[str], float]


def label_max_width(
    radius: float,
    hub_radius: float,
    outer_margin: float = 10,
    inner_margin: float = 30,
    min_width: float = 20,
) -> float:
    """Radial room for a label between the hub and the rim.

    Clamped to min_width so very small wheels still show a few characters.
    """
    text_end = radius - outer_margin
    text_start = hub_radius + inner_margin
    return max(min_width, text_end - text_start)


def fit_label(label: str, max_width: float, measure: MeasureFunc) -> str:
    """Shorten label until it fits in max_width.

    Text that already fits is returned untouched. Otherwise trailing
    characters are dropped until the text fits, one more is dropped to make
    room for the ellipsis, and the ellipsis is appended. If even that is too
    wide (wide ellipsis glyph, odd measurements), more characters go until it
    fits or nothing is left.

    Never raises and always terminates: each pass removes one character.

    Args:
        label: Text to fit
        max_width: Available width in the units measure returns
        measure: Width of a string

    Returns:
        label, a shortened label ending in an ellipsis, a lone ellipsis, or ""
    """
    if measure(label) <= max_width:
        return label

    ellipsis_width = measure(ELLIPSIS)
    if max_width <= 0 or ellipsis_width > max_width:
        # Not even the ellipsis fits
        return ""

    text = label
    while text and measure(text) > max_width:
        text = text[:-1]

    # Room for the ellipsis glyph
    text = text[:-1]
    while text and measure(text.rstrip() + ELLIPSIS) > max_width:
        text = text[:-1]

    return text.rstrip() + ELLIPSIS
