"""Graphics module for the SPINWHEEL rendering pipeline.

PygameSurface lives in spinwheel.graphics.pygame_surface and is imported
by the window directly.
"""

from spinwheel.graphics.colors import hsl_to_rgb, slice_color
from spinwheel.graphics.renderer import WheelLayout, WheelRenderer, WheelStyle
from spinwheel.graphics.surface import DisplaySurface, TextAlign
from spinwheel.graphics.text_fit import ELLIPSIS, fit_label, label_max_width

__all__ = [
    "DisplaySurface",
    "ELLIPSIS",
    "TextAlign",
    "WheelLayout",
    "WheelRenderer",
    "WheelStyle",
    "fit_label",
    "hsl_to_rgb",
    "label_max_width",
    "slice_color",
]
