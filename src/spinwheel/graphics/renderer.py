"""Wheel renderer.

Draws the complete wheel (slices, labels, hub and pointer) for a list of
items at a given rotation. Rendering keeps no state between calls: the
picture depends only on the items, the rotation and the surface size, so
a window resize mid-spin simply changes the next frame's layout.
"""

from dataclasses import dataclass
from typing import Sequence

from spinwheel import geometry
from spinwheel.config.settings import WheelSettings
from spinwheel.graphics.colors import slice_color
from spinwheel.graphics.surface import Color, DisplaySurface, TextAlign
from spinwheel.graphics.text_fit import fit_label, label_max_width
from spinwheel.models import Item


@dataclass
class WheelStyle:
    """Visual constants for the wheel."""

    hub_radius: float = 20
    outer_margin: float = 6
    label_margin_outer: float = 10
    label_margin_inner: float = 30
    label_min_width: float = 20
    pointer_size: float = 10
    font_size: int = 14
    saturation: float = 70
    lightness: float = 55
    placeholder_text: str = "No items"

    background: Color = (24, 24, 32)
    label_color: Color = (255, 255, 255)
    hub_color: Color = (255, 255, 255)
    pointer_color: Color = (0, 0, 0)
    placeholder_color: Color = (153, 153, 153)

    @classmethod
    def from_settings(cls, settings: WheelSettings, background: Color | None = None) -> "WheelStyle":
        style = cls(
            hub_radius=settings.hub_radius,
            outer_margin=settings.outer_margin,
            label_margin_outer=settings.label_margin_outer,
            label_margin_inner=settings.label_margin_inner,
            label_min_width=settings.label_min_width,
            pointer_size=settings.pointer_size,
            font_size=settings.font_size,
            saturation=settings.saturation,
            lightness=settings.lightness,
            placeholder_text=settings.placeholder_text,
        )
        if background is not None:
            style.background = background
        return style


@dataclass(frozen=True)
class WheelLayout:
    """Pixel geometry derived from the surface size."""
    cx: float
    cy: float
    radius: float

    @classmethod
    def for_surface(cls, surface: DisplaySurface, outer_margin: float) -> "WheelLayout":
        cx = surface.width / 2
        cy = surface.height / 2
        radius = max(0.0, min(cx, cy) - outer_margin)
        return cls(cx=cx, cy=cy, radius=radius)


class WheelRenderer:
    """Draws wheel states onto a DisplaySurface."""

    def __init__(self, style: WheelStyle | None = None) -> None:
        self.style = style or WheelStyle()

    def render(
        self,
        surface: DisplaySurface,
        items: Sequence[Item],
        rotation_angle: float,
    ) -> None:
        """Draw the wheel for items rotated by rotation_angle.

        Errors raised by the surface propagate to the caller.
        """
        style = self.style
        surface.clear(style.background)
        layout = WheelLayout.for_surface(surface, style.outer_margin)

        if not items:
            self._draw_placeholder(surface, layout)
            return

        count = len(items)
        span = geometry.slice_angle(count)
        max_width = label_max_width(
            layout.radius,
            style.hub_radius,
            style.label_margin_outer,
            style.label_margin_inner,
            style.label_min_width,
        )

        for i, item in enumerate(items):
            start, end = geometry.slice_bounds(i, count, rotation_angle)
            color = slice_color(i, count, style.saturation, style.lightness)
            surface.fill_wedge(layout.cx, layout.cy, layout.radius, start, end, color)
            self._draw_label(surface, layout, item.label, start + span / 2, max_width)

        surface.fill_circle(layout.cx, layout.cy, style.hub_radius, style.hub_color)
        self._draw_pointer(surface, layout)

    def _draw_placeholder(self, surface: DisplaySurface, layout: WheelLayout) -> None:
        style = self.style
        surface.draw_text(
            style.placeholder_text,
            layout.cx,
            layout.cy,
            style.placeholder_color,
            style.font_size,
            TextAlign.CENTER,
        )

    def _draw_label(
        self,
        surface: DisplaySurface,
        layout: WheelLayout,
        label: str,
        angle: float,
        max_width: float,
    ) -> None:
        """Draw label along the slice's centre line, right edge near the rim."""
        style = self.style
        size = style.font_size

        surface.save()
        try:
            surface.translate(layout.cx, layout.cy)
            surface.rotate(angle)
            text = fit_label(label, max_width, lambda s: surface.measure_text(s, size))
            if text:
                surface.draw_text(
                    text,
                    layout.radius - style.label_margin_outer,
                    0,
                    style.label_color,
                    size,
                    TextAlign.RIGHT,
                )
        finally:
            surface.restore()

    def _draw_pointer(self, surface: DisplaySurface, layout: WheelLayout) -> None:
        """Fixed triangle at 12 o'clock, tip pointing into the wheel."""
        size = self.style.pointer_size
        top = layout.cy - layout.radius
        points = [
            (layout.cx, top + size * 0.8),
            (layout.cx - size, top - size * 0.8),
            (layout.cx + size, top - size * 0.8),
        ]
        surface.fill_polygon(points, self.style.pointer_color)
