"""
Abstract drawing surface for the wheel renderer.

The renderer only talks to this interface, so the same drawing code runs
on a pygame window, an off-screen pygame Surface, or a recording fake in
tests.

Coordinates are pixels with the origin in the top-left corner and y
pointing down; angles are radians growing clockwise. All drawing calls
go through the current transform (translate/rotate), which save() and
restore() push and pop.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence

Color = tuple[int, int, int]
Point = tuple[float, float]


class TextAlign(Enum):
    """Horizontal anchor of text relative to its x position."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class DisplaySurface(ABC):
    """Abstract base class for anything the wheel can be drawn on."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Surface width in pixels."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Surface height in pixels."""
        ...

    @abstractmethod
    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Fill the whole surface with a color, ignoring the transform."""
        ...

    @abstractmethod
    def fill_wedge(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        color: Color,
    ) -> None:
        """Fill the pie slice from the centre out to radius between two angles."""
        ...

    @abstractmethod
    def fill_circle(self, cx: float, cy: float, radius: float, color: Color) -> None:
        """Fill a full circle."""
        ...

    @abstractmethod
    def fill_polygon(self, points: Sequence[Point], color: Color) -> None:
        """Fill a closed polygon."""
        ...

    @abstractmethod
    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color,
        size: int,
        align: TextAlign = TextAlign.LEFT,
    ) -> None:
        """
        Draw a single line of text.

        Args:
            text: Text to draw
            x: Anchor x, interpreted according to align
            y: Baseline-ish y; text is vertically centred on it
            color: RGB color
            size: Font size in pixels
            align: Horizontal anchor
        """
        ...

    @abstractmethod
    def measure_text(self, text: str, size: int) -> float:
        """Width in pixels that draw_text would use for text."""
        ...

    @abstractmethod
    def translate(self, dx: float, dy: float) -> None:
        """Move the origin of the current transform."""
        ...

    @abstractmethod
    def rotate(self, angle: float) -> None:
        """Rotate the current transform by angle radians (clockwise)."""
        ...

    @abstractmethod
    def save(self) -> None:
        """Push the current transform."""
        ...

    @abstractmethod
    def restore(self) -> None:
        """Pop the last saved transform."""
        ...
