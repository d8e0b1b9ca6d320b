"""
pygame implementation of DisplaySurface.

Wraps a pygame.Surface (the window, or an off-screen canvas) and keeps a
2D affine transform stack as 3x3 numpy matrices. Shapes are transformed
point by point before pygame draws them; text is rendered upright and
rotated with pygame.transform.rotate.
"""

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray
import pygame

from spinwheel.graphics.surface import Color, DisplaySurface, Point, TextAlign

# Arc tessellation: one vertex every ~3 degrees, at least a few per slice
ARC_STEP = math.radians(3)
MIN_ARC_SEGMENTS = 4


def _translation(dx: float, dy: float) -> NDArray[np.float64]:
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])


def _rotation(angle: float) -> NDArray[np.float64]:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


class PygameSurface(DisplaySurface):
    """
    DisplaySurface drawing onto a pygame.Surface.

    Fonts are loaded lazily per size and cached. pygame.font is initialised
    on first use if the caller has not done so.
    """

    def __init__(self, target: pygame.Surface, font_name: str | None = None) -> None:
        self._target = target
        self._font_name = font_name
        self._fonts: dict[int, pygame.font.Font] = {}
        self._matrix = np.identity(3)
        self._stack: list[NDArray[np.float64]] = []

    @property
    def target(self) -> pygame.Surface:
        return self._target

    def set_target(self, target: pygame.Surface) -> None:
        """Swap the backing surface, e.g. after a window resize."""
        self._target = target

    @property
    def width(self) -> int:
        return self._target.get_width()

    @property
    def height(self) -> int:
        return self._target.get_height()

    # ------------------------------------------------------------------
    # Transform stack
    # ------------------------------------------------------------------

    def translate(self, dx: float, dy: float) -> None:
        self._matrix = self._matrix @ _translation(dx, dy)

    def rotate(self, angle: float) -> None:
        self._matrix = self._matrix @ _rotation(angle)

    def save(self) -> None:
        self._stack.append(self._matrix.copy())

    def restore(self) -> None:
        if self._stack:
            self._matrix = self._stack.pop()

    def _apply(self, points: Sequence[Point]) -> list[tuple[float, float]]:
        """Map local points to target pixel coordinates."""
        pts = np.ones((len(points), 3))
        pts[:, :2] = np.asarray(points, dtype=np.float64)
        mapped = pts @ self._matrix.T
        return [(float(x), float(y)) for x, y in mapped[:, :2]]

    def _current_rotation(self) -> float:
        return math.atan2(self._matrix[1, 0], self._matrix[0, 0])

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def clear(self, color: Color = (0, 0, 0)) -> None:
        self._target.fill(color)

    def fill_wedge(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        color: Color,
    ) -> None:
        sweep = end_angle - start_angle
        segments = max(MIN_ARC_SEGMENTS, int(math.ceil(abs(sweep) / ARC_STEP)))
        angles = np.linspace(start_angle, end_angle, segments + 1)

        points: list[Point] = [(cx, cy)]
        points.extend(
            (cx + radius * math.cos(a), cy + radius * math.sin(a)) for a in angles
        )
        pygame.draw.polygon(self._target, color, self._apply(points))

    def fill_circle(self, cx: float, cy: float, radius: float, color: Color) -> None:
        (x, y), = self._apply([(cx, cy)])
        pygame.draw.circle(self._target, color, (round(x), round(y)), max(0, round(radius)))

    def fill_polygon(self, points: Sequence[Point], color: Color) -> None:
        if len(points) < 3:
            return
        pygame.draw.polygon(self._target, color, self._apply(points))

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(self._font_name, size)
            self._fonts[size] = font
        return font

    def measure_text(self, text: str, size: int) -> float:
        if not text:
            return 0.0
        return float(self._font(size).size(text)[0])

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color,
        size: int,
        align: TextAlign = TextAlign.LEFT,
    ) -> None:
        if not text:
            return

        rendered = self._font(size).render(text, True, color)
        text_width = rendered.get_width()

        # Centre of the text box in local coordinates
        if align == TextAlign.RIGHT:
            local_center = (x - text_width / 2, y)
        elif align == TextAlign.CENTER:
            local_center = (x, y)
        else:
            local_center = (x + text_width / 2, y)

        (sx, sy), = self._apply([local_center])

        angle = self._current_rotation()
        if abs(angle) > 1e-9:
            # pygame rotates counter-clockwise, ours is clockwise
            rendered = pygame.transform.rotate(rendered, -math.degrees(angle))

        rect = rendered.get_rect(center=(round(sx), round(sy)))
        self._target.blit(rendered, rect)
