"""Shared fixtures: a recording surface, a scripted item source, settings."""

from typing import Sequence

import pytest

from spinwheel.config.settings import SourceSettings, WheelSettings
from spinwheel.core.clock import LoopFrameClock
from spinwheel.exceptions import ItemSourceError
from spinwheel.graphics.renderer import WheelRenderer
from spinwheel.graphics.surface import Color, DisplaySurface, Point, TextAlign
from spinwheel.models import Item, WheelSession
from spinwheel.source.base import ItemSource

GLYPH_WIDTH = 10.0


class RecordingSurface(DisplaySurface):
    """Surface fake that records draw calls instead of drawing.

    Text width is GLYPH_WIDTH per character. The transform is tracked as a
    plain (dx, dy, rotation) triple, enough for the renderer's
    translate-then-rotate usage.
    """

    def __init__(self, width: int = 360, height: int = 360, glyph_width: float = GLYPH_WIDTH):
        self._width = width
        self._height = height
        self.glyph_width = glyph_width
        self.calls: list[tuple] = []
        self.transform = (0.0, 0.0, 0.0)
        self._stack: list[tuple[float, float, float]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        self._width, self._height = width, height

    @property
    def depth(self) -> int:
        return len(self._stack)

    def clear(self, color: Color = (0, 0, 0)) -> None:
        self.calls = [("clear", color)]

    def fill_wedge(self, cx, cy, radius, start_angle, end_angle, color) -> None:
        self.calls.append(("wedge", cx, cy, radius, start_angle, end_angle, color))

    def fill_circle(self, cx, cy, radius, color) -> None:
        self.calls.append(("circle", cx, cy, radius, color))

    def fill_polygon(self, points: Sequence[Point], color: Color) -> None:
        self.calls.append(("polygon", tuple(points), color))

    def draw_text(self, text, x, y, color, size, align=TextAlign.LEFT) -> None:
        self.calls.append(("text", text, x, y, align, self.transform))

    def measure_text(self, text: str, size: int) -> float:
        return len(text) * self.glyph_width

    def translate(self, dx: float, dy: float) -> None:
        x, y, r = self.transform
        self.transform = (x + dx, y + dy, r)

    def rotate(self, angle: float) -> None:
        x, y, r = self.transform
        self.transform = (x, y, r + angle)

    def save(self) -> None:
        self._stack.append(self.transform)

    def restore(self) -> None:
        self.transform = self._stack.pop()

    def of_kind(self, kind: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == kind]


class ScriptedSource(ItemSource):
    """Item source returning canned results per category."""

    def __init__(self, results: dict | None = None):
        self.results = results or {}
        self.requests: list[str] = []
        self.closed = False

    async def fetch(self, category: str) -> list[Item]:
        self.requests.append(category)
        result = self.results.get(category, [])
        if isinstance(result, Exception):
            raise result
        return list(result)

    async def close(self) -> None:
        self.closed = True


def make_items(*labels: str) -> tuple[Item, ...]:
    return tuple(Item(id=f"id-{i}", label=label) for i, label in enumerate(labels))


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def clock() -> LoopFrameClock:
    return LoopFrameClock()


@pytest.fixture
def wheel_settings() -> WheelSettings:
    return WheelSettings(spin_duration_ms=1000, extra_spins=3)


@pytest.fixture
def source_settings() -> SourceSettings:
    return SourceSettings()


@pytest.fixture
def renderer() -> WheelRenderer:
    return WheelRenderer()


@pytest.fixture
def food_items() -> tuple[Item, ...]:
    return make_items("Pizza", "Tacos", "Sushi", "Salad")


@pytest.fixture
def session(food_items) -> WheelSession:
    return WheelSession(items=food_items, category="Food")


@pytest.fixture
def failing_source() -> ScriptedSource:
    return ScriptedSource({"Sides": ItemSourceError("HTTP error 500", status=500)})
