"""
Desktop wheel client using pygame.

Shows the category selector, status line, the wheel and the last
selected item, and wires keyboard input to refresh, category change and
spin requests.
"""

import asyncio
import logging
import time
from typing import Optional

import pygame

from spinwheel.config.settings import Settings
from spinwheel.core.clock import LoopFrameClock
from spinwheel.core.controller import SpinController
from spinwheel.core.events import Event, EventBus, EventType
from spinwheel.core.registry import ItemRegistry
from spinwheel.graphics.pygame_surface import PygameSurface
from spinwheel.graphics.renderer import WheelRenderer, WheelStyle
from spinwheel.models import SpinResult, WheelSession
from spinwheel.source.base import ItemSource
from spinwheel.source.http import HttpItemSource

logger = logging.getLogger(__name__)

# Space kept around the wheel canvas
CANVAS_PADDING = 40
MIN_CANVAS_SIZE = 120


class WheelWindow:
    """
    Main client window.

    Keyboard Mapping:
        SPACE/RETURN: Spin
        R: Refresh items
        LEFT/RIGHT: Previous/next category
        1-9: Jump to category
        L: Toggle log viewer
        S: Capture screenshot
        ESC/Q: Exit
    """

    def __init__(
        self,
        settings: Settings,
        source: Optional[ItemSource] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings
        self.config = settings.window
        self.event_bus = event_bus or EventBus()

        self.source = source or HttpItemSource(
            settings.source.api_endpoint,
            timeout=settings.source.request_timeout,
        )
        self.session = WheelSession(category=settings.source.default_category)
        self.registry = ItemRegistry(
            self.source,
            session=self.session,
            settings=settings.source,
            events=self.event_bus,
        )

        self.categories = list(settings.source.categories)
        if self.session.category not in self.categories:
            self.categories.insert(0, self.session.category)

        self.clock = LoopFrameClock()
        self.renderer = WheelRenderer(
            WheelStyle.from_settings(settings.wheel, background=self.config.bg_color)
        )

        # Created in _init_pygame
        self._screen: pygame.Surface | None = None
        self._canvas: pygame.Surface | None = None
        self._wheel_surface: PygameSurface | None = None
        self.controller: SpinController | None = None

        self._pg_clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None

        self._running = False
        self._frame_count = 0
        self._load_task: asyncio.Task | None = None
        self._spun_once = False

        # Log viewer
        self._show_log = False
        self._log_buffer: list[str] = []
        self._max_log_lines = 18
        self._log_handler: logging.Handler | None = None

        self.event_bus.subscribe(EventType.ITEMS_LOADED, self._on_items_changed)
        self.event_bus.subscribe(EventType.ITEMS_FAILED, self._on_items_changed)

        self._setup_log_capture()
        logger.info("WheelWindow created")

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def _setup_log_capture(self) -> None:
        """Setup log capturing for the log viewer."""
        class WindowLogHandler(logging.Handler):
            def __init__(self, window: 'WheelWindow'):
                super().__init__()
                self.window = window

            def emit(self, record):
                msg = self.format(record)
                self.window._log_buffer.append(msg)
                if len(self.window._log_buffer) > self.window._max_log_lines * 2:
                    self.window._log_buffer = self.window._log_buffer[-self.window._max_log_lines:]

        handler = WindowLogHandler(self)
        handler.setFormatter(logging.Formatter('%(levelname).1s %(name)s: %(message)s'))
        logging.getLogger().addHandler(handler)
        self._log_handler = handler

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.resizable:
            flags |= pygame.RESIZABLE

        self._screen = pygame.display.set_mode((self.config.width, self.config.height), flags)
        self._pg_clock = pygame.time.Clock()

        pygame.font.init()
        font_name = self.settings.wheel.font_name
        self._font = pygame.font.Font(font_name, 20)
        self._big_font = pygame.font.Font(font_name, 30)
        self._small_font = pygame.font.Font(font_name, 14)

        self._canvas = pygame.Surface(self._canvas_size())
        self._wheel_surface = PygameSurface(self._canvas, font_name=font_name)
        self.controller = SpinController(
            self.session,
            self.renderer,
            self._wheel_surface,
            self.clock,
            settings=self.settings.wheel,
            events=self.event_bus,
            on_result=self._on_spin_result,
        )
        self.controller.redraw()

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    def _canvas_size(self) -> tuple[int, int]:
        """Square wheel canvas that fits the window width, capped."""
        w, h = self._screen.get_size() if self._screen else (self.config.width, self.config.height)
        size = min(w - CANVAS_PADDING, h - 220, self.config.max_wheel_size)
        size = max(MIN_CANVAS_SIZE, size)
        return (size, size)

    def _on_resize(self, width: int, height: int) -> None:
        self.config.width, self.config.height = width, height
        if self.config.resizable:
            self._screen = pygame.display.set_mode((width, height), pygame.DOUBLEBUF | pygame.RESIZABLE)

        self._canvas = pygame.Surface(self._canvas_size())
        if self._wheel_surface and self.controller:
            self._wheel_surface.set_target(self._canvas)
            # Mid-spin the next tick redraws anyway
            if not self.session.is_spinning:
                self.controller.redraw()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return self._load_task is not None and not self._load_task.done()

    def request_load(self, category: Optional[str] = None) -> None:
        """Start loading a category in the background."""
        if self.is_loading or self.session.is_spinning:
            return
        self._spun_once = False
        self._load_task = asyncio.create_task(self.registry.load(category))

    def request_spin(self) -> None:
        if self.is_loading or not self.controller:
            return
        if self.controller.request_spin():
            self.registry.set_status("Spinning...")

    def select_category(self, index: int) -> None:
        if not self.categories:
            return
        category = self.categories[index % len(self.categories)]
        if category != self.session.category or not self.session.items:
            self.request_load(category)

    def _category_index(self) -> int:
        try:
            return self.categories.index(self.session.category)
        except ValueError:
            return 0

    def _on_items_changed(self, event: Event) -> None:
        if self.controller:
            self.controller.redraw()

    def _on_spin_result(self, result: SpinResult) -> None:
        self.registry.apply_result(result)
        self._spun_once = True

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.VIDEORESIZE:
                self._on_resize(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            self.request_spin()
        elif key == pygame.K_r:
            self.request_load()
        elif key == pygame.K_LEFT:
            self.select_category(self._category_index() - 1)
        elif key == pygame.K_RIGHT:
            self.select_category(self._category_index() + 1)
        elif pygame.K_1 <= key <= pygame.K_9:
            index = key - pygame.K_1
            if index < len(self.categories):
                self.select_category(index)
        elif key == pygame.K_l:
            self._show_log = not self._show_log
        elif key == pygame.K_s:
            self._capture_screenshot()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self) -> None:
        """Render all UI elements."""
        if not self._screen:
            return

        self._screen.fill(self.config.bg_color)
        width = self._screen.get_width()

        y = 16
        y = self._blit_centered(self.config.title, self._big_font, self.config.accent_color, y)
        y = self._blit_centered(
            f"<  {self.session.category}  >",
            self._font,
            self.config.text_color,
            y + 8,
        )
        y = self._blit_centered(self.session.status, self._small_font, (160, 160, 180), y + 6)

        if self._canvas:
            rect = self._canvas.get_rect(midtop=(width // 2, y + 12))
            pygame.draw.rect(self._screen, self.config.panel_color, rect.inflate(8, 8), border_radius=6)
            self._screen.blit(self._canvas, rect.topleft)
            y = rect.bottom + 16

        selected = self.session.selected.label if self.session.selected else ""
        if selected and not self.session.is_spinning:
            y = self._blit_centered(selected, self._big_font, self.config.accent_color, y)
        else:
            y += 34

        self._blit_centered(self._spin_hint(), self._small_font, (120, 120, 140), y + 8)

        if self._show_log:
            self._render_log_panel()

        pygame.display.flip()

    def _spin_hint(self) -> str:
        if self.is_loading:
            return "Loading..."
        if not self.session.items:
            return "R refresh   < > category"
        label = "Spin Again" if self._spun_once else "Spin"
        return f"SPACE {label}   R refresh   < > category"

    def _blit_centered(self, text: str, font: pygame.font.Font | None, color, y: int) -> int:
        """Draw one centred line; returns the y below it."""
        if not font or not self._screen:
            return y
        surf = font.render(text, True, color)
        rect = surf.get_rect(midtop=(self._screen.get_width() // 2, y))
        self._screen.blit(surf, rect)
        return rect.bottom

    def _render_log_panel(self) -> None:
        """Render the log viewer panel."""
        if not self._small_font or not self._screen:
            return

        w, h = self._screen.get_size()
        rect = pygame.Rect(10, 10, w - 20, h - 20)

        surf = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
        surf.fill((20, 25, 35, 230))
        self._screen.blit(surf, rect.topleft)
        pygame.draw.rect(self._screen, (60, 80, 100), rect, 1, border_radius=5)

        y = rect.y + 8
        for line in self._log_buffer[-self._max_log_lines:]:
            if line.startswith('E'):
                color = (255, 100, 100)
            elif line.startswith('W'):
                color = (255, 200, 100)
            elif line.startswith('I'):
                color = (150, 200, 150)
            else:
                color = (150, 150, 170)
            self._screen.blit(self._small_font.render(line[:90], True, color), (rect.x + 8, y))
            y += 16

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True
        self.request_load()

        logger.info("Wheel window started")

        try:
            while self._running:
                self._handle_events()

                # Drive the spin animation
                self.clock.advance(time.perf_counter() * 1000.0)

                self._render()

                if self._pg_clock:
                    self._pg_clock.tick(self.config.fps)
                self._frame_count += 1

                # Yield to the item loading task
                await asyncio.sleep(0)
        finally:
            await self._cleanup()

    async def _cleanup(self) -> None:
        """Clean up pygame and network resources."""
        if self._load_task and not self._load_task.done():
            self._load_task.cancel()
        await self.source.close()
        if self._log_handler:
            logging.getLogger().removeHandler(self._log_handler)
        pygame.quit()
        logger.info("Wheel window stopped")

    def stop(self) -> None:
        """Stop the window loop."""
        self._running = False
