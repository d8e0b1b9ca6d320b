"""Spin controller.

Owns the IDLE -> SPINNING -> IDLE cycle: picks the winning slice, works
out where the wheel has to stop, drives the animation from the frame
clock and reports the result once the wheel is at rest.
"""

from dataclasses import dataclass
from typing import Callable, Optional
import logging
import random

from spinwheel import geometry
from spinwheel.animation.easing import EasingFunc, get_easing, progress
from spinwheel.config.settings import WheelSettings
from spinwheel.core.clock import FrameClock
from spinwheel.core.events import EventBus, spin_complete_event, spin_started_event
from spinwheel.core.state import SpinState, StateMachine
from spinwheel.graphics.renderer import WheelRenderer
from spinwheel.graphics.surface import DisplaySurface
from spinwheel.models import SpinResult, WheelSession

logger = logging.getLogger(__name__)

ResultCallback = Callable[[SpinResult], None]


@dataclass
class SpinPlan:
    """Everything fixed at the moment a spin starts."""
    target_index: int
    start_angle: float
    target_angle: float
    duration_ms: float
    start_time: Optional[float] = None

    @property
    def total_change(self) -> float:
        return self.target_angle - self.start_angle


class SpinController:
    """
    Runs spins for one WheelSession.

    The controller renders every frame itself, so the wheel on screen is
    always the session's current angle. Results go to on_result and, when
    an event bus is given, out as SPIN_COMPLETE.
    """

    def __init__(
        self,
        session: WheelSession,
        renderer: WheelRenderer,
        surface: DisplaySurface,
        clock: FrameClock,
        settings: WheelSettings | None = None,
        rng: Optional[random.Random] = None,
        events: Optional[EventBus] = None,
        on_result: Optional[ResultCallback] = None,
        pointer_angle: float = geometry.POINTER_ANGLE,
    ) -> None:
        self.session = session
        self.renderer = renderer
        self.surface = surface
        self.clock = clock
        self.settings = settings or WheelSettings()
        self.events = events
        self.on_result = on_result
        self.pointer_angle = pointer_angle

        self._rng = rng or random.Random()
        self._easing: EasingFunc = get_easing(self.settings.easing)
        self._plan: Optional[SpinPlan] = None
        self._tick_handle: Optional[int] = None

        self.state_machine = StateMachine()
        self.state_machine.add_listener(self._on_state_change)

    @property
    def state(self) -> SpinState:
        return self.state_machine.state

    @property
    def plan(self) -> Optional[SpinPlan]:
        """The running spin, or None while idle."""
        return self._plan

    def _on_state_change(self, old: SpinState, new: SpinState) -> None:
        self.session.is_spinning = new == SpinState.SPINNING

    def set_surface(self, surface: DisplaySurface) -> None:
        """Draw on a different surface from the next frame on."""
        self.surface = surface

    def redraw(self) -> None:
        """Render the session's current state."""
        self.renderer.render(self.surface, self.session.items, self.session.rotation_angle)

    def request_spin(self) -> bool:
        """Start a spin if the wheel has items and is at rest.

        Returns:
            True if a spin started. Requests with no items or during a
            spin are ignored and return False.
        """
        session = self.session
        if not session.items:
            logger.debug("Spin ignored: no items")
            return False
        if self.state_machine.is_spinning:
            logger.debug("Spin ignored: already spinning")
            return False

        count = len(session.items)
        target_index = geometry.pick_index(count, self._rng)

        # Keep the stored angle small across long sessions
        start_angle = geometry.normalize_angle(session.rotation_angle)
        session.rotation_angle = start_angle

        target_angle = geometry.compute_target_angle(
            start_angle,
            target_index,
            count,
            self.settings.extra_spins,
            self.pointer_angle,
        )
        self._plan = SpinPlan(
            target_index=target_index,
            start_angle=start_angle,
            target_angle=target_angle,
            duration_ms=self.settings.spin_duration_ms,
        )

        self.state_machine.transition(SpinState.SPINNING)
        logger.info(
            f"Spinning to slice {target_index} of {count} "
            f"({start_angle:.3f} -> {target_angle:.3f} rad)"
        )
        if self.events:
            self.events.emit(spin_started_event(target_index, target_angle))

        self._tick_handle = self.clock.request_tick(self._on_tick)
        return True

    def _on_tick(self, timestamp: float) -> None:
        """Advance the animation to timestamp (ms)."""
        self._tick_handle = None
        plan = self._plan
        if plan is None:
            return

        # First frame anchors the animation start
        if plan.start_time is None:
            plan.start_time = timestamp

        t = progress(timestamp - plan.start_time, plan.duration_ms)
        eased = self._easing(t)
        self.session.rotation_angle = plan.start_angle + plan.total_change * eased

        if t >= 1.0:
            self._finish(plan)
            return

        # Booked before drawing; a failed frame does not end the spin
        self._tick_handle = self.clock.request_tick(self._on_tick)
        self.redraw()

    def _finish(self, plan: SpinPlan) -> None:
        """Lock in the final angle, return to IDLE and report the result.

        The wheel is back at rest before the last frame is drawn, so an
        error from the surface still propagates but never leaves the
        controller stuck in SPINNING.
        """
        session = self.session
        session.rotation_angle = plan.target_angle
        self._plan = None

        item = session.items[plan.target_index]
        result = SpinResult(
            target_index=plan.target_index,
            final_angle=plan.target_angle,
            item=item,
        )
        session.selected = item
        self.state_machine.transition(SpinState.IDLE)

        logger.info(f"Spin complete: {item.label!r} (slice {plan.target_index})")

        try:
            self.redraw()
        finally:
            if self.on_result:
                self.on_result(result)
            if self.events:
                self.events.emit(spin_complete_event(result))
