"""
Frame clock abstraction.

A frame clock calls back once per display refresh with a monotonic
timestamp in milliseconds. Callbacks are one-shot: an animation that
wants the next frame must ask again from inside its callback.
"""

from abc import ABC, abstractmethod
from typing import Callable
import itertools
import logging

logger = logging.getLogger(__name__)

TickCallback = Callable[[float], None]


class FrameClock(ABC):
    """Schedules per-frame callbacks."""

    @abstractmethod
    def request_tick(self, callback: TickCallback) -> int:
        """Run callback on the next frame. Returns a handle for cancel()."""
        ...

    @abstractmethod
    def cancel(self, handle: int) -> None:
        """Drop a pending callback. Unknown handles are ignored."""
        ...


class LoopFrameClock(FrameClock):
    """
    Frame clock pumped by a host loop.

    The window loop calls advance(now_ms) once per frame; every callback
    requested before that call fires exactly once with now_ms. Callbacks
    requested while advancing wait for the next frame.
    """

    def __init__(self) -> None:
        self._pending: dict[int, TickCallback] = {}
        self._ids = itertools.count(1)
        self._last_timestamp: float | None = None

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_tick(self, callback: TickCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def advance(self, now_ms: float) -> int:
        """Fire all callbacks due this frame.

        Timestamps never go backwards; an earlier now_ms is raised to the
        previous frame's value. If a callback raises, the error propagates
        and the callbacks that had not fired yet stay queued for the next
        frame.

        Returns:
            Number of callbacks fired
        """
        if self._last_timestamp is not None and now_ms < self._last_timestamp:
            logger.debug(f"Clock went backwards ({now_ms} < {self._last_timestamp})")
            now_ms = self._last_timestamp
        self._last_timestamp = now_ms

        due = list(self._pending.items())
        self._pending = {}
        for position, (_, callback) in enumerate(due):
            try:
                callback(now_ms)
            except Exception:
                # Unfired callbacks go ahead of ones requested this frame
                self._pending = {**dict(due[position + 1:]), **self._pending}
                raise
        return len(due)
