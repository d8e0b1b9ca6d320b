"""
Event bus for SPINWHEEL.

The registry and the spin controller publish what happened to the wheel;
the window and the tests listen. Delivery is synchronous on the event
loop thread, in subscription order.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """What can happen to a wheel."""
    # Item list
    ITEMS_LOADING = auto()
    ITEMS_LOADED = auto()
    ITEMS_FAILED = auto()

    # Status line
    STATUS_CHANGED = auto()

    # Spin cycle
    SPIN_STARTED = auto()
    SPIN_COMPLETE = auto()


@dataclass
class Event:
    """
    One published occurrence.

    Attributes:
        type: EventType, or a string for ad-hoc events
        data: Payload, keys depend on the type
        source: "registry", "spin" or another component name
        timestamp: Wall-clock creation time
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]


class EventBus:
    """
    Synchronous pub/sub with a bounded history.

    A handler that raises is logged and skipped; the rest still run.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._by_type: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._wildcard: list[Handler] = []
        self._history: deque[Event] = deque(maxlen=history_limit)

    def subscribe(self, event_type: EventType | str, handler: Handler) -> Callable[[], None]:
        """Call handler for every event of event_type.

        Returns:
            Function that removes the subscription again
        """
        return self._attach(self._by_type[event_type], handler)

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Call handler for every event. Returns an unsubscribe function."""
        return self._attach(self._wildcard, handler)

    @staticmethod
    def _attach(handlers: list[Handler], handler: Handler) -> Callable[[], None]:
        handlers.append(handler)

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Record event and deliver it to its subscribers now."""
        self._history.append(event)

        for handler in [*self._by_type.get(event.type, ()), *self._wildcard]:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Handler for {event.type} failed: {e}")

    def get_history(self, event_type: EventType | str | None = None, limit: int = 10) -> list[Event]:
        """Most recent events, oldest first, optionally of one type only."""
        events = [e for e in self._history if event_type is None or e.type == event_type]
        return events[-limit:]

    def clear_history(self) -> None:
        self._history.clear()


# Constructors for the events the wheel publishes
def status_event(status: str) -> Event:
    return Event(EventType.STATUS_CHANGED, data={"status": status}, source="registry")


def items_event(event_type: EventType, category: str, **data: Any) -> Event:
    """ITEMS_LOADING / ITEMS_LOADED / ITEMS_FAILED for category."""
    return Event(event_type, data={"category": category, **data}, source="registry")


def spin_started_event(target_index: int, target_angle: float) -> Event:
    return Event(
        EventType.SPIN_STARTED,
        data={"target_index": target_index, "target_angle": target_angle},
        source="spin",
    )


def spin_complete_event(result: Any) -> Event:
    """SPIN_COMPLETE carrying the SpinResult under "result"."""
    return Event(EventType.SPIN_COMPLETE, data={"result": result}, source="spin")
