"""Core framework components for SPINWHEEL."""

from .state import SpinState, StateMachine
from .events import EventBus, Event, EventType
from .clock import FrameClock, LoopFrameClock
from .controller import SpinController, SpinPlan
from .registry import ItemRegistry

__all__ = [
    "SpinState",
    "StateMachine",
    "EventBus",
    "Event",
    "EventType",
    "FrameClock",
    "LoopFrameClock",
    "SpinController",
    "SpinPlan",
    "ItemRegistry",
]
