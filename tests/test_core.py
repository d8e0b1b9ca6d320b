"""Tests for easing, the state machine, the event bus and the frame clock."""

import pytest

from spinwheel.animation.easing import Easing, get_easing, progress
from spinwheel.core.clock import LoopFrameClock
from spinwheel.core.events import Event, EventBus, EventType
from spinwheel.core.state import SpinState, StateMachine


# ----------------------------------------------------------------------
# Easing
# ----------------------------------------------------------------------

@pytest.mark.parametrize("easing", list(Easing))
def test_easing_endpoints_and_monotonic(easing):
    func = get_easing(easing)
    assert func(0.0) == pytest.approx(0.0, abs=1e-3)
    assert func(1.0) == 1.0

    samples = [func(i / 50) for i in range(51)]
    assert all(b >= a for a, b in zip(samples, samples[1:]))


def test_ease_out_cubic_values():
    cubic = get_easing("ease_out_cubic")
    assert cubic(0.5) == pytest.approx(0.875)
    assert get_easing("EASE_OUT_CUBIC") is cubic


def test_unknown_easing():
    with pytest.raises(ValueError):
        get_easing("bounce")


def test_progress_clamps():
    assert progress(-10, 1000) == 0.0
    assert progress(250, 1000) == 0.25
    assert progress(5000, 1000) == 1.0
    assert progress(0, 0) == 1.0


# ----------------------------------------------------------------------
# State machine
# ----------------------------------------------------------------------

def test_state_cycle_notifies_listeners():
    machine = StateMachine()
    seen = []
    remove = machine.add_listener(lambda old, new: seen.append((old, new)))

    assert machine.transition(SpinState.SPINNING)
    assert machine.is_spinning
    assert machine.transition(SpinState.IDLE)
    assert seen == [
        (SpinState.IDLE, SpinState.SPINNING),
        (SpinState.SPINNING, SpinState.IDLE),
    ]

    remove()
    machine.transition(SpinState.SPINNING)
    assert len(seen) == 2


def test_invalid_transition_is_refused():
    machine = StateMachine()
    assert not machine.can_transition(SpinState.IDLE)
    assert not machine.transition(SpinState.IDLE)
    machine.transition(SpinState.SPINNING)
    assert not machine.transition(SpinState.SPINNING)
    assert machine.state is SpinState.SPINNING


# ----------------------------------------------------------------------
# Event bus
# ----------------------------------------------------------------------

def test_subscribe_and_unsubscribe():
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventType.SPIN_STARTED, received.append)

    bus.emit(Event(EventType.SPIN_STARTED))
    bus.emit(Event(EventType.SPIN_COMPLETE))
    unsubscribe()
    bus.emit(Event(EventType.SPIN_STARTED))

    assert [e.type for e in received] == [EventType.SPIN_STARTED]


def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.ITEMS_LOADED, broken)
    bus.subscribe_all(received.append)
    bus.emit(Event(EventType.ITEMS_LOADED, data={"count": 2}))

    assert received[0].data == {"count": 2}


def test_history_is_bounded():
    bus = EventBus(history_limit=3)
    for i in range(5):
        bus.emit(Event(EventType.STATUS_CHANGED, data={"status": str(i)}))

    history = bus.get_history(limit=10)
    assert [e.data["status"] for e in history] == ["2", "3", "4"]
    bus.clear_history()
    assert bus.get_history() == []


# ----------------------------------------------------------------------
# Frame clock
# ----------------------------------------------------------------------

def test_callbacks_fire_once_per_request():
    clock = LoopFrameClock()
    stamps = []
    clock.request_tick(stamps.append)

    assert clock.advance(10) == 1
    assert clock.advance(20) == 0
    assert stamps == [10]


def test_callbacks_requested_during_advance_wait_a_frame():
    clock = LoopFrameClock()
    stamps = []

    def tick(now):
        stamps.append(now)
        if len(stamps) < 3:
            clock.request_tick(tick)

    clock.request_tick(tick)
    clock.advance(0)
    assert stamps == [0]
    clock.advance(16)
    clock.advance(32)
    clock.advance(48)
    assert stamps == [0, 16, 32]


def test_cancel():
    clock = LoopFrameClock()
    stamps = []
    handle = clock.request_tick(stamps.append)
    clock.cancel(handle)
    clock.cancel(9999)
    clock.advance(5)
    assert stamps == []


def test_timestamps_never_go_backwards():
    clock = LoopFrameClock()
    stamps = []
    clock.request_tick(stamps.append)
    clock.advance(100)
    clock.request_tick(stamps.append)
    clock.advance(50)
    assert stamps == [100, 100]


def test_callbacks_after_a_failing_one_run_next_frame():
    clock = LoopFrameClock()
    stamps = []

    def broken(now):
        raise RuntimeError("boom")

    clock.request_tick(broken)
    clock.request_tick(stamps.append)

    with pytest.raises(RuntimeError):
        clock.advance(10)
    assert stamps == []
    assert clock.pending == 1

    clock.advance(20)
    assert stamps == [20]
    assert clock.pending == 0
