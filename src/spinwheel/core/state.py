"""
State machine for the spin cycle.

States:
    IDLE: Wheel at rest, a spin may be requested
    SPINNING: Spin animation in progress; further requests are ignored

Each spin runs IDLE -> SPINNING -> IDLE. There is no cancel transition:
once started, a spin always runs to completion.
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class SpinState(Enum):
    """Spin controller states."""
    IDLE = auto()
    SPINNING = auto()


StateListener = Callable[[SpinState, SpinState], None]


class StateMachine:
    """
    Tracks the spin state and enforces the allowed transitions.

    Listeners are notified after every successful transition.
    """

    VALID_TRANSITIONS: list[tuple[SpinState, SpinState]] = [
        (SpinState.IDLE, SpinState.SPINNING),
        (SpinState.SPINNING, SpinState.IDLE),
    ]

    def __init__(self, initial_state: SpinState = SpinState.IDLE) -> None:
        self._state = initial_state
        self._listeners: list[StateListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> SpinState:
        """Get current state."""
        return self._state

    @property
    def is_spinning(self) -> bool:
        return self._state == SpinState.SPINNING

    def can_transition(self, to_state: SpinState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: SpinState) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state
        logger.debug(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in self._listeners:
            listener(old_state, to_state)

        return True

    def add_listener(self, callback: StateListener) -> Callable[[], None]:
        """Add a state change listener.

        Returns:
            Function removing the listener again
        """
        self._listeners.append(callback)

        def remove() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return remove
