"""
Jump state machine for the runner character.

States:
    GROUNDED: Standing on the surface, able to start a jump
    ASCENDING: Rising one row per frame
    HOVERING: Holding at the peak
    DESCENDING: Falling one row per frame until landing
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class JumpState(Enum):
    """Vertical movement states."""
    GROUNDED = auto()
    ASCENDING = auto()
    HOVERING = auto()
    DESCENDING = auto()

    @property
    def airborne(self) -> bool:
        return self is not JumpState.GROUNDED


class JumpStateMachine:
    """
    Tracks the jump state and enforces the jump cycle order.

    A new jump can only start from GROUNDED, which is what rules out
    double jumps.
    """

    # Valid state transitions
    VALID_TRANSITIONS: list[tuple[JumpState, JumpState]] = [
        (JumpState.GROUNDED, JumpState.ASCENDING),

        (JumpState.ASCENDING, JumpState.HOVERING),
        # A zero-frame hover goes straight to the fall
        (JumpState.ASCENDING, JumpState.DESCENDING),

        (JumpState.HOVERING, JumpState.DESCENDING),

        (JumpState.DESCENDING, JumpState.GROUNDED),
    ]

    def __init__(self, initial_state: JumpState = JumpState.GROUNDED) -> None:
        self._state = initial_state
        self._listeners: list[Callable[[JumpState, JumpState], None]] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)

    @property
    def state(self) -> JumpState:
        """Get current state."""
        return self._state

    def can_transition(self, to_state: JumpState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: JumpState) -> bool:
        """
        Attempt to transition to a new state.

        Staying in the current state is a no-op and succeeds.

        Returns:
            True if the machine is now in ``to_state``
        """
        if to_state is self._state:
            return True

        if not self.can_transition(to_state):
            logger.debug(
                f"Ignored jump transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state
        logger.debug(f"Jump transition: {old_state.name} -> {to_state.name}")

        for listener in self._listeners:
            listener(old_state, to_state)

        return True

    def add_listener(self, callback: Callable[[JumpState, JumpState], None]) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

