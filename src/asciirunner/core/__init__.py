"""Core framework components for the runner."""

from .state import JumpState, JumpStateMachine
from .events import EventBus, Event, EventType
from .errors import ConfigurationError, ResourceExhaustedError

__all__ = [
    "JumpState",
    "JumpStateMachine",
    "EventBus",
    "Event",
    "EventType",
    "ConfigurationError",
    "ResourceExhaustedError",
]
