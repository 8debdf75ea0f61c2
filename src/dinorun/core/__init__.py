"""Core game components for DINO RUN."""

from .state import GameMode, GameStateMachine, RoundState, Tuning
from .layout import Layout
from .events import EventBus, Event, EventType

__all__ = [
    "GameMode",
    "GameStateMachine",
    "RoundState",
    "Tuning",
    "Layout",
    "EventBus",
    "Event",
    "EventType",
]
