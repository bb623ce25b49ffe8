"""Event system for publisher-subscriber communication.

This package contains:
- event_manager.py: Synchronous event routing to subscribers
- events.py: Event definitions for inter-system communication
"""

from .event_manager import EventManager, EventSubscriber
from .events import (
    GameEvent,
    EventType,
    HeroCreated,
    HeroActed,
    GameStarted,
    GameEnded,
)

__all__ = [
    "EventManager",
    "EventSubscriber",
    "GameEvent",
    "EventType",
    "HeroCreated",
    "HeroActed",
    "GameStarted",
    "GameEnded",
]
