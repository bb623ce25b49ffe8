"""Event definitions for publisher-subscriber communication.

Events are immutable dataclasses carrying rich object payloads (heroes,
factions) instead of primitive fields. Each event sets its ``event_type`` in
``__post_init__`` so subscribers can be routed by type.
"""

from dataclasses import dataclass, field
from abc import ABC
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...game.entities.hero import Hero


class EventType(Enum):
    """Types of events that managers can subscribe to."""
    # Hero Events
    HERO_CREATED = auto()
    HERO_ACTED = auto()

    # Game Events
    GAME_STARTED = auto()
    GAME_ENDED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all game events."""
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class HeroCreated(GameEvent):
    """Event emitted when a factory builds a hero."""
    hero: "Hero"
    factory_name: str

    def __post_init__(self):
        # frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.HERO_CREATED)


@dataclass(frozen=True)
class HeroActed(GameEvent):
    """Event emitted when a hero performs its action."""
    hero: "Hero"
    line: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.HERO_ACTED)


@dataclass(frozen=True)
class GameStarted(GameEvent):
    """Event emitted when the driver begins a run."""
    roster_size: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_STARTED)


@dataclass(frozen=True)
class GameEnded(GameEvent):
    """Event emitted when every hero in the roster has acted."""
    lines_written: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_ENDED)
