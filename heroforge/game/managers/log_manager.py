"""
Log management for factory and hero activity.

Messages are categorized, kept in a bounded buffer and filtered by level when
read back. The buffer is written to a separate stream (stderr from the entry
point) so stdout only ever carries the hero lines.
"""
import sys
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TextIO, TYPE_CHECKING

from ...core.events import (
    EventType,
    HeroCreated,
    HeroActed,
    GameStarted,
    GameEnded,
)

if TYPE_CHECKING:
    from ...core.events import EventManager, GameEvent


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Start-up and shutdown
    FACTORY = auto()    # Hero creation
    ACTION = auto()     # Hero actions
    DEBUG = auto()


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.FACTORY: "FAC",
    LogCategory.ACTION: "ACT",
    LogCategory.DEBUG: "DBG",
}


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1


class LogManager:
    """Collects log messages published on the event bus."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event manager for event-driven logging
            max_messages: Maximum number of messages kept in the buffer
            default_level: Minimum level returned by get_messages
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.event_manager = event_manager

        self._setup_event_subscriptions()

        # Route the bus's own debug output into the buffer
        self.event_manager.set_debug_callback(self.debug)

    def _setup_event_subscriptions(self) -> None:
        handlers = {
            EventType.HERO_CREATED: self._handle_hero_created,
            EventType.HERO_ACTED: self._handle_hero_acted,
            EventType.GAME_STARTED: self._handle_game_started,
            EventType.GAME_ENDED: self._handle_game_ended,
        }
        for event_type, handler in handlers.items():
            self.event_manager.subscribe(
                event_type,
                handler,
                subscriber_name=f"LogManager.{handler.__name__.lstrip('_')}"
            )

    def _handle_hero_created(self, event: "GameEvent") -> None:
        if isinstance(event, HeroCreated):
            hero = event.hero
            self.factory(
                f"{event.factory_name} created {hero.name} ({hero.title}) "
                f"with {hero.health} health"
            )

    def _handle_hero_acted(self, event: "GameEvent") -> None:
        if isinstance(event, HeroActed):
            self.action(event.line)

    def _handle_game_started(self, event: "GameEvent") -> None:
        if isinstance(event, GameStarted):
            self.system(f"Game started with {event.roster_size} heroes")

    def _handle_game_ended(self, event: "GameEvent") -> None:
        if isinstance(event, GameEnded):
            self.system(f"Game ended after {event.lines_written} actions")

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Add a message to the log."""
        self.messages.append(LogMessage(text=text, category=category))

    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def factory(self, text: str) -> None:
        self.log(text, LogCategory.FACTORY)

    def action(self, text: str) -> None:
        self.log(text, LogCategory.ACTION)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def is_debug_enabled(self) -> bool:
        return self.log_level == LogLevel.DEBUG

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None applies the
                current log level instead)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages if msg.category in categories]
        else:
            filtered = [msg for msg in self.messages
                        if msg.category != LogCategory.DEBUG or self.is_debug_enabled()]

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def get_formatted_messages(self, count: Optional[int] = None) -> list[str]:
        return [msg.format() for msg in self.get_messages(count)]

    def write(self, stream: Optional[TextIO] = None) -> int:
        """Write the visible messages to a stream (stderr by default).

        Returns:
            Number of lines written
        """
        stream = stream or sys.stderr
        lines = self.get_formatted_messages()
        for line in lines:
            print(line, file=stream)
        return len(lines)
