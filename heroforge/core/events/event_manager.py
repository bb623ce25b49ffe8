"""
Event bus connecting factories, the driver and the log manager.

Dispatch is synchronous: ``publish`` hands the event to every subscriber of
its type before returning. A failing subscriber is counted and reported
through the debug callback; the remaining subscribers still run.
"""

from collections import defaultdict
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


EventSubscriber = Callable[["GameEvent"], None]


class EventManager:
    """Routes events to the subscribers registered for their type."""

    def __init__(self, enable_debug_logging: bool = False):
        """Initialize the event manager.

        Args:
            enable_debug_logging: Report subscriptions and dispatches to the
                debug callback
        """
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict["EventType", list[tuple[str, EventSubscriber]]] = defaultdict(list)
        self._events_published = 0
        self._subscriber_errors = 0

        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Register a callback for one event type.

        Args:
            event_type: The type of events to receive
            subscriber: Callback invoked with each event
            subscriber_name: Name used in debug output
        """
        name = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._subscribers[event_type].append((name, subscriber))
        self._debug_log(f"{name} subscribed to {event_type.name}")

    def publish(self, event: "GameEvent", source: Optional[str] = None) -> int:
        """Dispatch an event to its subscribers.

        Returns:
            Number of subscribers that handled the event without raising
        """
        self._events_published += 1
        self._debug_log(f"{event.__class__.__name__} from {source or 'unknown'}")

        delivered = 0
        for name, subscriber in self._subscribers.get(event.event_type, []):
            try:
                subscriber(event)
            except Exception as e:
                self._subscriber_errors += 1
                self._debug_log(f"Error in subscriber {name}: {e}")
            else:
                delivered += 1
        return delivered

    def get_statistics(self) -> dict[str, Any]:
        return {
            'events_published': self._events_published,
            'subscriber_errors': self._subscriber_errors,
            'subscribers_count': sum(len(subs) for subs in self._subscribers.values()),
        }
