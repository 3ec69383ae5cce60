"""
Event bus - in-memory publish/subscribe
Workflows publish after their changes are committed; the audit handlers listen
"""
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, DefaultDict, Dict, List
import logging
import threading

from hotel_management.models.events import BaseEventData, EventType

logger = logging.getLogger(__name__)

Handler = Callable[["Event"], None]


@dataclass
class Event:
    """Domain event envelope"""
    event_type: EventType
    data: Dict[str, Any]
    source: str  # publishing service
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def of(cls, event_type: EventType, payload: BaseEventData, source: str) -> "Event":
        """Wrap a payload dataclass; the envelope shares the payload's timestamp"""
        return cls(event_type=event_type, data=payload.to_dict(),
                   source=source, timestamp=payload.timestamp)


class EventBus:
    """
    Synchronous bus keyed by EventType.

    Handlers run in the publisher's thread, in subscription order.
    """

    def __init__(self):
        self._handlers: DefaultDict[EventType, List[Handler]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_type: EventType, handler: Handler) -> None:
        """Register a handler once per event type; an unknown type raises ValueError"""
        event_type = EventType(event_type)
        with self._lock:
            if handler not in self._handlers[event_type]:
                self._handlers[event_type].append(handler)
                logger.debug(f"{handler.__name__} subscribed to {event_type.value}")

    def unsubscribe(self, event_type: EventType, handler: Handler) -> None:
        with self._lock:
            handlers = self._handlers.get(EventType(event_type), [])
            if handler in handlers:
                handlers.remove(handler)

    def publish(self, event: Event) -> None:
        """A failing handler is logged and the remaining handlers still run"""
        with self._lock:
            handlers = list(self._handlers.get(event.event_type, []))

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Handler {handler.__name__} failed on {event.event_type.value}: {e}",
                    exc_info=True
                )


event_bus = EventBus()
