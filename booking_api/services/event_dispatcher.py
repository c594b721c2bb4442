"""
Event dispatcher for booking lifecycle notifications.

Lifecycle events are persisted inside the booking transaction. Once that
transaction commits, the orchestrator hands the same events to this
dispatcher so downstream subscribers can react without being coupled to
the booking services.

Usage:
    from booking_api.services.event_dispatcher import get_dispatcher
    from booking_api.models.enums import BookingStatus

    async def on_cancelled(event):
        ...

    get_dispatcher().subscribe(BookingStatus.CANCELLED, on_cancelled)
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass, field

from booking_api.models.enums import BookingStatus

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """Represents a lifecycle event to be dispatched."""
    type: BookingStatus
    data: Dict[str, Any]
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    document_id: Optional[str] = None


# Type for event handlers
EventHandler = Callable[[Event], Any]


class EventDispatcher:
    """
    Simple pub/sub dispatcher.

    Handler failures are logged and never reach the caller; the change that
    produced the event is already committed by the time it is dispatched.
    """

    def __init__(self) -> None:
        self._handlers: Dict[BookingStatus, List[EventHandler]] = {}
        self._global_handlers: List[EventHandler] = []

    def subscribe(self, event_type: BookingStatus, handler: EventHandler) -> None:
        """Subscribe to a specific event type."""
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(f"Handler subscribed to {event_type.value}")

    def subscribe_all(self, handler: EventHandler) -> None:
        """Subscribe to all events."""
        self._global_handlers.append(handler)
        logger.debug("Global handler subscribed")

    async def emit(self, event: Event) -> None:
        """Emit an event to all subscribers."""
        handlers = self._handlers.get(event.type, []) + self._global_handlers

        if not handlers:
            logger.debug(f"No handlers for event {event.type.value}")
            return

        tasks = []
        for handler in handlers:
            try:
                result = handler(event)
                if asyncio.iscoroutine(result):
                    tasks.append(result)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type.value}: {e}")

        if tasks:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    logger.error(f"Error in event handler for {event.type.value}: {result}")

        logger.debug(f"Event {event.type.value} dispatched to {len(handlers)} handlers")


# Global dispatcher instance
_dispatcher = EventDispatcher()


def get_dispatcher() -> EventDispatcher:
    """Get the global event dispatcher."""
    return _dispatcher

