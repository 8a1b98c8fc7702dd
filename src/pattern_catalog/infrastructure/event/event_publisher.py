# src/pattern_catalog/infrastructure/event/event_publisher.py
from typing import Callable, Dict, List

from pattern_catalog.domain.base.events import DomainEvent
from pattern_catalog.infrastructure.logging.logger import get_logger

EventHandler = Callable[[DomainEvent], None]


class EventPublisher:
    """
    Concrete implementation of event publishing system.
    Handles publishing domain events to registered handlers.
    """

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._logger = get_logger(__name__)

    def register(self, event_type: str, handler: EventHandler) -> None:
        """Register a handler for a specific event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)
        self._logger.debug("Registered event handler", event_type=event_type)

    def unregister(self, event_type: str, handler: EventHandler) -> None:
        """Remove a previously registered handler."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def handler_count(self, event_type: str) -> int:
        return len(self._handlers.get(event_type, []))

    def publish(self, event: DomainEvent) -> None:
        """Publish a single event to all registered handlers."""
        event_type = event.__class__.__name__
        handlers = list(self._handlers.get(event_type, []))

        self._logger.debug("Publishing event", event_type=event_type, handlers=len(handlers))

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._logger.error("Error handling event", event_type=event_type, error=str(e))

    def publish_all(self, events: List[DomainEvent]) -> None:
        """Publish multiple events."""
        for event in events:
            self.publish(event)
