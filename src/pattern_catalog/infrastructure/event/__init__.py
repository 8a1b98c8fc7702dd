"""Event publishing infrastructure."""

from .event_publisher import EventHandler, EventPublisher

__all__ = ['EventHandler', 'EventPublisher']
