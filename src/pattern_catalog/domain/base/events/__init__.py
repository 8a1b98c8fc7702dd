"""Domain events."""

from .base_events import (
    DemoCompletedEvent,
    DemoFailedEvent,
    DemoStartedEvent,
    DomainEvent,
    StatusChangeEvent,
)

__all__ = [
    'DomainEvent',
    'StatusChangeEvent',
    'DemoStartedEvent',
    'DemoCompletedEvent',
    'DemoFailedEvent',
]
