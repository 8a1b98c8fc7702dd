"""Base event classes - foundation for event publishing across the catalog."""
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from uuid import uuid4
from pydantic import BaseModel, Field, ConfigDict


class DomainEvent(BaseModel):
    """Base class for all domain events."""
    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_type: str = ""
    aggregate_id: str
    aggregate_type: str
    version: int = 1
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if 'event_type' not in data or not data['event_type']:
            data['event_type'] = self.__class__.__name__
        super().__init__(**data)


class StatusChangeEvent(DomainEvent):
    """Event that tracks a status transition of a state machine."""
    old_status: str
    new_status: str
    reason: Optional[str] = None


# =============================================================================
# CATALOG EVENTS
# =============================================================================

class DemoStartedEvent(DomainEvent):
    """Published when a pattern demo starts running."""
    demo_name: str
    category: str
    seed: Optional[int] = None


class DemoCompletedEvent(DomainEvent):
    """Published when a pattern demo finishes."""
    demo_name: str
    line_count: int
    duration_ms: float


class DemoFailedEvent(DomainEvent):
    """Published when a pattern demo raises."""
    demo_name: str
    error_message: str
    error_type: str
