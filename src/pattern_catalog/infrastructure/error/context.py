"""Exception context management."""

import threading
from datetime import datetime, timezone
from typing import Any, Dict


class ExceptionContext:
    """Rich context information for exception handling."""

    def __init__(self, operation: str, layer: str = "application", **additional_context):
        self.operation = operation
        self.layer = layer
        self.timestamp = datetime.now(timezone.utc)
        self.thread_id = threading.get_ident()
        self.additional_context = additional_context

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for logging."""
        return {
            "operation": self.operation,
            "layer": self.layer,
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            **self.additional_context,
        }


def describe_exception(error: BaseException, context: ExceptionContext) -> Dict[str, Any]:
    """Build a structured error payload for logs and DTOs."""
    return {
        "error_type": type(error).__name__,
        "message": str(error),
        "context": context.to_dict(),
    }
