# src/pattern_catalog/domain/core/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidStateTransitionError(DomainException):
    """Raised when attempting an invalid state transition."""
    def __init__(self, current_state: str, attempted_state: str):
        super().__init__(
            f"Cannot transition from {current_state} to {attempted_state}"
        )
        self.current_state = current_state
        self.attempted_state = attempted_state


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class DemoNotFoundError(ResourceNotFoundError):
    """Raised when a pattern demo is not registered in the catalog."""
    def __init__(self, demo_name: str, available: Optional[List[str]] = None):
        super().__init__("Demo", demo_name)
        self.demo_name = demo_name
        self.available = available or []


class UnsupportedFormatError(ValidationError):
    """Raised when an output format is not supported."""
    def __init__(self, format_type: str, supported: List[str]):
        super().__init__(
            f"Unsupported format '{format_type}'. Must be one of: {', '.join(supported)}",
            {"format": format_type, "supported": supported},
        )
        self.format_type = format_type
        self.supported = supported
