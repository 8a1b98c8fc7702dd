"""Base DTO class with stable API and clean snake_case format."""
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all DTOs with stable API and clean snake_case format.

    This class keeps callers away from the underlying serialization framework:
    - Uses pure snake_case field names
    - Provides stable to_dict()/from_dict() API
    - Instances are immutable once built
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """
        Stable public API - returns a JSON-compatible snake_case dictionary.

        Returns:
            Dict with snake_case keys
        """
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        """
        Stable public API - creates instance from snake_case dictionary.

        Args:
            data: Dictionary with snake_case keys

        Returns:
            New instance of the DTO
        """
        return cls.model_validate(data)

    @staticmethod
    def serialize_enum(value: Union[Enum, str, None]) -> Optional[str]:
        """
        Serialize enum to string value.

        Args:
            value: Enum, string, or None value

        Returns:
            String representation or None
        """
        if value is None:
            return None
        if isinstance(value, Enum):
            return value.value
        return str(value)
