# src/pattern_catalog/application/catalog/dto.py
from typing import List, Optional

from pattern_catalog.application.dto.base import BaseDTO
from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistration


class DemoSummaryDTO(BaseDTO):
    """DTO describing a registered demo."""
    name: str
    title: str
    category: str
    summary: str
    seeded: bool = False
    options: List[str] = []

    @classmethod
    def from_registration(cls, registration: DemoRegistration) -> 'DemoSummaryDTO':
        """Create DTO from a registry entry."""
        return cls(
            name=registration.name,
            title=registration.title,
            category=cls.serialize_enum(registration.category),
            summary=registration.summary,
            seeded=registration.seeded,
            options=sorted(set(registration.options.values())),
        )


class DemoRunDTO(BaseDTO):
    """DTO for the outcome of one demo run."""
    name: str
    title: str
    category: str
    success: bool
    seed: Optional[int] = None
    sections: List[str] = []
    lines: List[str] = []
    duration_ms: float = 0.0
    error: Optional[str] = None

    @property
    def line_count(self) -> int:
        return len(self.lines)
