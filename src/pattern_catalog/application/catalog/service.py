# src/pattern_catalog/application/catalog/service.py
import time
from typing import List, Optional, Union

from pattern_catalog.application.catalog.dto import DemoRunDTO, DemoSummaryDTO
from pattern_catalog.config.schemas import CatalogConfig
from pattern_catalog.domain.base.events import DemoCompletedEvent, DemoFailedEvent, DemoStartedEvent
from pattern_catalog.infrastructure.error.context import ExceptionContext, describe_exception
from pattern_catalog.infrastructure.event.event_publisher import EventPublisher
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import Transcript, transcript_context
from pattern_catalog.infrastructure.registry import (
    DemoRegistry,
    PatternCategory,
    get_demo_registry,
    register_all_demos,
)


class CatalogService:
    """Application service for browsing and running pattern demos."""

    AGGREGATE_TYPE = "PatternDemo"

    def __init__(self,
                 registry: Optional[DemoRegistry] = None,
                 publisher: Optional[EventPublisher] = None,
                 config: Optional[CatalogConfig] = None,
                 register_defaults: bool = True):
        self._registry = registry or get_demo_registry()
        self._publisher = publisher or EventPublisher()
        self._config = config or CatalogConfig()
        self._logger = get_logger(__name__)
        if register_defaults:
            register_all_demos(self._registry)

    @property
    def publisher(self) -> EventPublisher:
        return self._publisher

    @property
    def config(self) -> CatalogConfig:
        return self._config

    def list_demos(self, category: Optional[Union[PatternCategory, str]] = None) -> List[DemoSummaryDTO]:
        """List registered demos, optionally restricted to one category."""
        return [DemoSummaryDTO.from_registration(r) for r in self._registry.list(category)]

    def describe(self, name: str) -> DemoSummaryDTO:
        """Describe a single demo. Raises DemoNotFoundError for unknown names."""
        return DemoSummaryDTO.from_registration(self._registry.get(name))

    def run_demo(self, name: str, seed: Optional[int] = None) -> DemoRunDTO:
        """
        Run one demo and collect its transcript.

        A demo that raises is reported as a failed run instead of aborting the
        caller; unknown demo names still raise DemoNotFoundError.

        Args:
            name: Registered demo name
            seed: Seed for demos that use randomness; defaults to the configured seed

        Returns:
            DemoRunDTO with the narrated sections and lines
        """
        registration = self._registry.get(name)
        effective_seed = None
        if registration.seeded:
            effective_seed = seed if seed is not None else self._config.random_seed
        category = registration.category.value

        self._publisher.publish(DemoStartedEvent(
            aggregate_id=name,
            aggregate_type=self.AGGREGATE_TYPE,
            demo_name=name,
            category=category,
            seed=effective_seed,
        ))
        self._logger.info("Running demo", demo=name, category=category, seed=effective_seed)

        error: Optional[str] = None
        started = time.perf_counter()
        with transcript_context(Transcript(title=registration.title)) as transcript:
            try:
                registration.run(self._config, effective_seed, publisher=self._publisher)
            except Exception as e:
                context = ExceptionContext("run_demo", layer="application", demo=name)
                payload = describe_exception(e, context)
                self._logger.error("Demo failed", **payload)
                error = str(e)
                self._publisher.publish(DemoFailedEvent(
                    aggregate_id=name,
                    aggregate_type=self.AGGREGATE_TYPE,
                    demo_name=name,
                    error_message=error,
                    error_type=payload["error_type"],
                ))
        duration_ms = round((time.perf_counter() - started) * 1000, 3)

        if error is None:
            self._publisher.publish(DemoCompletedEvent(
                aggregate_id=name,
                aggregate_type=self.AGGREGATE_TYPE,
                demo_name=name,
                line_count=len(transcript.entries),
                duration_ms=duration_ms,
            ))
            self._logger.info("Demo completed", demo=name, lines=len(transcript.entries),
                              duration_ms=duration_ms)

        return DemoRunDTO(
            name=name,
            title=registration.title,
            category=category,
            success=error is None,
            seed=effective_seed,
            sections=list(transcript.sections),
            lines=transcript.lines(),
            duration_ms=duration_ms,
            error=error,
        )

    def run_all(self,
                category: Optional[Union[PatternCategory, str]] = None,
                seed: Optional[int] = None) -> List[DemoRunDTO]:
        """Run every registered demo in registration order."""
        return [self.run_demo(r.name, seed) for r in self._registry.list(category)]
