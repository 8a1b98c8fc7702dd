"""Shared fixtures for the pattern catalog test suite."""

import pytest

from pattern_catalog.config.schemas import CatalogConfig, LoggingConfig
from pattern_catalog.infrastructure.event.event_publisher import EventPublisher
from pattern_catalog.infrastructure.logging.logger import setup_logging
from pattern_catalog.infrastructure.narration import transcript_context
from pattern_catalog.infrastructure.patterns import SingletonRegistry
from pattern_catalog.infrastructure.registry import get_demo_registry

setup_logging(LoggingConfig(level="DEBUG"))


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop singleton instances and demo registrations around every test."""
    SingletonRegistry.get_instance().reset()
    get_demo_registry().clear_registrations()
    yield
    SingletonRegistry.get_instance().reset()
    get_demo_registry().clear_registrations()


@pytest.fixture
def transcript():
    """Fresh transcript bound as the active narration target."""
    with transcript_context() as active:
        yield active


@pytest.fixture
def publisher():
    return EventPublisher()


@pytest.fixture
def catalog_config():
    return CatalogConfig()


@pytest.fixture
def recorded_events(publisher):
    """Collect every catalog and status event published through the publisher fixture."""
    events = []
    for event_type in ("DemoStartedEvent", "DemoCompletedEvent", "DemoFailedEvent", "StatusChangeEvent"):
        publisher.register(event_type, events.append)
    return events
