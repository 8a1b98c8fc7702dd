"""Tests for event publishing and exception context helpers."""

from pattern_catalog.domain.base.events import DemoStartedEvent, StatusChangeEvent
from pattern_catalog.domain.core.exceptions import (
    DemoNotFoundError,
    ResourceNotFoundError,
    UnsupportedFormatError,
    ValidationError,
)
from pattern_catalog.infrastructure.error import ExceptionContext, describe_exception
from pattern_catalog.infrastructure.event import EventPublisher


class TestEventPublisher:
    """Test event publisher dispatch."""

    def setup_method(self):
        """Set up test fixtures."""
        self.publisher = EventPublisher()
        self.received = []

    def _event(self):
        return StatusChangeEvent(aggregate_id="order-1", aggregate_type="Order",
                                 old_status="pending", new_status="confirmed")

    def test_event_type_defaults_to_class_name(self):
        """Test events name themselves."""
        assert self._event().event_type == "StatusChangeEvent"

    def test_handlers_receive_matching_events(self):
        """Test handlers only see their event type."""
        self.publisher.register("StatusChangeEvent", self.received.append)

        self.publisher.publish(self._event())
        self.publisher.publish(DemoStartedEvent(aggregate_id="x", aggregate_type="PatternDemo",
                                                demo_name="x", category="behavioral"))

        assert len(self.received) == 1
        assert self.received[0].new_status == "confirmed"

    def test_failing_handler_does_not_stop_others(self):
        """Test a raising handler is logged and the rest still run."""
        def broken(event):
            raise RuntimeError("boom")

        self.publisher.register("StatusChangeEvent", broken)
        self.publisher.register("StatusChangeEvent", self.received.append)

        self.publisher.publish(self._event())

        assert len(self.received) == 1

    def test_unregister_removes_handler(self):
        """Test handlers can be removed."""
        self.publisher.register("StatusChangeEvent", self.received.append)
        self.publisher.unregister("StatusChangeEvent", self.received.append)

        self.publisher.publish_all([self._event(), self._event()])

        assert self.received == []
        assert self.publisher.handler_count("StatusChangeEvent") == 0


class TestExceptions:
    """Test domain exception payloads."""

    def test_demo_not_found_lists_available(self):
        """Test DemoNotFoundError keeps the available names."""
        error = DemoNotFoundError("visitor", ["memento", "state"])

        assert isinstance(error, ResourceNotFoundError)
        assert error.demo_name == "visitor"
        assert error.available == ["memento", "state"]
        assert "visitor" in str(error)

    def test_unsupported_format_is_validation_error(self):
        """Test UnsupportedFormatError carries details."""
        error = UnsupportedFormatError("xml", ["json", "yaml"])

        assert isinstance(error, ValidationError)
        assert error.details == {"format": "xml", "supported": ["json", "yaml"]}

    def test_describe_exception_includes_context(self):
        """Test exception descriptions carry the operation context."""
        context = ExceptionContext("run_demo", demo="state")

        payload = describe_exception(ValueError("bad"), context)

        assert payload["error_type"] == "ValueError"
        assert payload["message"] == "bad"
        assert payload["context"]["operation"] == "run_demo"
        assert payload["context"]["demo"] == "state"
