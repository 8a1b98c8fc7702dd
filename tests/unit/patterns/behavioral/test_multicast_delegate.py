"""Tests for the multicast delegate pattern."""

import gc

from pattern_catalog.domain.patterns.behavioral.multicast_delegate import (
    CacheManager,
    LoggingService,
    MulticastDelegate,
    NetworkManager,
    NetworkStatus,
    ProgressAnalytics,
    ProgressBarDisplay,
    ProgressNotificationCenter,
    TaskProgressManager,
    UIStatusIndicator,
)


class _Listener:

    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def ping(self):
        self.calls.append(self.name)


class TestMulticastDelegate:
    """Test the weak delegate collection."""

    def test_invokes_in_insertion_order(self):
        """Test delegates are called in the order they were added."""
        calls = []
        delegates = MulticastDelegate()
        first, second = _Listener("first", calls), _Listener("second", calls)
        delegates.add(first)
        delegates.add(second)

        delegates.invoke(lambda d: d.ping())

        assert calls == ["first", "second"]

    def test_adding_twice_keeps_one_entry(self):
        """Test a delegate is held once."""
        delegates = MulticastDelegate()
        listener = _Listener("a", [])

        delegates.add(listener)
        delegates.add(listener)

        assert len(delegates) == 1

    def test_released_delegates_drop_out(self):
        """Test the collection does not keep delegates alive."""
        delegates = MulticastDelegate()
        kept = _Listener("kept", [])
        transient = _Listener("transient", [])
        delegates.add(kept)
        delegates.add(transient)

        del transient
        gc.collect()

        assert delegates.count == 1

    def test_remove_and_remove_all(self):
        """Test explicit removal."""
        delegates = MulticastDelegate()
        a, b = _Listener("a", []), _Listener("b", [])
        delegates.add(a)
        delegates.add(b)

        delegates.remove(a)
        assert delegates.count == 1
        delegates.remove_all()
        assert delegates.count == 0


class TestNetworkManager:
    """Test network status fan-out."""

    def setup_method(self):
        """Set up test fixtures."""
        self.network = NetworkManager()
        self.ui = UIStatusIndicator("Main")
        self.logger = LoggingService()
        self.cache = CacheManager()
        for delegate in (self.ui, self.logger, self.cache):
            self.network.add_delegate(delegate)

    def test_connect_is_two_step(self):
        """Test connect only completes on finish_connecting."""
        assert self.network.connect()
        assert self.network.status == NetworkStatus.CONNECTING
        assert not self.cache.is_online_mode

        assert self.network.finish_connecting()

        assert self.ui.indicator == "green"
        assert self.cache.is_online_mode

    def test_send_requires_connection(self, transcript):
        """Test data is only sent while connected."""
        assert not self.network.send_data("payload")
        self.network.connect(immediate=True)

        assert self.network.send_data("payload")
        assert self.cache.stored == ["payload"]
        assert transcript.contains("Cannot send data - not connected")

    def test_weak_signal_enables_caching(self):
        """Test status changes reach every delegate."""
        self.network.simulate_weak_signal()

        assert self.cache.aggressive_caching
        assert self.ui.displayed_status == "Weak Signal"

    def test_disconnect(self):
        """Test disconnect notifies and is idempotent."""
        self.network.connect(immediate=True)

        assert self.network.disconnect()
        assert not self.network.disconnect()
        assert self.ui.indicator == "red"
        assert "Network connection lost" in self.logger.messages

    def test_removed_delegate_is_not_notified(self):
        """Test removed delegates stop receiving callbacks."""
        self.network.remove_delegate(self.ui)

        self.network.connect(immediate=True)

        assert self.ui.indicator == "grey"
        assert self.network.delegate_count == 2


class TestTaskProgressManager:
    """Test progress fan-out."""

    def test_progress_notifications(self):
        """Test quarter milestones and completion."""
        manager = TaskProgressManager()
        bar = ProgressBarDisplay("Bar")
        center = ProgressNotificationCenter()
        manager.add_delegate(bar)
        manager.add_delegate(center)

        manager.start_task("Download")
        for step in range(1, 5):
            manager.update_progress(step / 4)

        assert center.notifications == [
            "Started: Download",
            "Download: 25% complete",
            "Download: 50% complete",
            "Download: 75% complete",
            "Download: 100% complete",
            "Download completed successfully",
        ]
        assert not bar.visible

    def test_analytics_measures_duration(self):
        """Test analytics uses the injected clock."""
        ticks = iter([10.0, 12.5])
        analytics = ProgressAnalytics(clock=lambda: next(ticks))
        manager = TaskProgressManager()
        manager.add_delegate(analytics)

        manager.start_task("Sync")
        manager.fail_task("timeout")

        assert analytics.events[-1] == ("task_failed", {"task": "Sync", "duration": 2.5, "error": "timeout"})
