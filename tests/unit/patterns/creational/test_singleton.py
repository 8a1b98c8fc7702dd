"""Tests for the singleton pattern."""

import threading

from pattern_catalog.domain.patterns.creational.singleton import (
    AppSettings,
    CacheStore,
    DatabaseManager,
    Logger,
    NetworkMonitor,
)
from pattern_catalog.infrastructure.patterns import SingletonRegistry, get_singleton


class TestSingletonAccess:
    """Test shared instances through the registry."""

    def test_same_instance_returned(self):
        """Test every access yields the same object."""
        assert get_singleton(Logger) is get_singleton(Logger)

    def test_state_is_shared(self):
        """Test changes through one reference are visible through another."""
        get_singleton(AppSettings).set("timeout", 60)

        assert get_singleton(AppSettings).get_int("timeout") == 60

    def test_constructor_arguments_only_apply_first_time(self):
        """Test later arguments are ignored."""
        first = get_singleton(CacheStore, max_size=2)
        second = get_singleton(CacheStore, max_size=50)

        assert second is first
        assert second.max_size == 2

    def test_reset_creates_fresh_instance(self):
        """Test resetting one class drops its instance."""
        logger = get_singleton(Logger)
        logger.log("hello")

        SingletonRegistry.get_instance().reset(Logger)

        assert get_singleton(Logger) is not logger
        assert get_singleton(Logger).messages == []

    def test_concurrent_first_access(self):
        """Test racing threads still share one instance."""
        seen = []
        threads = [threading.Thread(target=lambda: seen.append(get_singleton(DatabaseManager)))
                   for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(instance) for instance in seen}) == 1


class TestAppSettings:
    """Test typed settings accessors."""

    def test_typed_getters(self):
        """Test getters reject values of the wrong type."""
        settings = AppSettings()

        assert settings.get_string("api_base_url") == "https://api.example.com"
        assert settings.get_string("timeout") is None
        assert settings.get_bool("enable_logging") is True
        assert settings.get_bool("missing") is False

    def test_bool_is_not_an_int(self):
        """Test booleans are not returned by get_int."""
        settings = AppSettings()

        assert settings.get_int("enable_logging") == 0
        assert settings.get_int("max_retries") == 3


class TestNetworkMonitor:
    """Test request counting."""

    def test_counts_requests_and_uses_outcome(self):
        """Test the injected outcome decides success."""
        monitor = NetworkMonitor(outcome=lambda endpoint: endpoint != "/fail")

        assert monitor.make_request("/ok")
        assert not monitor.make_request("/fail")
        assert monitor.request_count == 2

    def test_concurrent_requests_are_counted(self):
        """Test the counter is safe under concurrent use."""
        monitor = NetworkMonitor()
        threads = [threading.Thread(target=monitor.make_request, args=("/x",)) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert monitor.request_count == 10


class TestCacheStore:
    """Test the bounded cache."""

    def test_evicts_oldest_when_full(self):
        """Test the first inserted key is evicted."""
        cache = CacheStore(max_size=2)
        cache.store("a", 1)
        cache.store("b", 2)

        cache.store("c", 3)

        assert cache.size == 2
        assert cache.retrieve("a") is None
        assert cache.retrieve("c") == 3

    def test_overwrite_does_not_evict(self):
        """Test updating an existing key keeps the size."""
        cache = CacheStore(max_size=2)
        cache.store("a", 1)
        cache.store("b", 2)

        cache.store("a", 10)

        assert cache.retrieve("b") == 2
        assert cache.retrieve("a") == 10

    def test_retrieve_checks_type(self):
        """Test a type mismatch is treated as absent."""
        cache = CacheStore()
        cache.store("age", 25)

        assert cache.retrieve("age", str) is None
        assert cache.retrieve("age", int) == 25

    def test_remove_and_clear(self):
        """Test removal."""
        cache = CacheStore()
        cache.store("a", 1)
        cache.store("b", 2)

        cache.remove("a")
        assert cache.size == 1
        cache.clear()
        assert cache.size == 0


class TestDatabaseManager:
    """Test the connection guard."""

    def test_operations_require_connection(self, transcript):
        """Test nothing works before connect()."""
        db = DatabaseManager()

        assert not db.create_table("users")
        assert db.select("users") is None
        assert transcript.contains("Cannot create table - not connected")

    def test_insert_and_select(self):
        """Test rows round-trip through a table."""
        db = DatabaseManager()
        db.connect()
        db.create_table("users")

        db.insert("users", {"id": 1, "name": "Alice"})

        assert db.select("users") == [{"id": 1, "name": "Alice"}]
        assert not db.insert("orders", {"id": 1})

    def test_drop_table(self):
        """Test dropping existing and missing tables."""
        db = DatabaseManager()
        db.connect()
        db.create_table("users")

        assert db.drop_table("users")
        assert not db.drop_table("users")
