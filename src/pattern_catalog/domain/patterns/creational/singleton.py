"""Singleton - one shared instance per class, obtained through get_singleton."""

import threading
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Type

from pattern_catalog.infrastructure.narration import narrate, section
from pattern_catalog.infrastructure.patterns import SingletonRegistry, get_singleton


class Logger:
    """Timestamped message log."""

    def __init__(self):
        self.messages: List[str] = []
        narrate("Logger", "Logger initialized")

    def log(self, message: str) -> str:
        entry = f"[{datetime.now().strftime('%H:%M:%S')}] {message}"
        self.messages.append(entry)
        return narrate("Logger", entry)

    def log_error(self, error: str) -> str:
        return self.log(f"ERROR: {error}")


class AppSettings:

    DEFAULTS: Dict[str, Any] = {
        "api_base_url": "https://api.example.com",
        "timeout": 30,
        "enable_logging": True,
        "max_retries": 3,
        "cache_enabled": True,
    }

    def __init__(self):
        self._settings: Dict[str, Any] = dict(self.DEFAULTS)
        narrate("AppSettings", "Default settings loaded")

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value
        narrate("AppSettings", f"Set {key} = {value}")

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    def get_string(self, key: str) -> Optional[str]:
        value = self._settings.get(key)
        return value if isinstance(value, str) else None

    def get_bool(self, key: str) -> bool:
        value = self._settings.get(key)
        return value if isinstance(value, bool) else False

    def get_int(self, key: str) -> int:
        value = self._settings.get(key)
        # bool is an int subclass; it is not a valid int setting
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return 0


class NetworkMonitor:
    """Counts requests under a lock; the request outcome is injectable."""

    def __init__(self, outcome: Optional[Callable[[str], bool]] = None):
        self._lock = threading.Lock()
        self._request_count = 0
        self._is_online = True
        self.outcome = outcome or (lambda endpoint: True)
        narrate("NetworkMonitor", "NetworkMonitor initialized")

    @property
    def request_count(self) -> int:
        with self._lock:
            return self._request_count

    @property
    def is_online(self) -> bool:
        with self._lock:
            return self._is_online

    def set_online_status(self, online: bool) -> None:
        with self._lock:
            self._is_online = online
        narrate("NetworkMonitor", f"Online status changed to {online}")

    def make_request(self, endpoint: str) -> bool:
        with self._lock:
            self._request_count += 1
            count = self._request_count
        narrate("NetworkMonitor", f"Making request to {endpoint}")
        narrate("NetworkMonitor", f"Total requests made: {count}")
        success = self.outcome(endpoint)
        narrate("NetworkMonitor", f"Request to {endpoint} {'succeeded' if success else 'failed'}")
        return success


class CacheStore:
    """Bounded key/value cache evicting the oldest entry when full."""

    MAX_SIZE = 100

    def __init__(self, max_size: int = MAX_SIZE):
        self.max_size = max_size
        self._cache: Dict[str, Any] = {}
        self._lock = threading.RLock()

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._cache)

    def store(self, key: str, value: Any) -> None:
        with self._lock:
            if key not in self._cache and len(self._cache) >= self.max_size:
                self._evict_oldest()
            self._cache[key] = value
        narrate("CacheStore", f"Stored value for key '{key}'")

    def retrieve(self, key: str, expected_type: Optional[Type] = None) -> Any:
        """Cached value, or None when absent or not of expected_type."""
        with self._lock:
            value = self._cache.get(key)
        if value is None or (expected_type is not None and not isinstance(value, expected_type)):
            narrate("CacheStore", f"No value found for key '{key}'")
            return None
        narrate("CacheStore", f"Retrieved value for key '{key}'")
        return value

    def remove(self, key: str) -> None:
        with self._lock:
            self._cache.pop(key, None)
        narrate("CacheStore", f"Removed value for key '{key}'")

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
        narrate("CacheStore", "Cleared all cached values")

    def _evict_oldest(self) -> None:
        oldest = next(iter(self._cache))
        del self._cache[oldest]
        narrate("CacheStore", f"Evicted oldest item with key '{oldest}'")


class DatabaseManager:
    """In-memory tables; every operation requires connect() first."""

    def __init__(self):
        self.is_connected = False
        self._tables: Dict[str, List[Dict[str, Any]]] = {}
        narrate("DatabaseManager", "DatabaseManager initialized")

    def connect(self) -> None:
        self.is_connected = True
        narrate("DatabaseManager", "Connected to database")

    def _guard(self, action: str) -> bool:
        if not self.is_connected:
            narrate("DatabaseManager", f"Cannot {action} - not connected")
        return self.is_connected

    def create_table(self, table_name: str) -> bool:
        if not self._guard("create table"):
            return False
        self._tables[table_name] = []
        narrate("DatabaseManager", f"Created table '{table_name}'")
        return True

    def insert(self, table_name: str, row: Dict[str, Any]) -> bool:
        if not self._guard("insert"):
            return False
        if table_name not in self._tables:
            narrate("DatabaseManager", f"Table '{table_name}' does not exist")
            return False
        self._tables[table_name].append(dict(row))
        narrate("DatabaseManager", f"Inserted data into '{table_name}'")
        return True

    def select(self, table_name: str) -> Optional[List[Dict[str, Any]]]:
        if not self._guard("select"):
            return None
        rows = self._tables.get(table_name)
        narrate("DatabaseManager", f"Selected {len(rows or [])} records from '{table_name}'")
        return None if rows is None else [dict(row) for row in rows]

    def drop_table(self, table_name: str) -> bool:
        if not self._guard("drop table"):
            return False
        if self._tables.pop(table_name, None) is None:
            narrate("DatabaseManager", f"Table '{table_name}' does not exist")
            return False
        narrate("DatabaseManager", f"Dropped table '{table_name}'")
        return True


def run_demo(cache_max_entries: int = CacheStore.MAX_SIZE) -> None:
    registry = SingletonRegistry.get_instance()
    for demo_class in (Logger, AppSettings, NetworkMonitor, CacheStore, DatabaseManager):
        registry.reset(demo_class)

    section("Logger Singleton")
    logger1 = get_singleton(Logger)
    logger2 = get_singleton(Logger)
    narrate("Demo", f"Logger instances are same: {logger1 is logger2}")
    logger1.log("Application started")
    logger2.log_error("Failed to load configuration")

    section("Configuration Singleton")
    settings = get_singleton(AppSettings)
    narrate("Demo", f"API URL: {settings.get_string('api_base_url') or 'Unknown'}")
    narrate("Demo", f"Timeout: {settings.get_int('timeout')}")
    narrate("Demo", f"Logging enabled: {settings.get_bool('enable_logging')}")
    settings.set("api_base_url", "https://staging.api.example.com")
    settings.set("enable_logging", False)
    narrate("Demo", f"Updated API URL: {settings.get_string('api_base_url')}")
    narrate("Demo", f"Updated logging enabled: {settings.get_bool('enable_logging')}")

    section("NetworkMonitor Singleton")
    network = get_singleton(NetworkMonitor)
    narrate("Demo", f"Initial request count: {network.request_count}")
    narrate("Demo", f"Is online: {network.is_online}")
    for endpoint in ("/users", "/posts", "/comments"):
        network.make_request(endpoint)
    network.set_online_status(False)

    section("CacheStore Singleton")
    cache = get_singleton(CacheStore, max_size=cache_max_entries)
    cache.store("user_name", "John Doe")
    cache.store("user_age", 25)
    cache.store("user_location", {"city": "New York", "country": "USA"})
    narrate("Demo", f"Cached name: {cache.retrieve('user_name', str)}")
    narrate("Demo", f"Cached age: {cache.retrieve('user_age', int)}")
    narrate("Demo", f"Cached location: {cache.retrieve('user_location', dict)}")
    narrate("Demo", f"Cache size: {cache.size}")

    section("DatabaseManager Singleton")
    db = get_singleton(DatabaseManager)
    db.create_table("users")
    db.connect()
    db.create_table("users")
    db.insert("users", {"id": 1, "name": "Alice", "email": "alice@example.com"})
    db.insert("users", {"id": 2, "name": "Bob", "email": "bob@example.com"})
    narrate("Demo", f"Retrieved users: {db.select('users')}")

    section("Single Instance Verification")
    narrate("Demo", f"Cache instances are same: {get_singleton(CacheStore) is cache}")
    narrate("Demo", f"NetworkMonitor instances are same: {get_singleton(NetworkMonitor) is network}")
