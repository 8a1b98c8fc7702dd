"""Demo Registry - Registry pattern for pattern demo runners.

This module keeps the catalog of runnable pattern demos. Each pattern module
contributes a runner; the application layer looks demos up by name instead of
importing pattern modules directly.
"""

import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from pattern_catalog.domain.core.exceptions import ConfigurationError, DemoNotFoundError
from pattern_catalog.infrastructure.logging.logger import get_logger


class PatternCategory(str, Enum):
    """Classic design pattern families."""
    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    ARCHITECTURAL = "architectural"


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self,
                 name: str,
                 title: str,
                 category: PatternCategory,
                 summary: str,
                 runner: Callable,
                 seeded: bool = False,
                 options: Optional[Dict[str, str]] = None,
                 publishes_events: bool = False):
        """
        Initialize demo registration.

        Args:
            name: Identifier used on the command line (e.g., 'memento')
            title: Human readable pattern name
            category: Pattern family
            summary: One-line description of the demo
            runner: Callable that replays the demo scenario
            seeded: Whether the runner accepts a ``seed`` keyword
            options: Runner keyword mapped to the catalog config field feeding it
            publishes_events: Whether the runner accepts a ``publisher`` keyword
        """
        self.name = name
        self.title = title
        self.category = category
        self.summary = summary
        self.runner = runner
        self.seeded = seeded
        self.options = dict(options or {})
        self.publishes_events = publishes_events

    def runner_kwargs(self, config: Any = None, seed: Optional[int] = None) -> Dict[str, Any]:
        """Build runner keywords from a CatalogConfig-like object and an explicit seed."""
        kwargs: Dict[str, Any] = {}
        if config is not None:
            kwargs = {keyword: getattr(config, field) for keyword, field in self.options.items()}
        if self.seeded:
            if seed is None and config is not None:
                seed = config.random_seed
            if seed is not None:
                kwargs["seed"] = seed
        return kwargs

    def run(self, config: Any = None, seed: Optional[int] = None, publisher: Any = None) -> None:
        kwargs = self.runner_kwargs(config, seed)
        if self.publishes_events and publisher is not None:
            kwargs["publisher"] = publisher
        self.runner(**kwargs)

    def __repr__(self) -> str:
        return f"DemoRegistration(name='{self.name}', category='{self.category.value}')"


class DemoRegistry:
    """
    Registry for pattern demos.

    Thread-safe singleton implementation.
    """

    _instance: Optional['DemoRegistry'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'DemoRegistry':
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize demo registry."""
        if hasattr(self, '_initialized'):
            return

        self._registrations: Dict[str, DemoRegistration] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Demo registry initialized")

    def register(self,
                 name: str,
                 title: str,
                 category: Union[PatternCategory, str],
                 summary: str,
                 runner: Callable,
                 seeded: bool = False,
                 options: Optional[Dict[str, str]] = None,
                 publishes_events: bool = False) -> None:
        """
        Register a demo runner.

        Raises:
            ConfigurationError: If a demo with the same name is already registered
        """
        with self._registry_lock:
            if name in self._registrations:
                raise ConfigurationError(f"Demo '{name}' is already registered")

            registration = DemoRegistration(
                name=name,
                title=title,
                category=PatternCategory(category),
                summary=summary,
                runner=runner,
                seeded=seeded,
                options=options,
                publishes_events=publishes_events,
            )
            self._registrations[name] = registration
            self.logger.debug("Registered demo", demo=name, category=registration.category.value)

    def get(self, name: str) -> DemoRegistration:
        """
        Get registration for a demo.

        Raises:
            DemoNotFoundError: If the demo is not registered
        """
        with self._registry_lock:
            if name not in self._registrations:
                raise DemoNotFoundError(name, sorted(self._registrations))
            return self._registrations[name]

    def list(self, category: Optional[Union[PatternCategory, str]] = None) -> List[DemoRegistration]:
        """List registrations in registration order, optionally for one category."""
        with self._registry_lock:
            registrations = list(self._registrations.values())
        if category is None:
            return registrations
        wanted = PatternCategory(category)
        return [r for r in registrations if r.category == wanted]

    def names(self) -> List[str]:
        with self._registry_lock:
            return list(self._registrations)

    def is_registered(self, name: str) -> bool:
        with self._registry_lock:
            return name in self._registrations

    def clear_registrations(self) -> None:
        """
        Clear all registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._registrations.clear()
            self.logger.debug("Cleared all demo registrations")


def get_demo_registry() -> DemoRegistry:
    """Get the singleton demo registry instance."""
    return DemoRegistry()
