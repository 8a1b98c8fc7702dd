"""Registry holding one instance per singleton class."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Thread-safe registry of singleton instances.

    The registry is itself a singleton. Instances are created lazily on the
    first get() for a class; later calls ignore constructor arguments and
    return the stored instance.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "SingletonRegistry":
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._instances: Dict[Type, Any] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)
        self._initialized = True

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        return cls()

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get or create the instance of a singleton class.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments used only on first creation
            **kwargs: Constructor keyword arguments used only on first creation

        Returns:
            The singleton instance
        """
        if singleton_class not in self._instances:
            with self._registry_lock:
                if singleton_class not in self._instances:
                    self._instances[singleton_class] = singleton_class(*args, **kwargs)
                    self.logger.debug("Created singleton", singleton=singleton_class.__name__)
        return self._instances[singleton_class]

    def has(self, singleton_class: Type) -> bool:
        with self._registry_lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """
        Drop stored instances.

        This method is primarily for testing purposes.

        Args:
            singleton_class: Class to drop. All instances are dropped if None.
        """
        with self._registry_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
