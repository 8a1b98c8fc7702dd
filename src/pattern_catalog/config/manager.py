"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import logging
import os
import re
import threading
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.config.defaults import DEFAULT_CONFIG
from pattern_catalog.config.schemas import AppConfig, CatalogConfig, LoggingConfig
from pattern_catalog.domain.core.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    This class provides a unified interface for accessing configuration with:
    - Defaults from DEFAULT_CONFIG
    - Optional JSON or YAML configuration file merged over the defaults
    - ${VAR} and ${VAR:default} interpolation from the environment
    - Pydantic validation into AppConfig
    - Lazy, thread-safe loading with typed section caching
    """

    _TYPE_MAPPING = {
        'LoggingConfig': 'logging',
        'CatalogConfig': 'catalog',
    }

    def __init__(self, config_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load, merge, interpolate and validate configuration."""
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            self._merge_config(config_data, self._load_config_file(self._config_file))
        if self._overrides:
            self._merge_config(config_data, self._overrides)

        self._raw_config = self._interpolate_values(config_data)

        try:
            app_config = AppConfig.from_dict(self._raw_config)
        except PydanticValidationError as e:
            missing = [".".join(str(p) for p in err["loc"]) for err in e.errors() if err["type"] == "missing"]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=missing) from e

        logger.debug("Configuration loaded successfully")
        return app_config

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from a JSON or YAML file."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        try:
            with open(config_path, 'r') as f:
                if config_path.endswith(('.yml', '.yaml')):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")
        return data

    @staticmethod
    def _merge_config(target: Dict[str, Any], source: Dict[str, Any]) -> None:
        """Deep-merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                ConfigurationManager._merge_config(target[key], value)
            else:
                target[key] = value

    @staticmethod
    def _resolve_placeholder(match: re.Match) -> str:
        var_name, default = match.group(1), match.group(2)
        if default is None:
            return os.environ.get(var_name, match.group(0))
        return os.environ.get(var_name, default)

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} placeholders."""
        if isinstance(config, str):
            return _PLACEHOLDER.sub(self._resolve_placeholder, config)
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        """Create typed configuration instance."""
        config_name = config_type.__name__
        if config_name in self._TYPE_MAPPING:
            return getattr(self.app_config, self._TYPE_MAPPING[config_name])
        raise ConfigurationError(f"Unknown configuration type: {config_name}")

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        # Accessing app_config guarantees the raw config has been built
        _ = self.app_config
        return copy.deepcopy(self._raw_config)

    @property
    def logging(self) -> LoggingConfig:
        return self.get_typed(LoggingConfig)

    @property
    def catalog(self) -> CatalogConfig:
        return self.get_typed(CatalogConfig)

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
            self._raw_config = None
            self._config_cache.clear()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the process-wide configuration manager."""
    from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton

    return get_singleton(ConfigurationManager, config_file)
