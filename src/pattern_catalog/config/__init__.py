"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig, validate_config,
    CatalogConfig,
    LogFileConfig, LoggingConfig,
)

from .defaults import DEFAULT_CONFIG, LogDestination, LogLevel, OutputFormat

# Configuration management
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'CatalogConfig',
    'LogFileConfig',
    'LoggingConfig',

    # Defaults
    'DEFAULT_CONFIG',
    'LogDestination',
    'LogLevel',
    'OutputFormat',

    # Configuration management
    'ConfigurationManager',
    'get_config_manager',
]
