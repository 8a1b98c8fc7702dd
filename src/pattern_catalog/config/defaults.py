# src/pattern_catalog/config/defaults.py
from typing import Dict, Any
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class OutputFormat(str, Enum):
    """CLI output format enumeration."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


DEFAULT_CONFIG: Dict[str, Any] = {
    # Logging configuration
    "LOGGING_CONFIG": {
        "level": "${PATTERN_CATALOG_LOG_LEVEL:WARNING}",
        "destination": "${PATTERN_CATALOG_LOG_DESTINATION:stdout}",
        "file": {
            "path": "${PATTERN_CATALOG_LOGDIR:logs}/pattern_catalog.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # Catalog and demo behaviour
    "CATALOG_CONFIG": {
        "output_format": "${PATTERN_CATALOG_FORMAT:list}",
        "random_seed": "${PATTERN_CATALOG_SEED:42}",
        "command_history_limit": 50,
        "text_history_limit": 10,
        "auto_save_limit": 5,
        "auth_rate_limit": 5,
        "cache_max_entries": 100,
    },
}
