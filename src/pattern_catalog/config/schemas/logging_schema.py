"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

from pattern_catalog.config.defaults import LogDestination, LogLevel


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/pattern_catalog.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum size of a log file in MB")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 1:
            raise ValueError("Log rotation settings must be at least 1")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(LogLevel.WARNING.value, description="Root log level")
    destination: str = Field(LogDestination.STDOUT.value, description="Log destination")
    file: LogFileConfig = Field(default_factory=lambda: LogFileConfig())

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Upper-cased log level

        Raises:
            ValueError: If log level is unknown
        """
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        destination = v.lower()
        try:
            LogDestination(destination)
        except ValueError:
            raise ValueError(
                f"Invalid log destination: {v}. Must be one of: "
                f"{', '.join(d.value for d in LogDestination)}"
            )
        return destination
