"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .catalog_schema import CatalogConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """
        Build configuration from the upper-case section layout.

        Args:
            data: Interpolated configuration with LOGGING_CONFIG/CATALOG_CONFIG sections

        Returns:
            Validated configuration
        """
        return cls(
            logging=LoggingConfig(**data.get("LOGGING_CONFIG", {})),
            catalog=CatalogConfig(**data.get("CATALOG_CONFIG", {})),
        )


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig.from_dict(config)
