"""Catalog configuration schema."""

from pydantic import BaseModel, Field, field_validator

from pattern_catalog.config.defaults import OutputFormat


class CatalogConfig(BaseModel):
    """Settings shared by the catalog service and the pattern demos."""

    output_format: str = Field(OutputFormat.LIST.value, description="Default CLI output format")
    random_seed: int = Field(42, description="Seed for demos that use randomness")
    command_history_limit: int = Field(50, description="Command pattern undo history size")
    text_history_limit: int = Field(10, description="Memento text history size")
    auto_save_limit: int = Field(5, description="Number of auto-saves kept by the save manager")
    auth_rate_limit: int = Field(5, description="Authentication attempts allowed per IP")
    cache_max_entries: int = Field(100, description="Entries kept by the cache singleton")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format."""
        fmt = v.lower()
        try:
            OutputFormat(fmt)
        except ValueError:
            raise ValueError(
                f"Invalid output format: {v}. Must be one of: "
                f"{', '.join(f.value for f in OutputFormat)}"
            )
        return fmt

    @field_validator(
        "command_history_limit",
        "text_history_limit",
        "auto_save_limit",
        "auth_rate_limit",
        "cache_max_entries",
    )
    @classmethod
    def validate_limits(cls, v: int) -> int:
        """Validate that limits allow at least one entry."""
        if v < 1:
            raise ValueError("Limits must be at least 1")
        return v
