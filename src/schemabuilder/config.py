"""
Centralized configuration for schemabuilder.

Uses Pydantic BaseSettings for environment variable integration
and validation.

Configuration sources (in order of precedence):
1. Explicit constructor arguments
2. Environment variables (SCHEMABUILDER_*)
3. .env file
4. Default values

Example:
    from schemabuilder.config import get_config

    config = get_config()
    print(config.default_start)  # ['index', 'Query', 'Mutation', 'Subscription']

    # Override at runtime
    config = get_config(default_start=["Query"])

List values are read from the environment as JSON, e.g.
``SCHEMABUILDER_DEFAULT_START='["Query", "Mutation"]'``.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from schemabuilder.ordering.constraints import DEFAULT_START


class SchemaBuilderConfig(BaseSettings):
    """Central configuration for schemabuilder."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMABUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Ordering defaults
    default_start: list[str] = Field(
        default_factory=lambda: list(DEFAULT_START),
        description="Identifiers seeded into the start partition of each build",
    )
    default_end: list[str] = Field(
        default_factory=list,
        description="Identifiers seeded into the end partition of each build",
    )

    # Importer
    extensions: list[str] = Field(
        default_factory=lambda: [".py", ".graphql", ".gql"],
        description="File extensions picked up when importing a directory",
    )

    # Logging
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Logging level for schemabuilder",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format",
    )

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Ensure every extension carries its leading dot."""
        return [ext if ext.startswith(".") else f".{ext}" for ext in v]


# Global singleton
_config: Optional[SchemaBuilderConfig] = None


def get_config(**overrides) -> SchemaBuilderConfig:
    """
    Get the global configuration instance.

    Creates a singleton on first call. Subsequent calls return
    the same instance unless overrides are provided.
    """
    global _config

    if overrides or _config is None:
        _config = SchemaBuilderConfig(**overrides)

    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
