"""Configuration models for todo-local.

The whole application config lives in one JSON file and is validated
through these models on load.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: str | None = Field(
        default=None, description="SQLite file path (None uses the data dir)"
    )
    journal_mode: Literal["WAL", "DELETE", "TRUNCATE", "MEMORY"] = Field(default="WAL")
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str | None) -> str | None:
        """Treat blank paths as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml"] = Field(default="pretty")
    color: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class AppConfig(BaseModel):
    """Main todo-local configuration"""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
