"""Configuration service for todo-local.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json in the platform config directory
- Reading and writing individual settings by dot-separated key
- Resolving the database path the task store should open
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from todo_local.adapters.sqlite.connection import default_db_path
from todo_local.models.config_models import AppConfig


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self, config_dir: str | Path | None = None):
        """Initialize the config service.

        Args:
            config_dir: Directory holding config.json. Defaults to the
                platform config directory.
        """
        if config_dir is None:
            config_dir = user_config_dir("todo_local")
        self.config_dir = Path(config_dir)
        self.config_path = self.config_dir / "config.json"

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk.

        A missing file yields the defaults.

        Raises:
            RuntimeError: If the file exists but cannot be read or validated
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                return AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            return AppConfig()
        except (OSError, ValidationError) as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a setting
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save.

        Raises:
            KeyError: If the key does not name a setting
            pydantic.ValidationError: If the value is invalid for the setting
        """
        self.get(key)

        parts = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()

    def reset(self) -> None:
        """Reset configuration to defaults and save."""
        self._config = AppConfig()
        self.save_config()

    def resolve_db_path(self, override: str | None = None) -> str | Path:
        """Database path to open: override, then config, then default."""
        if override:
            return override
        if self.config.database.path:
            return self.config.database.path
        return default_db_path()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the process-wide config service."""
    return ConfigService()
