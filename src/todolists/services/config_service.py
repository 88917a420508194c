"""Configuration service for managing todolists configuration.

This module provides the ConfigService class, the single source of truth
for configuration. It handles:

- Loading and saving config.json
- Updating single keys with validation
- Resetting to defaults
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import ValidationError

from todolists.models.config_models import AppConfig


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir("todolists"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("todolists"))

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def database_path(self) -> Path:
        """Configured SQLite database path, or the default one in data_dir."""
        if self.config.database_path:
            return Path(self.config.database_path).expanduser()
        return self.data_dir / "todolists.db"

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def set_value(self, key: str, value: Any) -> AppConfig:
        """Set a single configuration key and persist it.

        Args:
            key: Field name of AppConfig
            value: New value; strings are coerced to the field type

        Returns:
            The updated configuration

        Raises:
            ValueError: If the key is unknown or the value is invalid
        """
        if key not in AppConfig.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        data = self.config.model_dump()
        data[key] = value
        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            errors = "; ".join(error["msg"] for error in e.errors())
            raise ValueError(f"Invalid value for {key}: {errors}") from e

        self.save_config()
        return self._config

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()
        return self._config


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the process-wide ConfigService."""
    return ConfigService()
