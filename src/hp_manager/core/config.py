"""Configuration management for the HP manager.

Centralized configuration using pydantic-settings, supporting environment
variables, .env files, and runtime overrides.

Example:
    >>> from hp_manager.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.engine.default_character_key)
    'briv.json'

Environment Variables:
    HP_MANAGER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    HP_MANAGER_LOG_JSON: Emit JSON log lines
    HP_MANAGER_DEBUG: Force DEBUG logging
    HP_MANAGER_DATA_PATH: Directory holding character source records
    HP_MANAGER_DATABASE_PATH: Path to the SQLite snapshot database
    HP_MANAGER_STORE_BACKEND: Snapshot store backend ('memory' or 'sqlite')
    HP_MANAGER_ENGINE_DEMO_DAMAGE_DICE: Dice expression for demo damage rolls
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hp_manager.core.exceptions import ConfigurationError


class StorageSettings(BaseSettings):
    """Configuration for character sources and snapshot storage.

    Attributes:
        data_path: Directory that holds character JSON records.
        database_path: Path to the SQLite database file.
        store_backend: Which snapshot store the session controller uses.
    """

    model_config = SettingsConfigDict(
        env_prefix="HP_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_path: Path = Field(
        default=Path("data/characters"),
        description="Directory holding character source records",
    )
    database_path: Path = Field(
        default=Path("data/hp_manager.db"),
        description="Path to SQLite database",
    )
    store_backend: Literal["memory", "sqlite"] = Field(
        default="memory",
        description="Snapshot store backend",
    )


class EngineSettings(BaseSettings):
    """Defaults used by the session controller.

    Attributes:
        default_character_key: Key (and source id) used when none is given.
        default_action_type: HP action used when none is given.
        demo_damage_dice: Dice expression used for demo damage rolls.
    """

    model_config = SettingsConfigDict(
        env_prefix="HP_MANAGER_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_character_key: str = Field(
        default="briv.json",
        description="Default character key",
    )
    default_action_type: str = Field(
        default="healing",
        description="Default HP action type",
    )
    demo_damage_dice: str = Field(
        default="2d6",
        description="Dice expression for demo damage rolls",
    )

    @field_validator("default_character_key", "default_action_type", "demo_damage_dice")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        """Reject empty or whitespace-only values.

        Raises:
            ConfigurationError: If the value is blank.
        """
        if not value.strip():
            raise ConfigurationError("Engine setting must not be blank")
        return value.strip()


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        log_json: Emit JSON log lines instead of console output.
        storage: Source and snapshot storage settings.
        engine: Session controller defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="HP_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="HP Manager",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON formatted logs",
    )

    storage: StorageSettings = Field(default_factory=StorageSettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Example:
        >>> clear_settings_cache()
        >>> settings = get_settings()  # Reloads from environment
    """
    get_settings.cache_clear()


__all__ = [
    "StorageSettings",
    "EngineSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
