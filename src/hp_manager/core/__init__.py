"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        HPManagerError: Base exception for all application errors.
        CharacterLoadError: Character source could not be loaded.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_logging_from_settings: Apply the settings' logging section.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from hp_manager.core.config import (
    EngineSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from hp_manager.core.exceptions import (
    CharacterLoadError,
    ConfigurationError,
    DiceRollError,
    EngineError,
    HPManagerError,
    IngestionError,
    SnapshotCorruptedError,
    StorageError,
)
from hp_manager.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


__all__ = [
    # Exceptions
    "HPManagerError",
    "IngestionError",
    "CharacterLoadError",
    "EngineError",
    "DiceRollError",
    "StorageError",
    "SnapshotCorruptedError",
    "ConfigurationError",
    # Configuration
    "Settings",
    "StorageSettings",
    "EngineSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
