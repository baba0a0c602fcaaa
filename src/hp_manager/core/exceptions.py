"""Custom exception hierarchy for the HP manager.

All exceptions inherit from HPManagerError, enabling unified error handling
at the application boundary while preserving domain-specific context.

The HP engine itself raises nothing: bad amounts are normalized, unknown
action types are treated as damage types and a missing defense simply means
full damage. Errors only surface at the boundaries (loading, storage, dice,
configuration).

Example:
    >>> from hp_manager.core.exceptions import CharacterLoadError
    >>> raise CharacterLoadError("Character file not found", source_file="briv.json")
"""

from __future__ import annotations

from typing import Any


class HPManagerError(Exception):
    """Base exception for all HP manager errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Ingestion Domain Exceptions
# =============================================================================


class IngestionError(HPManagerError):
    """Base exception for errors while reading character source data."""

    def __init__(
        self,
        message: str,
        *,
        source_file: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ingestion error with source file context.

        Args:
            message: Human-readable error description.
            source_file: Path to the file that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if source_file:
            combined_details["source_file"] = source_file
        super().__init__(message, details=combined_details)


class CharacterLoadError(IngestionError):
    """Raised when a character record cannot be read or is malformed.

    No partial CharacterState is ever produced when this is raised.
    """


# =============================================================================
# Engine Domain Exceptions
# =============================================================================


class EngineError(HPManagerError):
    """Base exception for engine-side errors outside the HP rules."""


class DiceRollError(EngineError):
    """Raised when a dice expression cannot be rolled."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that failed.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression is not None:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


# =============================================================================
# Storage Domain Exceptions
# =============================================================================


class StorageError(HPManagerError):
    """Base exception for persistence store failures."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize storage error with the offending key.

        Args:
            message: Human-readable error description.
            key: The snapshot key involved in the failure.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if key is not None:
            combined_details["key"] = key
        super().__init__(message, details=combined_details)


class SnapshotCorruptedError(StorageError):
    """Raised when a stored snapshot no longer validates as a CharacterState."""


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(HPManagerError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


__all__ = [
    # Base exception
    "HPManagerError",
    # Ingestion exceptions
    "IngestionError",
    "CharacterLoadError",
    # Engine exceptions
    "EngineError",
    "DiceRollError",
    # Storage exceptions
    "StorageError",
    "SnapshotCorruptedError",
    # Configuration exceptions
    "ConfigurationError",
]
