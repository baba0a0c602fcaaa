"""Snapshot store contract shared by every backend."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import ValidationError as PydanticValidationError

from hp_manager.core.exceptions import SnapshotCorruptedError
from hp_manager.models.character import CharacterState


def normalize_key(key: str) -> str:
    """Keys are case-insensitive; ``"Briv.json"`` and ``"briv.json"`` match."""
    return key.strip().lower()


def decode_snapshot(key: str, snapshot_json: str) -> CharacterState:
    """Rebuild a stored snapshot.

    Raises:
        SnapshotCorruptedError: If the stored JSON no longer validates.
    """
    try:
        return CharacterState.model_validate_json(snapshot_json)
    except PydanticValidationError as exc:
        raise SnapshotCorruptedError(
            "Stored snapshot is not a valid character",
            key=key,
            details={"error_count": exc.error_count()},
        ) from exc


@runtime_checkable
class CharacterStore(Protocol):
    """Keyed snapshot persistence.

    Implementations store copies: mutating a state after ``put`` or after
    ``get`` never changes what is stored until the next ``put``.
    """

    def get(self, key: str) -> CharacterState | None: ...

    def put(self, key: str, state: CharacterState) -> None: ...

    def delete(self, key: str) -> bool: ...


__all__ = [
    "CharacterStore",
    "decode_snapshot",
    "normalize_key",
]
