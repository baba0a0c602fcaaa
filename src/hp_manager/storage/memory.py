"""In-process snapshot store, the equivalent of per-browser session storage."""

from __future__ import annotations

from hp_manager.core.logging import get_logger
from hp_manager.models.character import CharacterState
from hp_manager.storage.base import decode_snapshot, normalize_key


logger = get_logger(__name__)


class MemoryStore:
    """Dict-backed CharacterStore holding JSON snapshots."""

    def __init__(self) -> None:
        self._snapshots: dict[str, str] = {}

    def get(self, key: str) -> CharacterState | None:
        snapshot = self._snapshots.get(normalize_key(key))
        if snapshot is None:
            return None
        return decode_snapshot(normalize_key(key), snapshot)

    def put(self, key: str, state: CharacterState) -> None:
        self._snapshots[normalize_key(key)] = state.to_snapshot_json()
        logger.debug("Stored snapshot", key=normalize_key(key))

    def delete(self, key: str) -> bool:
        deleted = self._snapshots.pop(normalize_key(key), None) is not None
        if deleted:
            logger.info("Deleted snapshot", key=normalize_key(key))
        return deleted

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)


__all__ = ["MemoryStore"]
