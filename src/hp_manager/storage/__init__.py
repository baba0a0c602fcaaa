"""Storage module for character snapshot persistence.

Provides:
- MemoryStore: in-process store for a single session
- Database: SQLite store that survives restarts
- create_store: backend selection from settings
"""

from __future__ import annotations

from hp_manager.core.config import get_settings
from hp_manager.storage.base import CharacterStore, decode_snapshot, normalize_key
from hp_manager.storage.database import (
    CharacterRecord,
    Database,
    get_database,
    reset_database,
)
from hp_manager.storage.memory import MemoryStore


def create_store() -> CharacterStore:
    """Build the store selected by ``settings.storage.store_backend``."""
    if get_settings().storage.store_backend == "sqlite":
        return get_database()
    return MemoryStore()


__all__ = [
    "CharacterRecord",
    "CharacterStore",
    "Database",
    "MemoryStore",
    "create_store",
    "decode_snapshot",
    "get_database",
    "normalize_key",
    "reset_database",
]
