"""SQLite persistence for character snapshots.

One row per character key. The snapshot column holds the camelCase JSON
shape produced by ``CharacterState.to_snapshot_json``.

Storage location: ``settings.storage.database_path``.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from hp_manager.core.config import get_settings
from hp_manager.core.exceptions import StorageError
from hp_manager.core.logging import get_logger
from hp_manager.models.character import CharacterState
from hp_manager.storage.base import decode_snapshot, normalize_key


logger = get_logger(__name__)


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class CharacterRecord:
    """A stored character snapshot row.

    Attributes:
        key: Normalized (lower-case) character key.
        name: Character name at the time of the last save.
        snapshot_json: Serialized CharacterState.
        created_at: When the key was first stored.
        updated_at: When the key was last saved.
    """

    key: str
    name: str
    snapshot_json: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> CharacterRecord:
        """Create from database row."""
        return cls(
            key=row[0],
            name=row[1],
            snapshot_json=row[2],
            created_at=datetime.fromisoformat(row[3]),
            updated_at=datetime.fromisoformat(row[4]),
        )

    def to_state(self) -> CharacterState:
        return decode_snapshot(self.key, self.snapshot_json)


# =============================================================================
# Database Class
# =============================================================================


class Database:
    """SQLite-backed CharacterStore."""

    SCHEMA_VERSION = 1

    def __init__(self, db_path: str | Path | None = None) -> None:
        """Initialize database.

        Args:
            db_path: Path to database file. If None, uses the configured path.
        """
        if db_path is None:
            self.db_path = get_settings().storage.database_path
        else:
            self.db_path = Path(db_path)

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

        logger.info("Database initialized", path=str(self.db_path))

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection with proper cleanup."""
        try:
            conn = sqlite3.connect(str(self.db_path))
        except sqlite3.Error as exc:
            raise StorageError(
                f"Cannot open database: {exc}",
                details={"path": str(self.db_path)},
            ) from exc
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_schema(self) -> None:
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS characters (
                    key TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    snapshot_json TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_characters_updated
                ON characters(updated_at DESC)
            """)

            cursor.execute("""
                INSERT OR REPLACE INTO schema_version (version) VALUES (?)
            """, (self.SCHEMA_VERSION,))

    # =========================================================================
    # CharacterStore Operations
    # =========================================================================

    def get_record(self, key: str) -> CharacterRecord | None:
        """Get the raw stored row for a key."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                SELECT key, name, snapshot_json, created_at, updated_at
                FROM characters WHERE key = ?
            """, (normalize_key(key),))
            row = cursor.fetchone()

        if row:
            return CharacterRecord.from_row(tuple(row))
        return None

    def get(self, key: str) -> CharacterState | None:
        """Load the snapshot stored under ``key``.

        Raises:
            SnapshotCorruptedError: If the stored snapshot no longer validates.
        """
        record = self.get_record(key)
        if record is None:
            return None
        return record.to_state()

    def put(self, key: str, state: CharacterState) -> None:
        """Insert or replace the snapshot for ``key``, keeping ``created_at``."""
        now = datetime.now().isoformat()
        normalized = normalize_key(key)

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO characters (key, name, snapshot_json, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    name = excluded.name,
                    snapshot_json = excluded.snapshot_json,
                    updated_at = excluded.updated_at
            """, (normalized, state.name, state.to_snapshot_json(), now, now))

        logger.debug("Saved snapshot", key=normalized, name=state.name)

    def delete(self, key: str) -> bool:
        """Delete a snapshot.

        Returns:
            True if deleted, False if not found.
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM characters WHERE key = ?", (normalize_key(key),))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("Deleted snapshot", key=normalize_key(key))

        return deleted

    def list_keys(self) -> list[str]:
        """All stored keys, most recently updated first."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT key FROM characters ORDER BY updated_at DESC")
            return [row[0] for row in cursor.fetchall()]

    def count(self) -> int:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) FROM characters")
            return cursor.fetchone()[0]


# =============================================================================
# Singleton Instance
# =============================================================================


_database_instance: Database | None = None


def get_database() -> Database:
    """Get the global database instance."""
    global _database_instance

    if _database_instance is None:
        _database_instance = Database()

    return _database_instance


def reset_database() -> None:
    """Drop the cached global instance so the next call re-reads settings."""
    global _database_instance
    _database_instance = None


__all__ = [
    "CharacterRecord",
    "Database",
    "get_database",
    "reset_database",
]
