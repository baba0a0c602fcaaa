"""Character loader: builds a fresh CharacterState from a stored record.

Source records are JSON files in the stored camelCase shape. Whatever HP
bookkeeping a record carries is discarded on load: every session starts with
no temporary HP, nothing equipped and current HP equal to base HP.

The loader fails closed. A missing, unreadable or malformed record raises
CharacterLoadError and no state is produced.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from hp_manager.core.config import get_settings
from hp_manager.core.exceptions import CharacterLoadError
from hp_manager.core.logging import get_logger
from hp_manager.models.character import CharacterState


logger = get_logger(__name__)


def initialize_session_fields(state: CharacterState) -> CharacterState:
    """Reset the per-session HP fields of a freshly parsed record."""
    state.temp_hit_points = 0
    for item in state.items:
        item.equipped = False
    state.modified_hit_points = state.base_hit_points
    state.current_hit_points = state.modified_hit_points
    return state


def load_character_from_dict(
    data: Mapping[str, Any],
    *,
    source: str | None = None,
) -> CharacterState:
    """Build a session-initialized CharacterState from an in-memory record.

    Args:
        data: Record in the stored camelCase shape.
        source: Optional source identifier for error context.

    Returns:
        A new CharacterState.

    Raises:
        CharacterLoadError: If the record does not validate.
    """
    if not isinstance(data, Mapping):
        raise CharacterLoadError(
            "Character record must be a JSON object",
            source_file=source,
            details={"type": type(data).__name__},
        )

    try:
        state = CharacterState.model_validate(dict(data))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        raise CharacterLoadError(
            f"Malformed character record: {first['msg']}",
            source_file=source,
            details={
                "field": ".".join(str(part) for part in first["loc"]),
                "error_count": exc.error_count(),
            },
        ) from exc

    return initialize_session_fields(state)


class CharacterLoader:
    """Loads character records from a data directory.

    Args:
        data_path: Directory to resolve relative source ids against.
            Defaults to ``settings.storage.data_path``.

    Example:
        >>> loader = CharacterLoader(Path("data/characters"))
        >>> briv = loader.load("briv.json")
    """

    def __init__(self, data_path: str | Path | None = None) -> None:
        if data_path is None:
            data_path = get_settings().storage.data_path
        self.data_path = Path(data_path)

    def resolve_path(self, source_id: str) -> Path:
        """Map a source id to a file path.

        Absolute paths are used as-is; anything else is relative to the data
        directory. A missing ``.json`` suffix is added.
        """
        path = Path(source_id)
        if not path.suffix:
            path = path.with_suffix(".json")
        if path.is_absolute():
            return path
        return self.data_path / path

    def load(self, source_id: str) -> CharacterState:
        """Load and initialize a character.

        Args:
            source_id: File name (relative to the data directory) or path.

        Returns:
            A new CharacterState.

        Raises:
            CharacterLoadError: If the file is missing, unreadable or invalid.
        """
        path = self.resolve_path(source_id)

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CharacterLoadError(
                f"Failed to read character file: {exc.strerror or exc}",
                source_file=str(path),
            ) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CharacterLoadError(
                f"Character file is not valid JSON: {exc.msg}",
                source_file=str(path),
                details={"line": exc.lineno, "column": exc.colno},
            ) from exc

        state = load_character_from_dict(data, source=str(path))
        logger.info("Loaded character", name=state.name, source=str(path))
        return state


__all__ = [
    "CharacterLoader",
    "initialize_session_fields",
    "load_character_from_dict",
]
