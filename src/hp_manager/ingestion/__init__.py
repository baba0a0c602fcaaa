"""Character ingestion: turning stored records into session-ready state."""

from hp_manager.ingestion.character_loader import (
    CharacterLoader,
    initialize_session_fields,
    load_character_from_dict,
)

__all__ = [
    "CharacterLoader",
    "initialize_session_fields",
    "load_character_from_dict",
]
