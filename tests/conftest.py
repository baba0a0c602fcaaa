"""Pytest configuration and shared fixtures.

This module provides common fixtures for the HP manager test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from hp_manager.engine.dice import DiceRoller
    from hp_manager.ingestion.character_loader import CharacterLoader
    from hp_manager.models.character import CharacterState
    from hp_manager.storage.database import Database
    from hp_manager.storage.memory import MemoryStore


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset cached settings, the database singleton and log context around each test."""
    from hp_manager.core.config import clear_settings_cache
    from hp_manager.core.logging import clear_context
    from hp_manager.storage.database import reset_database

    clear_settings_cache()
    reset_database()
    yield
    clear_settings_cache()
    reset_database()
    clear_context()


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_character_data() -> dict[str, Any]:
    """Provide a stored character record in the camelCase source shape.

    Level 3, 30 base HP. The belt grants 3 * (4 // 2) = 6 HP when equipped;
    the gauntlets modify strength and have no HP effect.
    """
    return {
        "name": "Thorin",
        "level": 3,
        "hitPoints": 30,
        "classes": [
            {"name": "fighter", "hitDiceValue": 10, "classLevel": 3},
        ],
        "stats": {
            "strength": 16,
            "dexterity": 12,
            "constitution": 14,
            "intelligence": 10,
            "wisdom": 11,
            "charisma": 8,
        },
        "items": [
            {
                "name": "Belt of Vigor",
                "modifier": {
                    "affectedObject": "stats",
                    "affectedValue": "constitution",
                    "value": 4,
                },
            },
            {
                "name": "Gauntlets of Might",
                "modifier": {
                    "affectedObject": "stats",
                    "affectedValue": "strength",
                    "value": 2,
                },
            },
        ],
        "defenses": [
            {"type": "fire", "defense": "immunity"},
            {"type": "slashing", "defense": "resistance"},
            {"type": "psychic", "defense": "vulnerability"},
        ],
    }


@pytest.fixture
def sample_character(sample_character_data: dict[str, Any]) -> CharacterState:
    """Create a session-initialized CharacterState."""
    from hp_manager.ingestion.character_loader import load_character_from_dict

    return load_character_from_dict(sample_character_data)


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def data_dir(tmp_path: Path, sample_character_data: dict[str, Any]) -> Path:
    """Directory holding ``thorin.json`` with the sample record."""
    directory = tmp_path / "characters"
    directory.mkdir()
    (directory / "thorin.json").write_text(json.dumps(sample_character_data), encoding="utf-8")
    return directory


@pytest.fixture
def loader(data_dir: Path) -> CharacterLoader:
    from hp_manager.ingestion.character_loader import CharacterLoader

    return CharacterLoader(data_dir)


@pytest.fixture
def memory_store() -> MemoryStore:
    from hp_manager.storage.memory import MemoryStore

    return MemoryStore()


@pytest.fixture
def database(tmp_path: Path) -> Database:
    """SQLite database in a temporary directory."""
    from hp_manager.storage.database import Database

    return Database(tmp_path / "db" / "hp_manager.db")


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Create a DiceRoller with a fixed seed for reproducible tests."""
    from hp_manager.engine.dice import DiceRoller

    return DiceRoller(seed=42)
