"""HP Manager - hit point engine for a single character.

Tracks current, maximum and temporary HP and applies healing, temporary HP
grants, typed damage (immunity / resistance / vulnerability) and
equipment-derived HP bonuses.

Example:
    >>> from hp_manager import CharacterLoader, apply_hp, equip
    >>>
    >>> briv = CharacterLoader("data/characters").load("briv.json")
    >>> equip(briv, True)
    >>> apply_hp(briv, "tempHP", 10)
    >>> apply_hp(briv, "slashing", 14)
    >>> print(briv.to_summary())

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 character snapshot models.
    engine: HP rules, dice and the session controller.
    ingestion: Character record loader.
    storage: Snapshot stores (in-memory, SQLite).
"""

from __future__ import annotations

# Core
from hp_manager.core.config import Settings, get_settings
from hp_manager.core.exceptions import CharacterLoadError, HPManagerError
from hp_manager.core.logging import configure_logging, get_logger

# Models
from hp_manager.models import (
    ActionOutcome,
    CharacterState,
    DamageType,
    Defense,
    HPActionType,
    Item,
    ItemModifier,
    Relation,
)

# Engine
from hp_manager.engine import (
    CharacterSession,
    HPActionResult,
    HPEngine,
    apply_hp,
    create_session,
    defense_of,
    equip,
)

# Collaborators
from hp_manager.ingestion import CharacterLoader
from hp_manager.storage import Database, MemoryStore, create_store


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "HPManagerError",
    "CharacterLoadError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "ActionOutcome",
    "CharacterState",
    "DamageType",
    "Defense",
    "HPActionType",
    "Item",
    "ItemModifier",
    "Relation",
    # Engine
    "CharacterSession",
    "HPActionResult",
    "HPEngine",
    "apply_hp",
    "create_session",
    "defense_of",
    "equip",
    # Collaborators
    "CharacterLoader",
    "Database",
    "MemoryStore",
    "create_store",
]
