"""Pydantic V2 models for character snapshots.

Exports:
    CharacterState: The per-character snapshot mutated by the engine.
    Item, ItemModifier, CharacterClass, Defense: Snapshot parts.
    Relation, DamageType, HPActionType, ActionOutcome: Closed enums.
"""

from __future__ import annotations

from hp_manager.models.character import (
    CharacterClass,
    CharacterState,
    Defense,
    Item,
    ItemModifier,
    SnapshotModel,
)
from hp_manager.models.enums import (
    ActionOutcome,
    DamageType,
    HPActionType,
    Relation,
)


__all__ = [
    "SnapshotModel",
    "CharacterClass",
    "CharacterState",
    "Defense",
    "Item",
    "ItemModifier",
    "ActionOutcome",
    "DamageType",
    "HPActionType",
    "Relation",
]
