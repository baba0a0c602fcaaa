"""HP rules engine.

Submodules:
    defense: Defense relation lookup
    modifiers: Item modifier effects on HP
    equipment: Equip / unequip state machine
    hp: Temp HP, healing and typed damage transitions
    dice: Dice rolling for demo damage amounts (d20 library)
    session: Keyed load / mutate / save controller

Example:
    >>> from hp_manager.engine import apply_hp, defense_of, equip
    >>> equip(briv, True)
    >>> apply_hp(briv, "tempHP", 10)
    >>> apply_hp(briv, "slashing", 14)
    >>> defense_of(briv, "fire")
"""

from __future__ import annotations

# =============================================================================
# Rules
# =============================================================================
from hp_manager.engine.defense import DefenseResolver, defense_of
from hp_manager.engine.equipment import EquipmentEngine, EquipmentResult, equip
from hp_manager.engine.hp import HPActionResult, HPEngine, apply_hp, normalize_amount
from hp_manager.engine.modifiers import ModifierEngine

# =============================================================================
# Dice
# =============================================================================
from hp_manager.engine.dice import DiceRoll, DiceRoller, roll

# =============================================================================
# Session Controller
# =============================================================================
from hp_manager.engine.session import CharacterSession, create_session


__all__ = [
    # Rules
    "DefenseResolver",
    "EquipmentEngine",
    "EquipmentResult",
    "HPActionResult",
    "HPEngine",
    "ModifierEngine",
    "apply_hp",
    "defense_of",
    "equip",
    "normalize_amount",
    # Dice
    "DiceRoll",
    "DiceRoller",
    "roll",
    # Session
    "CharacterSession",
    "create_session",
]
