"""Enumeration types for the HP manager.

Relations, damage types and HP action identifiers. Stored records use plain
strings; these enums are the parsed, closed form used by the engine.
"""

from __future__ import annotations

from enum import StrEnum


class Relation(StrEnum):
    """A character's defensive relationship to a damage type."""

    NONE = "none"
    RESISTANCE = "resistance"
    IMMUNITY = "immunity"
    VULNERABILITY = "vulnerability"

    def apply(self, amount: int) -> int:
        """Scale an incoming damage amount by this relation.

        Args:
            amount: Non-negative damage before defenses.

        Returns:
            Damage after defenses. Resistance rounds down.

        Example:
            >>> Relation.RESISTANCE.apply(7)
            3
        """
        if self is Relation.IMMUNITY:
            return 0
        if self is Relation.RESISTANCE:
            return amount // 2
        if self is Relation.VULNERABILITY:
            return amount * 2
        return amount


class DamageType(StrEnum):
    """Standard damage types.

    The engine matches any free-text damage type against stored defenses;
    the session's demo damage roll defaults to ``BLUDGEONING``.
    """

    BLUDGEONING = "bludgeoning"
    PIERCING = "piercing"
    SLASHING = "slashing"
    FIRE = "fire"
    COLD = "cold"
    ACID = "acid"
    THUNDER = "thunder"
    LIGHTNING = "lightning"
    POISON = "poison"
    RADIANT = "radiant"
    NECROTIC = "necrotic"
    PSYCHIC = "psychic"
    FORCE = "force"


class HPActionType(StrEnum):
    """Reserved HP action names. Any other name is a damage type."""

    TEMP_HP = "tempHP"
    HEALING = "healing"


class ActionOutcome(StrEnum):
    """Whether an engine action changed the character."""

    APPLIED = "applied"
    NO_OP = "no_op"


__all__ = [
    "Relation",
    "DamageType",
    "HPActionType",
    "ActionOutcome",
]
