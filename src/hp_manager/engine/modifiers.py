"""Derived-stat effects of item modifiers.

Only the constitution path affects HP today. Other modifier shapes are
valid data with no engine effect.
"""

from __future__ import annotations

from hp_manager.models.character import CharacterState, Item


HP_AFFECTED_OBJECT = "stats"
HP_AFFECTED_VALUE = "constitution"


class ModifierEngine:
    """Computes what equipping an item does to maximum HP."""

    def compute_hp_delta(self, item: Item, state: CharacterState) -> int:
        """HP gained by equipping ``item`` (and lost by unequipping it).

        A constitution modifier grants ``level * max(value // 2, 0)``. A
        negative modifier never reduces HP.

        Args:
            item: The item being equipped or unequipped.
            state: The owning character, for its level.

        Returns:
            Non-negative HP delta; 0 for any non-constitution modifier.

        Example:
            >>> # value=4 on a level 3 character
            >>> engine.compute_hp_delta(belt, briv)
            6
        """
        modifier = item.modifier
        if modifier.affected_object != HP_AFFECTED_OBJECT:
            return 0
        if modifier.affected_value != HP_AFFECTED_VALUE:
            return 0
        return state.level * max(modifier.value // 2, 0)


__all__ = [
    "HP_AFFECTED_OBJECT",
    "HP_AFFECTED_VALUE",
    "ModifierEngine",
]
