"""Defense lookup for typed damage."""

from __future__ import annotations

from hp_manager.models.character import CharacterState
from hp_manager.models.enums import Relation


class DefenseResolver:
    """Looks up a character's defensive relation to a damage type.

    Matching is an exact, case-sensitive comparison against the stored
    damage type; callers normalize case if they want to. A missing entry is
    a normal outcome and yields ``Relation.NONE``.
    """

    def resolve(self, state: CharacterState, damage_type: str) -> Relation:
        for defense in state.defenses:
            if defense.damage_type == damage_type:
                return defense.relation
        return Relation.NONE


_default_resolver = DefenseResolver()


def defense_of(state: CharacterState, damage_type: str) -> Relation:
    """Read-only query for the relation of ``state`` to ``damage_type``.

    Example:
        >>> defense_of(briv, "fire")
        <Relation.IMMUNITY: 'immunity'>
    """
    return _default_resolver.resolve(state, damage_type)


__all__ = [
    "DefenseResolver",
    "defense_of",
]
