"""HP state transitions: temporary HP grants, healing and typed damage.

Every action first normalizes its amount to a non-negative integer
(``max(floor(raw), 0)``), then runs one of three branches:

- ``tempHP``: temporary HP never stacks, the larger value wins.
- ``healing``: raises current HP up to the modified maximum.
- anything else: the action name is a damage type. Defenses scale the
  amount, temporary HP absorbs first and the rest comes off current HP.

Current HP is not clamped at zero after damage; negative values are kept
so callers can decide what "below zero" means.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from hp_manager.core.logging import get_logger
from hp_manager.engine.defense import DefenseResolver
from hp_manager.models.character import CharacterState
from hp_manager.models.enums import ActionOutcome, HPActionType, Relation


logger = get_logger(__name__)


def normalize_amount(raw_amount: Any) -> int:
    """Normalize a raw input amount to ``max(floor(raw_amount), 0)``.

    Numeric strings are parsed. Anything that is not a finite number
    (``None``, ``"abc"``, NaN, infinity) becomes 0 rather than an error.

    Example:
        >>> normalize_amount(2.9)
        2
        >>> normalize_amount(-5)
        0
        >>> normalize_amount("7")
        7
    """
    if raw_amount is None:
        return 0
    if isinstance(raw_amount, str):
        try:
            raw_amount = float(raw_amount.strip())
        except ValueError:
            return 0
    try:
        number = float(raw_amount)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return max(math.floor(number), 0)


@dataclass
class HPActionResult:
    """Outcome of a single HP action.

    Attributes:
        state: The (possibly mutated) character.
        action_type: The action name as given.
        outcome: APPLIED if the state changed, NO_OP otherwise.
        amount: Normalized input amount.
        effective_amount: Amount after defenses (damage only).
        relation: Defense relation consulted (damage only).
        temp_absorbed: Damage soaked by temporary HP.
        hp_lost: Damage that reached current HP.
    """

    state: CharacterState
    action_type: str
    outcome: ActionOutcome
    amount: int
    effective_amount: int = 0
    relation: Relation | None = None
    temp_absorbed: int = 0
    hp_lost: int = 0

    @property
    def applied(self) -> bool:
        return self.outcome == ActionOutcome.APPLIED

    @property
    def is_damage(self) -> bool:
        return self.relation is not None


class HPEngine:
    """Applies heal, temp-HP and damage actions to a CharacterState.

    The engine never raises for bad input: amounts are normalized and any
    action name other than ``tempHP`` or ``healing`` is treated as a damage
    type. That fallback is intentional, so a typo such as ``"heal"`` deals
    "heal" damage instead of failing.

    Example:
        >>> engine = HPEngine()
        >>> result = engine.apply(briv, "fire", 12)
        >>> result.outcome
        <ActionOutcome.NO_OP: 'no_op'>
    """

    def __init__(self, defense_resolver: DefenseResolver | None = None) -> None:
        self.defense_resolver = defense_resolver or DefenseResolver()

    def apply(
        self,
        state: CharacterState,
        action_type: str,
        raw_amount: Any,
    ) -> HPActionResult:
        """Run one action against ``state``, mutating it in place.

        Args:
            state: Character to mutate.
            action_type: ``"tempHP"``, ``"healing"`` or a damage type name.
            raw_amount: Unnormalized amount (int, float or numeric string).

        Returns:
            HPActionResult describing what happened.
        """
        amount = normalize_amount(raw_amount)

        if action_type == HPActionType.TEMP_HP:
            return self.grant_temp_hp(state, amount)
        if action_type == HPActionType.HEALING:
            return self.heal(state, amount)
        return self.damage(state, action_type, amount)

    def grant_temp_hp(self, state: CharacterState, amount: int) -> HPActionResult:
        """Grant temporary HP. Only the larger of old and new survives."""
        action = str(HPActionType.TEMP_HP)
        if amount == 0 or amount <= state.temp_hit_points:
            return HPActionResult(state, action, ActionOutcome.NO_OP, amount)

        state.temp_hit_points = amount
        logger.info("Temp HP granted", temp_hp=state.temp_hit_points)
        return HPActionResult(state, action, ActionOutcome.APPLIED, amount)

    def heal(self, state: CharacterState, amount: int) -> HPActionResult:
        """Heal up to the modified maximum. Healing never lowers HP."""
        action = str(HPActionType.HEALING)
        if amount == 0:
            return HPActionResult(state, action, ActionOutcome.NO_OP, amount)

        healed = min(state.current_hit_points + amount, state.modified_hit_points)
        if healed <= state.current_hit_points:
            return HPActionResult(state, action, ActionOutcome.NO_OP, amount)

        state.current_hit_points = healed
        logger.info(
            "Healing applied",
            amount=amount,
            current_hp=state.current_hit_points,
            max_hp=state.modified_hit_points,
        )
        return HPActionResult(state, action, ActionOutcome.APPLIED, amount)

    def damage(self, state: CharacterState, damage_type: str, amount: int) -> HPActionResult:
        """Apply typed damage: defenses first, then temp HP, then current HP."""
        relation = self.defense_resolver.resolve(state, damage_type)
        effective = relation.apply(amount)

        if relation is not Relation.NONE:
            logger.debug(
                "Defense applies",
                character=state.name,
                damage_type=damage_type,
                relation=str(relation),
                amount=amount,
                effective_amount=effective,
            )

        if effective <= 0:
            return HPActionResult(
                state,
                damage_type,
                ActionOutcome.NO_OP,
                amount,
                effective_amount=0,
                relation=relation,
            )

        if effective >= state.temp_hit_points:
            absorbed = state.temp_hit_points
            lost = effective - absorbed
            state.current_hit_points -= lost
            state.temp_hit_points = 0
        else:
            absorbed = effective
            lost = 0
            state.temp_hit_points -= effective

        logger.info(
            "Damage applied",
            damage_type=damage_type,
            amount=effective,
            temp_hp=state.temp_hit_points,
            current_hp=state.current_hit_points,
        )
        return HPActionResult(
            state,
            damage_type,
            ActionOutcome.APPLIED,
            amount,
            effective_amount=effective,
            relation=relation,
            temp_absorbed=absorbed,
            hp_lost=lost,
        )


_default_engine = HPEngine()


def apply_hp(state: CharacterState, action_type: str, raw_amount: Any) -> CharacterState:
    """Apply one HP action and return the mutated state."""
    return _default_engine.apply(state, action_type, raw_amount).state


__all__ = [
    "HPActionResult",
    "HPEngine",
    "apply_hp",
    "normalize_amount",
]
