"""Equip / unequip transitions and their effect on HP."""

from __future__ import annotations

from dataclasses import dataclass, field

from hp_manager.core.logging import get_logger
from hp_manager.engine.modifiers import ModifierEngine
from hp_manager.models.character import CharacterState, Item


logger = get_logger(__name__)


@dataclass
class EquipmentResult:
    """Outcome of an equipment pass.

    Attributes:
        state: The mutated character.
        changed: Names of items whose equipped flag actually flipped.
        hp_delta: Net change applied to maximum and current HP.
    """

    state: CharacterState
    changed: list[str] = field(default_factory=list)
    hp_delta: int = 0

    @property
    def applied(self) -> bool:
        return bool(self.changed)


class EquipmentEngine:
    """Per-item state machine over ``Item.equipped``.

    ``equip`` only fires for unequipped items and ``unequip`` only for
    equipped ones, so repeating a transition is a no-op. Each item's HP
    delta is computed on its own and applied immediately to both
    ``modified_hit_points`` and ``current_hit_points``.
    """

    def __init__(self, modifier_engine: ModifierEngine | None = None) -> None:
        self.modifier_engine = modifier_engine or ModifierEngine()

    def equip_item(self, state: CharacterState, item: Item) -> int:
        """Equip a single item. Returns the HP delta applied (0 if already equipped)."""
        if item.equipped:
            return 0
        item.equipped = True
        delta = self.modifier_engine.compute_hp_delta(item, state)
        state.modified_hit_points += delta
        state.current_hit_points += delta
        logger.info("Equipped item", item=item.name, hp_delta=delta)
        return delta

    def unequip_item(self, state: CharacterState, item: Item) -> int:
        """Unequip a single item. Returns the (non-negative) HP delta removed."""
        if not item.equipped:
            return 0
        item.equipped = False
        delta = self.modifier_engine.compute_hp_delta(item, state)
        state.modified_hit_points -= delta
        state.current_hit_points -= delta
        logger.info("Unequipped item", item=item.name, hp_delta=-delta)
        return delta

    def apply_equipment(self, state: CharacterState, equip: bool) -> EquipmentResult:
        """Move every item in the inventory towards the requested state.

        Args:
            state: Character to mutate in place.
            equip: True to equip everything, False to unequip everything.

        Returns:
            EquipmentResult with the mutated state and the items that changed.
        """
        result = EquipmentResult(state=state)

        for item in state.items:
            if item.equipped == equip:
                continue
            if equip:
                result.hp_delta += self.equip_item(state, item)
            else:
                result.hp_delta -= self.unequip_item(state, item)
            result.changed.append(item.name)

        logger.debug(
            "Equipment pass complete",
            equip=equip,
            changed=len(result.changed),
            modified_hp=state.modified_hit_points,
            current_hp=state.current_hit_points,
        )
        return result


_default_engine = EquipmentEngine()


def equip(state: CharacterState, equip: bool = True) -> CharacterState:
    """Equip (or unequip) every item and return the mutated state."""
    return _default_engine.apply_equipment(state, equip).state


__all__ = [
    "EquipmentEngine",
    "EquipmentResult",
    "equip",
]
