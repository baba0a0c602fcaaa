"""Character snapshot models.

CharacterState is the single source of truth for one character's vitals,
equipment and defenses. The engine mutates it in place; loaders and stores
only ever exchange whole snapshots.

Stored records use camelCase keys (``hitPoints``, ``tempHitPoints``,
``affectedObject``...). Every model accepts those aliases as well as the
snake_case field names and serializes back to the camelCase shape.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from hp_manager.models.enums import Relation


class SnapshotModel(BaseModel):
    """Base class for every part of a character snapshot."""

    model_config = ConfigDict(
        frozen=False,  # The engine mutates snapshots in place
        validate_assignment=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class CharacterClass(SnapshotModel):
    """One class entry. Informational only."""

    name: str
    hit_dice_value: int = Field(ge=1, description="Hit die size, e.g. 10 for d10")
    class_level: int = Field(ge=1)


class ItemModifier(SnapshotModel):
    """Declarative stat modifier carried by an item.

    Attributes:
        affected_object: Category being modified, e.g. "stats".
        affected_value: Attribute within the category, e.g. "constitution".
        value: Magnitude of the modifier.
    """

    affected_object: str
    affected_value: str
    value: int


class Item(SnapshotModel):
    """An inventory item exclusively owned by its character."""

    name: str
    modifier: ItemModifier
    # Legacy records store 0/1 here; pydantic coerces them to bool.
    equipped: bool = False


class Defense(SnapshotModel):
    """A defensive relation against one named damage type."""

    damage_type: str = Field(alias="type")
    relation: Relation = Field(alias="defense")

    @field_validator("relation", mode="before")
    @classmethod
    def normalize_relation(cls, value: Any) -> Any:
        """Accept relation strings regardless of case or padding."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


class CharacterState(SnapshotModel):
    """Authoritative snapshot of a single character.

    Attributes:
        name: Character name.
        level: Character level (>= 1).
        base_hit_points: Unmodified maximum HP from source data.
        modified_hit_points: Maximum HP after equipment modifiers.
        current_hit_points: Current HP. Damage may take it below zero.
        temp_hit_points: Damage-absorbing pool, separate from maximum HP.
        classes: Class entries (informational).
        stats: Stat name to score.
        items: Inventory in stored order.
        defenses: Defensive relations; the first entry for a type wins.
    """

    name: str
    level: int = Field(ge=1)
    base_hit_points: int = Field(ge=0, alias="hitPoints")
    modified_hit_points: int = Field(default=0, ge=0)
    current_hit_points: int = 0
    temp_hit_points: int = Field(default=0, ge=0)
    classes: list[CharacterClass] = Field(default_factory=list)
    stats: dict[str, int] = Field(default_factory=dict)
    items: list[Item] = Field(default_factory=list)
    defenses: list[Defense] = Field(default_factory=list)

    @property
    def effective_hit_points(self) -> int:
        """Current plus temporary HP."""
        return self.current_hit_points + self.temp_hit_points

    @property
    def active_hp_bonus(self) -> int:
        """Maximum HP contributed by equipped items."""
        return self.modified_hit_points - self.base_hit_points

    @property
    def is_down(self) -> bool:
        return self.current_hit_points <= 0

    @property
    def equipped_items(self) -> list[Item]:
        return [item for item in self.items if item.equipped]

    def to_snapshot(self) -> dict[str, Any]:
        """Serialize to the persisted camelCase snapshot shape."""
        return self.model_dump(mode="json", by_alias=True)

    def to_snapshot_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> Self:
        """Rebuild a state from a persisted snapshot, keeping its HP values as-is."""
        return cls.model_validate(data)

    def to_summary(self) -> str:
        """One-line human readable summary."""
        summary = (
            f"{self.name} (Lv {self.level}) HP {self.current_hit_points}/"
            f"{self.modified_hit_points}"
        )
        if self.temp_hit_points:
            summary += f" +{self.temp_hit_points} temp"
        return summary


__all__ = [
    "SnapshotModel",
    "CharacterClass",
    "ItemModifier",
    "Item",
    "Defense",
    "CharacterState",
]
