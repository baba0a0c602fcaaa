"""Tests for HP transitions: temp HP, healing and typed damage."""

from __future__ import annotations

import pytest

from hp_manager.engine.hp import HPEngine, apply_hp, normalize_amount
from hp_manager.models.character import CharacterState
from hp_manager.models.enums import ActionOutcome, Relation


@pytest.fixture
def engine() -> HPEngine:
    return HPEngine()


class TestNormalizeAmount:
    """Tests for amount preprocessing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (5, 5),
            (2.9, 2),
            (-5, 0),
            (-0.5, 0),
            (0, 0),
            ("7", 7),
            (" 3.7 ", 3),
            ("abc", 0),
            (None, 0),
            (float("nan"), 0),
            (float("inf"), 0),
        ],
    )
    def test_normalization(self, raw: object, expected: int) -> None:
        """Amounts become max(floor(raw), 0); non-numbers become 0."""
        assert normalize_amount(raw) == expected


class TestTempHP:
    """Tests for temporary HP grants."""

    def test_grant_sets_temp(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """A grant on zero temp HP sets the pool."""
        result = engine.apply(sample_character, "tempHP", 10)

        assert result.outcome == ActionOutcome.APPLIED
        assert sample_character.temp_hit_points == 10

    def test_grants_do_not_stack(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """Only the larger of current and incoming temp HP survives."""
        engine.apply(sample_character, "tempHP", 10)
        result = engine.apply(sample_character, "tempHP", 4)

        assert result.outcome == ActionOutcome.NO_OP
        assert sample_character.temp_hit_points == 10

    def test_running_maximum(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """Temp HP tracks the running maximum of all grants."""
        running = 0
        for grant in [3, 8, 2, 8, 11, 0, 5]:
            engine.apply(sample_character, "tempHP", grant)
            running = max(running, grant)
            assert sample_character.temp_hit_points == running

    def test_zero_grant_is_noop(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """A zero (or negative) grant changes nothing."""
        result = engine.apply(sample_character, "tempHP", -4)

        assert result.outcome == ActionOutcome.NO_OP
        assert result.amount == 0
        assert sample_character.temp_hit_points == 0

    def test_temp_does_not_touch_current(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Temp HP is a separate pool."""
        engine.apply(sample_character, "tempHP", 10)

        assert sample_character.current_hit_points == 30
        assert sample_character.modified_hit_points == 30


class TestHealing:
    """Tests for healing."""

    def test_heal_after_damage(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """Healing restores HP."""
        sample_character.current_hit_points = 10
        result = engine.apply(sample_character, "healing", 5)

        assert result.applied
        assert sample_character.current_hit_points == 15

    def test_heal_capped_at_modified_max(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Healing cannot exceed modified maximum HP."""
        sample_character.current_hit_points = 25
        engine.apply(sample_character, "healing", 100)

        assert sample_character.current_hit_points == 30

    @pytest.mark.parametrize("amount", [0, 1, 4, 5, 6, 50])
    def test_healing_ceiling(
        self, engine: HPEngine, sample_character: CharacterState, amount: int
    ) -> None:
        """current' == min(current + amount, modified) for any amount."""
        sample_character.current_hit_points = 25
        engine.apply(sample_character, "healing", amount)

        assert sample_character.current_hit_points == min(25 + amount, 30)
        assert sample_character.current_hit_points <= sample_character.modified_hit_points

    def test_heal_at_full_hp_is_noop(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Healing at full HP reports a no-op."""
        result = engine.apply(sample_character, "healing", 5)

        assert result.outcome == ActionOutcome.NO_OP
        assert sample_character.current_hit_points == 30

    def test_heal_from_negative(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """Healing counts up from below zero."""
        sample_character.current_hit_points = -4
        engine.apply(sample_character, "healing", 6)

        assert sample_character.current_hit_points == 2

    def test_negative_and_fractional_amounts(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """healing(-5) acts like healing(0); healing(2.9) like healing(2)."""
        sample_character.current_hit_points = 10

        result = engine.apply(sample_character, "healing", -5)
        assert result.outcome == ActionOutcome.NO_OP
        assert sample_character.current_hit_points == 10

        engine.apply(sample_character, "healing", 2.9)
        assert sample_character.current_hit_points == 12


class TestDamage:
    """Tests for typed damage."""

    def test_plain_damage(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """Damage with no defense applies in full."""
        result = engine.apply(sample_character, "bludgeoning", 8)

        assert result.applied
        assert result.relation == Relation.NONE
        assert result.hp_lost == 8
        assert sample_character.current_hit_points == 22

    def test_immunity_nullifies(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """Immunity leaves current and temp HP untouched."""
        sample_character.temp_hit_points = 5
        result = engine.apply(sample_character, "fire", 50)

        assert result.outcome == ActionOutcome.NO_OP
        assert result.relation == Relation.IMMUNITY
        assert sample_character.current_hit_points == 30
        assert sample_character.temp_hit_points == 5

    def test_resistance_halves_floored(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Resistance turns 7 into exactly 3."""
        result = engine.apply(sample_character, "slashing", 7)

        assert result.effective_amount == 3
        assert sample_character.current_hit_points == 27

    def test_resistance_to_one_point_is_noop(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """1 resisted damage floors to 0 and changes nothing."""
        result = engine.apply(sample_character, "slashing", 1)

        assert result.outcome == ActionOutcome.NO_OP
        assert sample_character.current_hit_points == 30

    def test_vulnerability_doubles(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Vulnerability turns 5 into 10."""
        result = engine.apply(sample_character, "psychic", 5)

        assert result.effective_amount == 10
        assert sample_character.current_hit_points == 20

    def test_temp_absorbs_first(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """temp 5 / current 20 hit for 8 ends at temp 0 / current 17."""
        sample_character.temp_hit_points = 5
        sample_character.current_hit_points = 20

        result = engine.apply(sample_character, "bludgeoning", 8)

        assert sample_character.temp_hit_points == 0
        assert sample_character.current_hit_points == 17
        assert result.temp_absorbed == 5
        assert result.hp_lost == 3

    def test_damage_smaller_than_temp(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Damage below the temp pool only reduces temp HP."""
        sample_character.temp_hit_points = 10

        engine.apply(sample_character, "piercing", 4)

        assert sample_character.temp_hit_points == 6
        assert sample_character.current_hit_points == 30

    def test_damage_equal_to_temp(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """Damage equal to temp empties the pool and spares current HP."""
        sample_character.temp_hit_points = 6

        engine.apply(sample_character, "piercing", 6)

        assert sample_character.temp_hit_points == 0
        assert sample_character.current_hit_points == 30

    def test_vulnerability_then_temp(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Defenses scale the amount before temp HP absorbs it."""
        sample_character.temp_hit_points = 4

        engine.apply(sample_character, "psychic", 5)

        assert sample_character.temp_hit_points == 0
        assert sample_character.current_hit_points == 24

    def test_current_hp_not_clamped_at_zero(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Heavy damage leaves negative current HP in place."""
        engine.apply(sample_character, "bludgeoning", 45)

        assert sample_character.current_hit_points == -15
        assert sample_character.is_down

    def test_zero_damage_is_noop(self, engine: HPEngine, sample_character: CharacterState) -> None:
        """Zero or negative damage is a no-op."""
        result = engine.apply(sample_character, "bludgeoning", -3)

        assert result.outcome == ActionOutcome.NO_OP
        assert sample_character.current_hit_points == 30

    def test_damage_type_is_case_sensitive(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Capitalized 'Fire' does not match the stored 'fire' immunity."""
        result = engine.apply(sample_character, "Fire", 5)

        assert result.relation == Relation.NONE
        assert sample_character.current_hit_points == 25

    def test_unknown_action_falls_through_to_damage(
        self, engine: HPEngine, sample_character: CharacterState
    ) -> None:
        """Any action name other than tempHP/healing is a damage type."""
        result = engine.apply(sample_character, "heal", 5)

        assert result.applied
        assert result.is_damage
        assert sample_character.current_hit_points == 25


class TestApplyHP:
    """Tests for the module-level entry point."""

    def test_returns_same_state(self, sample_character: CharacterState) -> None:
        """apply_hp mutates and returns the same object."""
        returned = apply_hp(sample_character, "tempHP", 7)

        assert returned is sample_character
        assert returned.temp_hit_points == 7

    def test_sequence(self, sample_character: CharacterState) -> None:
        """A typical combat sequence."""
        apply_hp(sample_character, "tempHP", 10)
        apply_hp(sample_character, "slashing", 14)  # 7 after resistance
        apply_hp(sample_character, "bludgeoning", 9)  # 3 temp left, 6 spill
        apply_hp(sample_character, "healing", 2)

        assert sample_character.temp_hit_points == 0
        assert sample_character.current_hit_points == 26
