"""Dice rolling for demo damage amounts.

Rolls are a cosmetic input generator: they produce amounts that are then
fed to the HP engine like any other number. Built on the d20 library.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

import d20

from hp_manager.core.exceptions import DiceRollError
from hp_manager.core.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class DiceRoll:
    """Result of rolling a dice expression.

    Attributes:
        expression: The expression that was rolled.
        total: Total including modifiers.
        dice: Individual kept die results.
        modifier: Static modifier (total minus the dice).
    """

    expression: str
    total: int
    dice: list[int]
    modifier: int


class DiceRoller:
    """Rolls dice expressions such as ``"2d6+3"``.

    Example:
        >>> roller = DiceRoller(seed=42)
        >>> roller.roll("1d8").total
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls.
        """
        self._seed = seed
        if seed is not None:
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    def roll(self, expression: str) -> DiceRoll:
        """Roll a dice expression.

        Args:
            expression: Dice expression (e.g., '1d8', '2d6+3').

        Returns:
            DiceRoll with the total and individual dice.

        Raises:
            DiceRollError: If the expression is empty or invalid.
        """
        if not expression or not expression.strip():
            raise DiceRollError("Empty dice expression", expression=expression)

        try:
            result = d20.roll(expression)
        except d20.RollError as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=expression,
            ) from exc

        dice_values = self._extract_dice_values(result.expr)
        rolled = DiceRoll(
            expression=expression,
            total=result.total,
            dice=dice_values,
            modifier=result.total - sum(dice_values),
        )
        logger.debug("Dice rolled", expression=expression, total=rolled.total)
        return rolled

    def _extract_dice_values(self, expr: Any) -> list[int]:
        """Collect kept die values from a d20 expression tree."""
        values: list[int] = []

        def traverse(node: Any) -> None:
            if isinstance(node, d20.Dice):
                for die in node.values:
                    if die.kept:
                        values.append(die.number)
            elif hasattr(node, "children"):
                for child in node.children:
                    traverse(child)

        traverse(expr)
        return values

    def roll_total(self, num: int, sides: int, modifier: int = 0) -> int:
        """Roll ``num`` dice with ``sides`` sides and add ``modifier``.

        Raises:
            DiceRollError: If ``num`` or ``sides`` is not positive.
        """
        if num < 1 or sides < 1:
            raise DiceRollError(
                "Dice count and sides must be positive",
                details={"num": num, "sides": sides},
            )
        sign = "+" if modifier >= 0 else "-"
        return self.roll(f"{num}d{sides}{sign}{abs(modifier)}").total


_default_roller: DiceRoller | None = None


def roll(expression: str) -> DiceRoll:
    """Convenience function to roll dice with a shared roller."""
    global _default_roller  # noqa: PLW0603
    if _default_roller is None:
        _default_roller = DiceRoller()
    return _default_roller.roll(expression)


__all__ = [
    "DiceRoll",
    "DiceRoller",
    "roll",
]
