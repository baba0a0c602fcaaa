"""Session controller: keyed load / mutate / save around the engine.

Each call runs one full cycle against the store: fetch the snapshot (loading
it from source on first use), apply one engine action, persist the result.
The engine never touches the store itself.
"""

from __future__ import annotations

from typing import Any

from hp_manager.core.config import get_settings
from hp_manager.core.logging import bind_context, configure_logging_from_settings, get_logger
from hp_manager.engine.dice import DiceRoller
from hp_manager.engine.equipment import EquipmentEngine
from hp_manager.engine.hp import HPActionResult, HPEngine
from hp_manager.ingestion.character_loader import CharacterLoader
from hp_manager.models.character import CharacterState
from hp_manager.models.enums import DamageType
from hp_manager.storage import create_store
from hp_manager.storage.base import CharacterStore, normalize_key


logger = get_logger(__name__)


class CharacterSession:
    """Keyed entry point for presentation layers.

    Keys are normalized (trimmed, lower-cased) once, and the normalized key
    doubles as the loader's source id: ``"Briv.json"`` is stored under
    ``"briv.json"`` and loaded from the ``briv.json`` record.

    Args:
        store: Snapshot store. Access per key must be serialized by the caller.
        loader: Source loader used on first access and on reload.
        hp_engine: Engine for HP actions.
        equipment_engine: Engine for equip / unequip.
        dice_roller: Roller for demo damage amounts.

    Example:
        >>> session = CharacterSession(MemoryStore(), CharacterLoader("data"))
        >>> session.update_hp("briv.json", "fire", 6)
    """

    def __init__(
        self,
        store: CharacterStore,
        loader: CharacterLoader | None = None,
        *,
        hp_engine: HPEngine | None = None,
        equipment_engine: EquipmentEngine | None = None,
        dice_roller: DiceRoller | None = None,
    ) -> None:
        self.store = store
        self.loader = loader or CharacterLoader()
        self.hp_engine = hp_engine or HPEngine()
        self.equipment_engine = equipment_engine or EquipmentEngine()
        self.dice_roller = dice_roller or DiceRoller()

    def _key(self, key: str | None) -> str:
        resolved = normalize_key(key or get_settings().engine.default_character_key)
        bind_context(character_key=resolved)
        return resolved

    def get(self, key: str | None = None, *, reload: bool = False) -> CharacterState:
        """Return the stored character, loading it from source when needed.

        Args:
            key: Character key; defaults to the configured default key.
            reload: Discard the stored snapshot and load fresh from source.

        Raises:
            CharacterLoadError: If loading is needed and fails. The store is
                left untouched in that case.
        """
        key = self._key(key)

        if not reload:
            state = self.store.get(key)
            if state is not None:
                logger.debug("Using stored character", name=state.name)
                return state

        state = self.loader.load(key)
        self.store.put(key, state)
        logger.info("Character loaded into session", name=state.name, reload=reload)
        return state

    def equip(self, key: str | None = None, equip: bool = True) -> CharacterState:
        """Equip or unequip every item and return the stored character."""
        key = self._key(key)
        state = self.get(key)
        result = self.equipment_engine.apply_equipment(state, equip)
        if result.applied:
            self.store.put(key, result.state)
        return result.state

    def update_hp(
        self,
        key: str | None = None,
        action_type: str | None = None,
        value: Any = 0,
    ) -> HPActionResult:
        """Apply one HP action; persist only if it changed the character.

        Args:
            key: Character key; defaults to the configured default key.
            action_type: ``"tempHP"``, ``"healing"`` or a damage type.
                Defaults to the configured default action (healing).
            value: Raw amount, normalized by the engine.
        """
        key = self._key(key)
        action_type = action_type or get_settings().engine.default_action_type
        state = self.get(key)
        result = self.hp_engine.apply(state, action_type, value)
        if result.applied:
            self.store.put(key, result.state)
        return result

    def roll_damage(
        self,
        key: str | None = None,
        damage_type: str = DamageType.BLUDGEONING,
        expression: str | None = None,
    ) -> HPActionResult:
        """Roll a demo damage amount and apply it as ``damage_type`` damage.

        Raises:
            DiceRollError: If the expression cannot be rolled.
        """
        expression = expression or get_settings().engine.demo_damage_dice
        rolled = self.dice_roller.roll(expression)
        logger.info("Rolled demo damage", expression=expression, total=rolled.total)
        return self.update_hp(key, damage_type, rolled.total)

    def delete(self, key: str | None = None) -> bool:
        """Clear the stored snapshot. The next access reloads from source."""
        key = self._key(key)
        return self.store.delete(key)


def create_session(loader: CharacterLoader | None = None) -> CharacterSession:
    """Build a session from settings for a presentation layer to drive.

    Configures logging from ``log_level`` / ``log_json`` / ``debug`` and picks
    the store backend from ``storage.store_backend``.
    """
    configure_logging_from_settings()
    session = CharacterSession(create_store(), loader)
    logger.info("Session created", store=type(session.store).__name__)
    return session


__all__ = ["CharacterSession", "create_session"]
