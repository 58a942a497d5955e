"""Fallout 2d20 dice and roll message construction.

Rolls combat dice with the d20 library and assembles roll template
messages shaped like the ones the hosted sheet posts, so the handlers
can be driven end to end without the host.
"""

from __future__ import annotations

import random

import d20

from ammo_manager.core.config import RollSettings, get_settings
from ammo_manager.core.exceptions import DiceRollError
from ammo_manager.core.logging import get_logger
from ammo_manager.models.events import InlineRoll, RollMessage


logger = get_logger(__name__)

COMBAT_DIE_EXPRESSION = "1d6cs7"
"""Expression the sheet uses for one combat die (no face counts as critical)."""

SKILL_DIE_EXPRESSION = "1d20cs1"
"""Expression the sheet uses for one skill test die."""

COMBAT_DIE_DAMAGE = {1: 1, 2: 2, 3: 0, 4: 0, 5: 1, 6: 1}
"""Damage of each combat die face; 5 and 6 also trigger an effect."""


class CombatDiceRoller:
    """Rolls combat and skill dice as inline roll records.

    Example:
        >>> roller = CombatDiceRoller(seed=7)
        >>> rolls = roller.roll_combat_dice(3)
        >>> [r.expression for r in rolls]
        ['1d6cs7', '1d6cs7', '1d6cs7']
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the roller.

        Args:
            seed: Optional random seed for reproducible rolls.
        """
        self._seed = seed
        if seed is not None:
            random.seed(seed)

    def _roll_die(self, sides: int, expression: str) -> InlineRoll:
        try:
            result = d20.roll(f"1d{sides}")
        except d20.RollError as exc:
            raise DiceRollError(f"Invalid die: {exc}", expression=expression) from exc
        return InlineRoll(expression=expression, result=result.total)

    def roll_combat_dice(self, count: int) -> list[InlineRoll]:
        """Roll ``count`` combat dice.

        Raises:
            DiceRollError: If ``count`` is negative.
        """
        if count < 0:
            raise DiceRollError("Cannot roll a negative number of dice", expression=f"{count}cd")
        rolls = [self._roll_die(6, COMBAT_DIE_EXPRESSION) for _ in range(count)]
        logger.debug("Combat dice rolled", count=count, faces=[r.result for r in rolls])
        return rolls

    def roll_skill_dice(self, count: int = 2) -> list[InlineRoll]:
        if count < 0:
            raise DiceRollError("Cannot roll a negative number of dice", expression=f"{count}d20")
        return [self._roll_die(20, SKILL_DIE_EXPRESSION) for _ in range(count)]


def combat_damage(rolls: list[InlineRoll]) -> int:
    """Total damage shown by combat dice faces."""
    return sum(COMBAT_DIE_DAMAGE.get(int(r.result), 0) for r in rolls)


def build_roll_message(
    template: str,
    sheet_name: str,
    weapon_name: str | None,
    rolls: list[InlineRoll],
    *,
    who: str | None = None,
    extra_markers: dict[str, str] | None = None,
    settings: RollSettings | None = None,
) -> RollMessage:
    """Assemble a roll template message.

    Args:
        template: Roll template tag.
        sheet_name: Character name put in the sheet name marker.
        weapon_name: Weapon name marker, omitted when None.
        rolls: Inline roll records.
        who: Speaker, defaults to the character name.
        extra_markers: Additional ``{{key=value}}`` markers.
        settings: Roll recognition settings, defaults to the app settings.
    """
    settings = settings or get_settings().roll
    markers = {settings.sheet_name_marker: sheet_name}
    if weapon_name is not None:
        markers[settings.weapon_name_marker] = weapon_name
    markers.update(extra_markers or {})
    content = " ".join(f"{{{{{key}={value}}}}}" for key, value in markers.items())
    return RollMessage(
        who=who or sheet_name,
        content=content,
        rolltemplate=template,
        inlinerolls=rolls,
    )


def attack_message(
    sheet_name: str,
    weapon_name: str,
    *,
    roller: CombatDiceRoller | None = None,
    settings: RollSettings | None = None,
) -> RollMessage:
    """An attack roll (2d20 skill test) with ``weapon_name``."""
    settings = settings or get_settings().roll
    roller = roller or CombatDiceRoller()
    return build_roll_message(
        settings.attack_template,
        sheet_name,
        weapon_name,
        roller.roll_skill_dice(2),
        settings=settings,
    )


def damage_message(
    sheet_name: str,
    weapon_name: str,
    dice_count: int,
    *,
    additional: bool = False,
    roller: CombatDiceRoller | None = None,
    settings: RollSettings | None = None,
) -> RollMessage:
    """A damage roll of ``dice_count`` combat dice with ``weapon_name``.

    Args:
        sheet_name: Character name.
        weapon_name: Weapon used.
        dice_count: Combat dice rolled, base damage plus extra dice.
        additional: The player asked for additional dice on a roll that
            was already processed; the fresh-roll marker is left out.
        roller: Dice roller, a fresh one by default.
        settings: Roll recognition settings, defaults to the app settings.
    """
    settings = settings or get_settings().roll
    roller = roller or CombatDiceRoller()
    rolls = roller.roll_combat_dice(dice_count)
    markers = {"damage": str(combat_damage(rolls))}
    if not additional:
        markers[settings.fresh_roll_marker] = "1"
    return build_roll_message(
        settings.damage_template,
        sheet_name,
        weapon_name,
        rolls,
        extra_markers=markers,
        settings=settings,
    )


__all__ = [
    "COMBAT_DIE_EXPRESSION",
    "SKILL_DIE_EXPRESSION",
    "COMBAT_DIE_DAMAGE",
    "CombatDiceRoller",
    "combat_damage",
    "build_roll_message",
    "attack_message",
    "damage_message",
]
