"""Ammunition consumed by a single damage roll.

Fallout 2d20 weapons roll their damage rating in combat dice and may add
one extra die per point of fire rate, each extra die costing one more
round (two for Gatling weapons). The damage roll message does not say how
many rounds were fired, so the count is recovered from the number of
combat dice in the roll.
"""

from __future__ import annotations

import math
import re

from ammo_manager.core.config import RollSettings, get_settings
from ammo_manager.core.logging import get_logger
from ammo_manager.models.events import RollMessage


logger = get_logger(__name__)


def count_combat_dice(message: RollMessage, pattern: str) -> int:
    """Number of sub-rolls whose expression matches the combat die pattern."""
    combat_die = re.compile(pattern)
    return sum(1 for roll in message.inlinerolls or [] if combat_die.search(roll.expression))


def compute_shots_spent(
    message: RollMessage,
    weapon_damage: int,
    fire_rate: int,
    is_special_class: bool,
    *,
    settings: RollSettings | None = None,
) -> int:
    """Compute the rounds a damage roll consumed.

    Args:
        message: The damage roll message.
        weapon_damage: Damage rating of the weapon (base dice count).
        fire_rate: Fire rate of the weapon; 0 for single-shot weapons.
        is_special_class: Weapon spends two rounds per extra die (Gatling).
        settings: Roll recognition settings, defaults to the app settings.

    Returns:
        Rounds spent, never negative. 0 means the roll consumed nothing.

    Example:
        A weapon with damage 2 and fire rate 3 rolling 5 combat dice on a
        fresh roll spends ``1 + min(5 - 2, 3) = 4`` rounds.
    """
    if fire_rate == 0:
        return 1

    settings = settings or get_settings().roll
    dice_count = count_combat_dice(message, settings.combat_die_pattern)

    extra_dice = dice_count - weapon_damage
    if is_special_class:
        extra_dice = math.trunc(extra_dice / 2)

    # Fire rate caps the extra rounds; damage boosts from perks add dice without ammo.
    shot_count = 1 + min(extra_dice, fire_rate)

    # "Roll additional dice" re-renders base and bonus dice; the base shot was already paid.
    is_additional_roll = not message.has_marker(settings.fresh_roll_marker)
    if is_additional_roll:
        shot_count -= 1

    shots = max(shot_count, 0)
    logger.debug(
        "Shots computed",
        dice=dice_count,
        damage=weapon_damage,
        fire_rate=fire_rate,
        special=is_special_class,
        additional=is_additional_roll,
        shots=shots,
    )
    return shots


__all__ = [
    "count_combat_dice",
    "compute_shots_spent",
]
