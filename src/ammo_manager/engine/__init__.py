"""Dice for Fallout 2d20 roll messages.

Submodules:
    dice: Combat/skill dice via the d20 library and roll message builders.
"""

from __future__ import annotations

from ammo_manager.engine.dice import (
    COMBAT_DIE_EXPRESSION,
    CombatDiceRoller,
    attack_message,
    build_roll_message,
    combat_damage,
    damage_message,
)


__all__ = [
    "COMBAT_DIE_EXPRESSION",
    "CombatDiceRoller",
    "combat_damage",
    "build_roll_message",
    "attack_message",
    "damage_message",
]
