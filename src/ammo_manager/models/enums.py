"""Enumeration types for the ammo manager."""

from __future__ import annotations

from enum import StrEnum


class SheetType(StrEnum):
    """Classification of a character sheet.

    Only player-character sheets carry ammunition tracking; every handler
    ignores the others.
    """

    PC = "pc"
    NPC = "npc"


class EventName(StrEnum):
    """Events published by the hosting environment."""

    READY = "ready"
    """Host finished loading; handlers may start processing."""

    CHAT_MESSAGE = "chat:message"
    """A chat or roll template message was posted."""

    CHANGE_ATTRIBUTE = "change:attribute"
    """An attribute's current value changed."""


class RollKind(StrEnum):
    """Roll template messages the roll handler reacts to."""

    ATTACK = "attack"
    DAMAGE = "damage"


class CountField(StrEnum):
    """Tracked ammunition count fields."""

    WEAPON_AMMO = "weapon_ammo"
    """Denormalized count on a weapon row."""

    GEAR_QUANTITY = "gear_quantity"
    """Canonical quantity on an ammo gear row."""


__all__ = [
    "SheetType",
    "EventName",
    "RollKind",
    "CountField",
]
