"""Pydantic V2 schemas for the ammo manager.

Submodules:
    enums: Sheet types, host event names, roll kinds.
    sheet: Attribute keys, store entities and typed weapon/ammo row views.
    events: Roll messages and attribute snapshots delivered by the host.
"""

from __future__ import annotations

from ammo_manager.models.enums import CountField, EventName, RollKind, SheetType
from ammo_manager.models.events import AttributeSnapshot, InlineRoll, RollMessage
from ammo_manager.models.sheet import (
    AmmoRow,
    Attribute,
    AttributeKey,
    Character,
    WeaponRow,
    parse_count,
)


__all__ = [
    # Enumerations
    "SheetType",
    "EventName",
    "RollKind",
    "CountField",
    # Events
    "InlineRoll",
    "RollMessage",
    "AttributeSnapshot",
    # Sheet
    "AttributeKey",
    "Attribute",
    "Character",
    "WeaponRow",
    "AmmoRow",
    "parse_count",
]
