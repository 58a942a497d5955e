"""Event interpretation and ammunition reconciliation.

Submodules:
    normalizer: Fuzzy ammunition name matching.
    sheet: Typed accessor over a character's attributes.
    notifications: Chat template notifications.
    locator: Weapon and ammo row lookup by name.
    shots: Rounds consumed by a damage roll.
    reconciler: Gear/weapon count propagation.
    handlers: Roll and attribute-change entry points.
"""

from __future__ import annotations

from ammo_manager.sync.handlers import AttributeChangeHandler, RollHandler, is_unchanged
from ammo_manager.sync.locator import ItemLocator
from ammo_manager.sync.normalizer import names_match, normalize
from ammo_manager.sync.notifications import Notifier, TemplateMessage
from ammo_manager.sync.reconciler import Reconciler
from ammo_manager.sync.sheet import CharacterSheet
from ammo_manager.sync.shots import compute_shots_spent, count_combat_dice


__all__ = [
    "normalize",
    "names_match",
    "CharacterSheet",
    "TemplateMessage",
    "Notifier",
    "ItemLocator",
    "count_combat_dice",
    "compute_shots_spent",
    "Reconciler",
    "RollHandler",
    "AttributeChangeHandler",
    "is_unchanged",
]
