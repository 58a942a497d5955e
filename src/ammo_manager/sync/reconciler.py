"""Bidirectional sync between canonical ammo rows and weapon copies.

The gear ammo row is the hub and weapon rows are its spokes. A change on
the hub fans out to every matching weapon; a change on a weapon first
updates the hub, then fans out from it. Weapons are never synced leaf to
leaf, which bounds every propagation to two hops.

Writes made here raise change events that the host redelivers to the
change handler. The equal-value checks below turn those redeliveries
into no-ops; the handler's own equal-value guard is what stops the loop.
"""

from __future__ import annotations

from ammo_manager.core.config import SheetSettings
from ammo_manager.core.logging import get_logger
from ammo_manager.sync.locator import ItemLocator
from ammo_manager.sync.normalizer import names_match
from ammo_manager.sync.sheet import CharacterSheet


logger = get_logger(__name__)


class Reconciler:
    """Propagates ammunition counts between gear and weapon rows."""

    def __init__(self, locator: ItemLocator, settings: SheetSettings) -> None:
        self.locator = locator
        self.settings = settings

    def propagate_from_canonical(
        self,
        sheet: CharacterSheet,
        ammo_type: str,
        new_quantity: int,
    ) -> list[str]:
        """Set the count of every weapon using exactly ``ammo_type``.

        Counts are written even when already equal.

        Returns:
            Row ids of the weapons written.
        """
        s = self.settings
        updated: list[str] = []
        candidates = [row_id for row_id, value in sheet.weapon_ammo_types() if value == ammo_type]
        for row_id in candidates:
            # Re-read the row: a stale or duplicated ammo type attribute can match the filter.
            weapon = sheet.weapon(row_id)
            if weapon.ammo_type != ammo_type:
                continue
            previous = sheet.write(s.weapons_section, row_id, s.weapon_ammo_field, new_quantity)
            if previous is None:
                continue
            updated.append(row_id)
            logger.info(
                "Weapon ammo synced from gear",
                character=sheet.name,
                weapon=weapon.name,
                previous=previous,
                current=new_quantity,
            )
        return updated

    def propagate_from_weapon(
        self,
        sheet: CharacterSheet,
        weapon_row_id: str,
        target_count: int,
    ) -> list[str]:
        """Push a weapon's edited count to its gear row and sibling weapons.

        Returns:
            Row ids of the weapons written (empty when the gear row already
            held ``target_count``).

        Raises:
            ItemNotFoundError: If no gear row matches the weapon's ammo type.
        """
        s = self.settings
        weapon = sheet.weapon(weapon_row_id)
        if not weapon.uses_ammo:
            logger.debug("Weapon uses no ammo, nothing to sync", weapon=weapon.name)
            return []

        ammo_row_id = self.locator.locate_ammo(sheet, weapon.ammo_type)
        ammo = sheet.ammo(ammo_row_id)
        if ammo.quantity == target_count:
            return []

        previous = sheet.write(s.ammo_section, ammo_row_id, s.ammo_quantity_field, target_count)
        if previous is None:
            return []
        logger.info(
            "Gear ammo synced from weapon",
            character=sheet.name,
            ammo=ammo.name,
            weapon=weapon.name,
            previous=previous,
            current=target_count,
        )

        updated = self.propagate_from_canonical(sheet, weapon.ammo_type, target_count)
        # Siblings spelling the ammo type differently only match fuzzily.
        updated.extend(self.propagate_from_gear(sheet, ammo_row_id, target_count))
        return updated

    def propagate_from_gear(
        self,
        sheet: CharacterSheet,
        ammo_row_id: str,
        target_count: int,
    ) -> list[str]:
        """Set every weapon whose ammo type fuzzily matches the gear row.

        Weapons already holding ``target_count`` are skipped.

        Returns:
            Row ids of the weapons written.
        """
        s = self.settings
        ammo = sheet.ammo(ammo_row_id)
        updated: list[str] = []
        for row_id, ammo_type in sheet.weapon_ammo_types():
            if not ammo_type or not names_match(ammo_type, ammo.name):
                continue
            if sheet.count(s.weapons_section, row_id, s.weapon_ammo_field) == target_count:
                continue
            previous = sheet.write(s.weapons_section, row_id, s.weapon_ammo_field, target_count)
            if previous is None:
                continue
            updated.append(row_id)
            logger.info(
                "Weapon ammo synced from gear",
                character=sheet.name,
                weapon=sheet.weapon(row_id).name,
                ammo=ammo.name,
                previous=previous,
                current=target_count,
            )
        return updated


__all__ = [
    "Reconciler",
]
