"""Resolution of weapon and ammo rows by name."""

from __future__ import annotations

from ammo_manager.core.config import SheetSettings
from ammo_manager.core.exceptions import ItemNotFoundError
from ammo_manager.core.logging import get_logger
from ammo_manager.sync.normalizer import names_match, normalize
from ammo_manager.sync.notifications import Notifier
from ammo_manager.sync.sheet import CharacterSheet


logger = get_logger(__name__)


class ItemLocator:
    """Find the row of a named item in a repeating section.

    A failed lookup tells the player in chat which term was searched
    before raising, since the usual cause is a naming mismatch between
    the weapons and gear sections that only the player can fix.
    """

    def __init__(self, notifier: Notifier, settings: SheetSettings) -> None:
        self.notifier = notifier
        self.settings = settings

    def locate_row(
        self,
        sheet: CharacterSheet,
        item_name: str,
        section: str,
        name_field: str,
        *,
        exact: bool,
    ) -> str:
        """Return the row id of the first row whose name matches.

        Args:
            sheet: Character sheet to search.
            item_name: Name to look for.
            section: Repeating section to scan.
            name_field: Field holding the row's name.
            exact: Require case-insensitive equality instead of fuzzy
                containment.

        Returns:
            Row identifier of the first match.

        Raises:
            ItemNotFoundError: If no row matches, after the diagnostic
                chat notification has been sent.
        """
        for key, attribute in sheet.field_attributes(section, name_field):
            if names_match(item_name, attribute.current, exact=exact):
                logger.debug(
                    "Item located",
                    item=item_name,
                    section=section,
                    row_id=key.row_id,
                    exact=exact,
                )
                return key.row_id

        search_name = normalize(item_name, exact=exact)
        self.notifier.item_not_found(sheet.name, search_name)
        raise ItemNotFoundError(
            "Item not found",
            item_name=search_name,
            section=section,
            character_name=sheet.name,
        )

    def locate_weapon(self, sheet: CharacterSheet, weapon_name: str) -> str:
        """Weapon names are unique within a sheet and matched exactly."""
        return self.locate_row(
            sheet,
            weapon_name,
            self.settings.weapons_section,
            self.settings.weapon_name_field,
            exact=True,
        )

    def locate_ammo(self, sheet: CharacterSheet, ammo_type: str) -> str:
        """Ammo types are matched fuzzily against gear names."""
        return self.locate_row(
            sheet,
            ammo_type,
            self.settings.ammo_section,
            self.settings.ammo_name_field,
            exact=False,
        )


__all__ = [
    "ItemLocator",
]
