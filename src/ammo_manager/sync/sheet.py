"""Typed accessor over one character's attributes.

All reads parse attribute names into AttributeKey once and all numeric
reads go through ``parse_count``; the rest of the sync package addresses
values by (section, row id, field) instead of raw attribute names.
"""

from __future__ import annotations

from typing import Any

from ammo_manager.core.config import SheetSettings
from ammo_manager.core.exceptions import CharacterNotFoundError
from ammo_manager.core.logging import get_logger
from ammo_manager.host.interfaces import SheetStore
from ammo_manager.models.sheet import (
    AmmoRow,
    Attribute,
    AttributeKey,
    Character,
    WeaponRow,
    parse_count,
)


logger = get_logger(__name__)


class CharacterSheet:
    """A character and its attributes in a SheetStore.

    Every read goes to the store, so a sheet object never serves stale
    values after a write.

    Example:
        >>> sheet = CharacterSheet.by_name(store, "Alice", settings.sheet)
        >>> sheet.weapon(row_id).ammo_type
        '10mm'
    """

    def __init__(self, store: SheetStore, character: Character, settings: SheetSettings) -> None:
        self.store = store
        self.character = character
        self.settings = settings

    @classmethod
    def by_id(cls, store: SheetStore, character_id: str, settings: SheetSettings) -> CharacterSheet:
        """Resolve a sheet by character id.

        Raises:
            CharacterNotFoundError: If no such character exists.
        """
        character = store.get_character(character_id)
        if character is None:
            raise CharacterNotFoundError(
                "Character not found",
                details={"character_id": character_id},
            )
        return cls(store, character, settings)

    @classmethod
    def by_name(cls, store: SheetStore, name: str, settings: SheetSettings) -> CharacterSheet:
        """Resolve a sheet by character name, first match wins.

        Raises:
            CharacterNotFoundError: If no character has this name.
        """
        matches = store.find_characters(name=name)
        if not matches:
            raise CharacterNotFoundError("Character not found", character_name=name)
        return cls(store, matches[0], settings)

    @property
    def id(self) -> str:
        return self.character.id

    @property
    def name(self) -> str:
        return self.character.name

    @property
    def is_player_character(self) -> bool:
        attribute = self.store.get_attribute(self.id, self.settings.sheet_type_attribute)
        return attribute is not None and attribute.current == self.settings.player_sheet_type

    # -------------------------------------------------------------------------
    # Raw access
    # -------------------------------------------------------------------------

    def field_attributes(self, section: str, field_name: str) -> list[tuple[AttributeKey, Attribute]]:
        """All attributes of ``field_name`` across the rows of ``section``."""
        found: list[tuple[AttributeKey, Attribute]] = []
        for attribute in self.store.find_attributes(self.id):
            key = attribute.key_for(self.settings.row_field_names)
            if key is not None and key.section == section and key.field_name == field_name:
                found.append((key, attribute))
        return found

    def attribute(self, section: str, row_id: str, field_name: str) -> Attribute | None:
        key = AttributeKey(section=section, row_id=row_id, field_name=field_name)
        return self.store.get_attribute(self.id, key.name)

    def value(self, section: str, row_id: str, field_name: str) -> str | None:
        attribute = self.attribute(section, row_id, field_name)
        return attribute.current if attribute is not None else None

    def count(self, section: str, row_id: str, field_name: str) -> int | None:
        """Read a field as an integer; None when missing or malformed."""
        return parse_count(self.value(section, row_id, field_name))

    def write(self, section: str, row_id: str, field_name: str, value: Any) -> str | None:
        """Write a field and return its previous value.

        Returns:
            The previous value, or None if the attribute does not exist
            (the sync layer never creates rows).
        """
        attribute = self.attribute(section, row_id, field_name)
        if attribute is None:
            logger.warning(
                "Attribute missing, write skipped",
                section=section,
                row_id=row_id,
                field=field_name,
            )
            return None
        previous = attribute.current
        self.store.set_attribute(attribute, value)
        return previous

    # -------------------------------------------------------------------------
    # Typed rows
    # -------------------------------------------------------------------------

    def weapon(self, row_id: str) -> WeaponRow:
        """Snapshot of a weapon row; malformed stats read as 0."""
        s = self.settings
        section = s.weapons_section
        return WeaponRow(
            row_id=row_id,
            name=self.value(section, row_id, s.weapon_name_field) or "",
            ammo_type=self.value(section, row_id, s.weapon_ammo_type_field) or "",
            damage=self._stat(row_id, s.weapon_damage_field),
            fire_rate=self._stat(row_id, s.weapon_fire_rate_field),
            qualities=self.value(section, row_id, s.weapon_qualities_field) or "",
            ammo_count=self.count(section, row_id, s.weapon_ammo_field),
        )

    def ammo(self, row_id: str) -> AmmoRow:
        s = self.settings
        return AmmoRow(
            row_id=row_id,
            name=self.value(s.ammo_section, row_id, s.ammo_name_field) or "",
            quantity=self.count(s.ammo_section, row_id, s.ammo_quantity_field),
        )

    def weapon_ammo_types(self) -> list[tuple[str, str]]:
        """(row id, ammo type) for every weapon row, in sheet order."""
        s = self.settings
        return [
            (key.row_id, attribute.current)
            for key, attribute in self.field_attributes(s.weapons_section, s.weapon_ammo_type_field)
        ]

    def _stat(self, row_id: str, field_name: str) -> int:
        raw = self.value(self.settings.weapons_section, row_id, field_name)
        value = parse_count(raw)
        if value is None:
            if raw:
                logger.warning("Malformed weapon stat read as 0", field=field_name, value=raw)
            return 0
        return value


__all__ = [
    "CharacterSheet",
]
