"""In-memory reference host.

Implements the SheetStore and ChatSink interfaces on plain Python
containers and publishes ``change:attribute`` events on an EventBus for
every write, the way the hosted sheet does. It backs the test-suite and
local experiments; it is not a persistence layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ammo_manager.core.config import SheetSettings
from ammo_manager.core.logging import get_logger
from ammo_manager.host.events import EventBus
from ammo_manager.host.interfaces import ChatSink, SheetStore
from ammo_manager.models.enums import EventName, SheetType
from ammo_manager.models.events import AttributeSnapshot
from ammo_manager.models.sheet import Attribute, AttributeKey, Character, new_row_id


logger = get_logger(__name__)


@dataclass(frozen=True)
class AttributeWrite:
    """Record of one write made through ``set_attribute``."""

    character_id: str
    name: str
    previous: str
    current: str


class InMemorySheetStore(SheetStore):
    """Characters and attributes held in dictionaries.

    Attributes:
        writes: Every write made through ``set_attribute``, in order.
    """

    def __init__(
        self,
        *,
        bus: EventBus | None = None,
        sheet_settings: SheetSettings | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            bus: Bus receiving ``change:attribute`` events for writes.
            sheet_settings: Sheet vocabulary used by the row builders.
        """
        self._bus = bus
        self._sheet = sheet_settings or SheetSettings()
        self._characters: dict[str, Character] = {}
        self._attributes: dict[str, list[Attribute]] = {}
        self.writes: list[AttributeWrite] = []

    # -------------------------------------------------------------------------
    # SheetStore
    # -------------------------------------------------------------------------

    def get_character(self, character_id: str) -> Character | None:
        return self._characters.get(character_id)

    def find_characters(self, *, name: str | None = None) -> list[Character]:
        characters = list(self._characters.values())
        if name is None:
            return characters
        return [c for c in characters if c.name == name]

    def find_attributes(
        self,
        character_id: str,
        *,
        name: str | None = None,
    ) -> list[Attribute]:
        attributes = self._attributes.get(character_id, [])
        if name is None:
            return list(attributes)
        return [a for a in attributes if a.name == name]

    def set_attribute(self, attribute: Attribute, value: Any) -> None:
        previous = AttributeSnapshot(current=attribute.current)
        attribute.current = value
        self.writes.append(
            AttributeWrite(
                character_id=attribute.character_id,
                name=attribute.name,
                previous=previous.current,
                current=attribute.current,
            )
        )
        if self._bus is not None:
            self._bus.emit(EventName.CHANGE_ATTRIBUTE, attribute, previous)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def add_character(self, name: str, *, sheet_type: str = SheetType.PC) -> Character:
        """Create a character with its sheet type attribute."""
        character = Character(name=name)
        self._characters[character.id] = character
        self._attributes[character.id] = []
        self.add_attribute(character, self._sheet.sheet_type_attribute, sheet_type)
        return character

    def add_attribute(self, character: Character, name: str, value: Any = "") -> Attribute:
        """Create an attribute without publishing a change event."""
        attribute = Attribute(character_id=character.id, name=name, current=value)
        self._attributes.setdefault(character.id, []).append(attribute)
        return attribute

    def add_row(
        self,
        character: Character,
        section: str,
        values: dict[str, Any],
        *,
        row_id: str | None = None,
    ) -> str:
        """Create a repeating-section row from field/value pairs."""
        row_id = row_id or new_row_id()
        for field_name, value in values.items():
            key = AttributeKey(section=section, row_id=row_id, field_name=field_name)
            self.add_attribute(character, key.name, value)
        return row_id

    def add_weapon(
        self,
        character: Character,
        name: str,
        *,
        ammo_type: str = "",
        damage: int | str = 0,
        fire_rate: int | str = 0,
        qualities: str = "",
        ammo: int | str = 0,
        row_id: str | None = None,
    ) -> str:
        """Create a weapon row and return its row id."""
        sheet = self._sheet
        return self.add_row(
            character,
            sheet.weapons_section,
            {
                sheet.weapon_name_field: name,
                sheet.weapon_ammo_type_field: ammo_type,
                sheet.weapon_damage_field: damage,
                sheet.weapon_fire_rate_field: fire_rate,
                sheet.weapon_qualities_field: qualities,
                sheet.weapon_ammo_field: ammo,
            },
            row_id=row_id,
        )

    def add_ammo(
        self,
        character: Character,
        name: str,
        quantity: int | str,
        *,
        row_id: str | None = None,
    ) -> str:
        """Create a canonical ammo gear row and return its row id."""
        sheet = self._sheet
        return self.add_row(
            character,
            sheet.ammo_section,
            {sheet.ammo_name_field: name, sheet.ammo_quantity_field: quantity},
            row_id=row_id,
        )

    def value(self, character: Character, name: str) -> str | None:
        """Current value of an attribute by exact name."""
        attribute = self.get_attribute(character.id, name)
        return attribute.current if attribute else None

    def edit(self, character: Character, name: str, value: Any) -> None:
        """Simulate a player editing an attribute in the sheet."""
        attribute = self.get_attribute(character.id, name)
        if attribute is None:
            raise KeyError(name)
        logger.debug("Sheet edited", character=character.name, attribute=name, value=value)
        self.set_attribute(attribute, value)


@dataclass(frozen=True)
class ChatEntry:
    speaker: str
    message: str


@dataclass
class ChatLog(ChatSink):
    """Chat sink that records every message."""

    entries: list[ChatEntry] = field(default_factory=list)

    def send_chat(self, speaker: str, message: str) -> None:
        self.entries.append(ChatEntry(speaker=speaker, message=message))
        logger.debug("Chat sent", speaker=speaker, message=message)

    @property
    def messages(self) -> list[str]:
        return [entry.message for entry in self.entries]


__all__ = [
    "AttributeWrite",
    "InMemorySheetStore",
    "ChatEntry",
    "ChatLog",
]
