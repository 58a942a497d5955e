"""Tests for item row lookup."""

from __future__ import annotations

import pytest

from ammo_manager.core.exceptions import ItemNotFoundError
from ammo_manager.host.memory import ChatLog, InMemorySheetStore
from ammo_manager.models.sheet import Character
from ammo_manager.sync.locator import ItemLocator
from ammo_manager.sync.sheet import CharacterSheet


class TestLocateRow:
    """Tests for ItemLocator.locate_row and its wrappers."""

    def test_exact_weapon_lookup(self, locator: ItemLocator, alice_sheet: CharacterSheet) -> None:
        assert locator.locate_weapon(alice_sheet, "10mm SMG") == "-smg"

    def test_exact_lookup_ignores_case(self, locator: ItemLocator, alice_sheet: CharacterSheet) -> None:
        assert locator.locate_weapon(alice_sheet, "hunting rifle") == "-rifle"

    def test_exact_lookup_needs_full_name(
        self,
        locator: ItemLocator,
        alice_sheet: CharacterSheet,
    ) -> None:
        with pytest.raises(ItemNotFoundError):
            locator.locate_weapon(alice_sheet, "Hunting")

    def test_fuzzy_ammo_lookup(self, locator: ItemLocator, alice_sheet: CharacterSheet) -> None:
        assert locator.locate_ammo(alice_sheet, "0.308") == "-ammo308"
        assert locator.locate_ammo(alice_sheet, "Fusion Cell") == "-ammofc"

    def test_first_match_wins(
        self,
        store: InMemorySheetStore,
        alice: Character,
        locator: ItemLocator,
        alice_sheet: CharacterSheet,
    ) -> None:
        store.add_ammo(alice, "10mm Armor Piercing", 5, row_id="-ammo10ap")

        assert locator.locate_ammo(alice_sheet, "10mm") == "-ammo10"

    def test_generic_section_lookup(self, locator: ItemLocator, alice_sheet: CharacterSheet) -> None:
        row_id = locator.locate_row(
            alice_sheet, "Laser Gun", "pc-weapons", "weapon_name", exact=True
        )
        assert row_id == "-laser"

    def test_not_found_notifies_and_raises(
        self,
        locator: ItemLocator,
        alice_sheet: CharacterSheet,
        chat: ChatLog,
    ) -> None:
        with pytest.raises(ItemNotFoundError) as exc_info:
            locator.locate_ammo(alice_sheet, "0.45")

        assert exc_info.value.details["item_name"] == ".45"
        assert exc_info.value.details["character_name"] == "Alice"
        assert len(chat.entries) == 1
        entry = chat.entries[0]
        assert entry.speaker == "Alice"
        assert entry.message == (
            "&{template:fallout_injuries} {{playerName=Alice}} "
            "{{injuryLocation=AMMO API ERROR}} "
            "{{injuryEffect=ERR: Item .45 not found, make sure names are the same in "
            "character sheet, and that the item is actually in the sheet}}"
        )
