"""Tests for the typed character sheet accessor."""

from __future__ import annotations

import pytest

from ammo_manager.core.config import Settings
from ammo_manager.core.exceptions import CharacterNotFoundError
from ammo_manager.host.memory import InMemorySheetStore
from ammo_manager.models.enums import SheetType
from ammo_manager.models.sheet import Character
from ammo_manager.sync.sheet import CharacterSheet


class TestResolution:
    """Tests for resolving sheets."""

    def test_by_name(self, store: InMemorySheetStore, alice: Character, settings: Settings) -> None:
        sheet = CharacterSheet.by_name(store, "Alice", settings.sheet)
        assert sheet.id == alice.id
        assert sheet.name == "Alice"

    def test_by_name_unknown(self, store: InMemorySheetStore, settings: Settings) -> None:
        with pytest.raises(CharacterNotFoundError):
            CharacterSheet.by_name(store, "Nobody", settings.sheet)

    def test_by_id_unknown(self, store: InMemorySheetStore, settings: Settings) -> None:
        with pytest.raises(CharacterNotFoundError):
            CharacterSheet.by_id(store, "-missing", settings.sheet)

    def test_player_character(self, alice_sheet: CharacterSheet) -> None:
        assert alice_sheet.is_player_character

    def test_npc(self, store: InMemorySheetStore, settings: Settings) -> None:
        raider = store.add_character("Raider", sheet_type=SheetType.NPC)
        assert not CharacterSheet(store, raider, settings.sheet).is_player_character


class TestRows:
    """Tests for typed row access."""

    def test_weapon(self, alice_sheet: CharacterSheet) -> None:
        weapon = alice_sheet.weapon("-smg")

        assert weapon.name == "10mm SMG"
        assert weapon.ammo_type == "10mm"
        assert weapon.damage == 3
        assert weapon.fire_rate == 3
        assert weapon.ammo_count == 20

    def test_weapon_without_ammo(self, alice_sheet: CharacterSheet) -> None:
        weapon = alice_sheet.weapon("-knife")
        assert not weapon.uses_ammo

    def test_malformed_stats_read_as_zero(
        self,
        store: InMemorySheetStore,
        alice: Character,
        alice_sheet: CharacterSheet,
    ) -> None:
        store.add_weapon(alice, "Syringer", ammo_type="Syringer Ammo", damage="3+", fire_rate="n/a",
                         ammo="??", row_id="-syringer")

        weapon = alice_sheet.weapon("-syringer")

        assert weapon.damage == 0
        assert weapon.fire_rate == 0
        assert weapon.ammo_count is None

    def test_ammo(self, alice_sheet: CharacterSheet) -> None:
        ammo = alice_sheet.ammo("-ammo308")
        assert ammo.name == ".308"
        assert ammo.quantity == 10

    def test_weapon_ammo_types_in_sheet_order(self, alice_sheet: CharacterSheet) -> None:
        assert alice_sheet.weapon_ammo_types() == [
            ("-pistol", "10mm"),
            ("-smg", "10mm"),
            ("-rifle", "0.308"),
            ("-laser", "Fusion Cell"),
            ("-knife", ""),
        ]

    def test_row_ids_with_underscores(
        self,
        store: InMemorySheetStore,
        alice: Character,
        alice_sheet: CharacterSheet,
    ) -> None:
        store.add_weapon(alice, "Pipe Rifle", ammo_type=".38", damage=3, ammo=6, row_id="-Wx_yz")

        assert alice_sheet.weapon_ammo_types()[-1] == ("-Wx_yz", ".38")
        assert alice_sheet.weapon("-Wx_yz").ammo_count == 6


class TestWrites:
    """Tests for writes through the sheet."""

    def test_write_returns_previous(
        self,
        store: InMemorySheetStore,
        alice_sheet: CharacterSheet,
    ) -> None:
        previous = alice_sheet.write("gear-ammo", "-ammo10", "ammo_quantity", 18)

        assert previous == "20"
        assert alice_sheet.count("gear-ammo", "-ammo10", "ammo_quantity") == 18
        assert len(store.writes) == 1

    def test_write_to_missing_attribute_is_skipped(
        self,
        store: InMemorySheetStore,
        alice_sheet: CharacterSheet,
    ) -> None:
        assert alice_sheet.write("gear-ammo", "-nope", "ammo_quantity", 1) is None
        assert store.writes == []
