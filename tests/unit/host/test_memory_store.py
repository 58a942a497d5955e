"""Tests for the in-memory reference host."""

from __future__ import annotations

from typing import Any

import pytest

from ammo_manager.host.events import EventBus
from ammo_manager.host.memory import ChatLog, InMemorySheetStore
from ammo_manager.models.enums import EventName, SheetType
from ammo_manager.models.events import AttributeSnapshot
from ammo_manager.models.sheet import Attribute


class TestSheetStore:
    """Tests for character and attribute lookup."""

    def test_add_character(self, store: InMemorySheetStore) -> None:
        alice = store.add_character("Alice")

        assert store.get_character(alice.id) == alice
        assert store.find_characters(name="Alice") == [alice]
        assert store.find_characters(name="Bob") == []
        assert store.value(alice, "sheet_type") == "pc"

    def test_npc_sheet_type(self, store: InMemorySheetStore) -> None:
        raider = store.add_character("Raider", sheet_type=SheetType.NPC)
        assert store.value(raider, "sheet_type") == "npc"

    def test_find_attributes_by_name(self, store: InMemorySheetStore) -> None:
        alice = store.add_character("Alice")
        store.add_attribute(alice, "caps", 120)

        found = store.find_attributes(alice.id, name="caps")

        assert len(found) == 1
        assert found[0].current == "120"
        assert store.get_attribute(alice.id, "missing") is None

    def test_row_builders(self, store: InMemorySheetStore) -> None:
        alice = store.add_character("Alice")
        row_id = store.add_weapon(alice, "10mm Pistol", ammo_type="10mm", damage=4, ammo=12)

        assert row_id.startswith("-")
        assert store.value(alice, f"repeating_pc-weapons_{row_id}_weapon_ammo_type") == "10mm"
        assert store.value(alice, f"repeating_pc-weapons_{row_id}_weapon_ammo") == "12"

    def test_set_attribute_records_write(self, store: InMemorySheetStore) -> None:
        alice = store.add_character("Alice")
        store.add_ammo(alice, "10mm", 20, row_id="-ammo10")

        store.edit(alice, "repeating_gear-ammo_-ammo10_ammo_quantity", 18)

        assert len(store.writes) == 1
        write = store.writes[0]
        assert (write.previous, write.current) == ("20", "18")

    def test_edit_missing_attribute(self, store: InMemorySheetStore) -> None:
        alice = store.add_character("Alice")
        with pytest.raises(KeyError):
            store.edit(alice, "nope", 1)


class TestChangeEvents:
    """Tests for change events published on writes."""

    def test_write_emits_change(self) -> None:
        bus = EventBus()
        store = InMemorySheetStore(bus=bus)
        received: list[tuple[Attribute, Any]] = []
        bus.on(EventName.CHANGE_ATTRIBUTE, lambda attr, prev: received.append((attr, prev)))
        alice = store.add_character("Alice")
        store.add_attribute(alice, "caps", 100)

        store.edit(alice, "caps", 90)

        assert len(received) == 1
        attribute, previous = received[0]
        assert attribute.current == "90"
        assert previous == AttributeSnapshot(current="100")

    def test_builders_emit_nothing(self) -> None:
        bus = EventBus()
        store = InMemorySheetStore(bus=bus)

        alice = store.add_character("Alice")
        store.add_ammo(alice, "10mm", 20)

        assert bus.delivered == 0


class TestChatLog:
    """Tests for the recording chat sink."""

    def test_records_messages(self) -> None:
        chat = ChatLog()
        chat.send_chat("Alice", "hello")
        chat.send_chat("Bob", "hi")

        assert chat.messages == ["hello", "hi"]
        assert chat.entries[1].speaker == "Bob"
