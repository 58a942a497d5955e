"""Pytest configuration and shared fixtures.

Unit tests use a store without an event bus, so a component's writes are
not redelivered and each call can be checked in isolation. Integration
tests use the reference host, where every write is redelivered to the
change handler like the real sheet does.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ammo_manager.app import AmmoManager, create_reference_host
from ammo_manager.core.config import Settings
from ammo_manager.host.events import EventBus
from ammo_manager.host.memory import ChatLog, InMemorySheetStore
from ammo_manager.models.sheet import Character
from ammo_manager.sync.locator import ItemLocator
from ammo_manager.sync.notifications import Notifier
from ammo_manager.sync.reconciler import Reconciler
from ammo_manager.sync.sheet import CharacterSheet


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from ammo_manager.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """Default settings for the official Fallout 2d20 sheet."""
    return Settings()


# =============================================================================
# Component Fixtures
# =============================================================================


@pytest.fixture
def store(settings: Settings) -> InMemorySheetStore:
    """A store whose writes raise no change events."""
    return InMemorySheetStore(sheet_settings=settings.sheet)


@pytest.fixture
def chat() -> ChatLog:
    return ChatLog()


@pytest.fixture
def notifier(chat: ChatLog, settings: Settings) -> Notifier:
    return Notifier(chat, settings.notify)


@pytest.fixture
def locator(notifier: Notifier, settings: Settings) -> ItemLocator:
    return ItemLocator(notifier, settings.sheet)


@pytest.fixture
def reconciler(locator: ItemLocator, settings: Settings) -> Reconciler:
    return Reconciler(locator, settings.sheet)


@pytest.fixture
def manager(store: InMemorySheetStore, chat: ChatLog, settings: Settings) -> AmmoManager:
    """Manager over the bus-less store; handlers are called directly."""
    return AmmoManager(store, chat, settings)


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def alice(store: InMemorySheetStore) -> Character:
    """Alice carries 10mm, .308 and fusion cell weapons.

    Row ids are fixed so tests can address attributes by name:
        -ammo10 ``10mm`` x20, -ammo308 ``.308`` x10, -ammofc ``Fusion Cells`` x30
        -pistol and -smg use ``10mm`` (20), -rifle uses ``0.308`` (10),
        -laser uses ``Fusion Cell`` (30), -knife uses no ammo.
    """
    character = store.add_character("Alice")
    store.add_ammo(character, "10mm", 20, row_id="-ammo10")
    store.add_ammo(character, ".308", 10, row_id="-ammo308")
    store.add_ammo(character, "Fusion Cells", 30, row_id="-ammofc")
    store.add_weapon(
        character, "10mm Pistol", ammo_type="10mm", damage=4, fire_rate=2, ammo=20, row_id="-pistol"
    )
    store.add_weapon(
        character, "10mm SMG", ammo_type="10mm", damage=3, fire_rate=3, ammo=20, row_id="-smg"
    )
    store.add_weapon(
        character, "Hunting Rifle", ammo_type="0.308", damage=6, fire_rate=0, ammo=10, row_id="-rifle"
    )
    store.add_weapon(
        character, "Laser Gun", ammo_type="Fusion Cell", damage=4, fire_rate=2, ammo=30, row_id="-laser"
    )
    store.add_weapon(character, "Combat Knife", damage=3, row_id="-knife")
    return character


@pytest.fixture
def alice_sheet(store: InMemorySheetStore, alice: Character, settings: Settings) -> CharacterSheet:
    return CharacterSheet(store, alice, settings.sheet)


# =============================================================================
# Reference Host Fixtures
# =============================================================================


@pytest.fixture
def reference_host(
    settings: Settings,
) -> tuple[EventBus, InMemorySheetStore, ChatLog, AmmoManager]:
    """Bus, store, chat log and installed manager with redelivery."""
    return create_reference_host(settings)
