"""Fallout Ammo Manager - ammunition tracking for Fallout 2d20 character sheets.

Reacts to two host events:
- Damage roll messages: works out how many rounds the roll fired and
  deducts them from the gear ammo row and every weapon using that ammo.
- Attribute changes: keeps the gear ammo quantity and the per-weapon
  ammo copies equal whichever side the player edits.

Attack rolls are checked too; firing an empty weapon posts a warning.

Example:
    >>> from ammo_manager import create_reference_host
    >>> from ammo_manager.engine import damage_message
    >>>
    >>> bus, store, chat, manager = create_reference_host()
    >>> alice = store.add_character("Alice")
    >>> store.add_ammo(alice, "10mm", 20)
    >>> store.add_weapon(alice, "10mm Pistol", ammo_type="10mm", damage=1, ammo=20)
    >>> bus.emit("chat:message", damage_message("Alice", "10mm Pistol", 1))
    >>> chat.messages[-1]
    '&{template:fallout_gear} {{playerName=Alice}} {{gearName=10mm reduced: 20 -> 19}} {{gearDescription=}}'

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas for sheet data and host events.
    sync: Name matching, row lookup, shot counting, reconciliation, handlers.
    host: Host interfaces and the in-memory reference host.
    engine: Fallout 2d20 dice and roll message builders.
"""

from __future__ import annotations

from ammo_manager.app import AmmoManager, create_reference_host
from ammo_manager.core.config import Settings, get_settings
from ammo_manager.core.exceptions import AmmoManagerError
from ammo_manager.core.logging import configure_logging, get_logger
from ammo_manager.sync.handlers import AttributeChangeHandler, RollHandler
from ammo_manager.sync.normalizer import names_match, normalize
from ammo_manager.sync.reconciler import Reconciler
from ammo_manager.sync.shots import compute_shots_spent


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "AmmoManagerError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Sync
    "normalize",
    "names_match",
    "compute_shots_spent",
    "Reconciler",
    "RollHandler",
    "AttributeChangeHandler",
    # Wiring
    "AmmoManager",
    "create_reference_host",
]
