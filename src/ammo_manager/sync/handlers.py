"""Entry points reacting to host events.

Both handlers are isolation units: whatever happens while processing one
event is logged and swallowed at the handler boundary so the host keeps
delivering later events. Nothing is remembered between invocations; all
state is re-read from the store.
"""

from __future__ import annotations

from typing import Any

from ammo_manager.core.config import Settings
from ammo_manager.core.exceptions import (
    CharacterNotFoundError,
    MalformedValueError,
    ResolutionError,
)
from ammo_manager.core.logging import bind_context, clear_context, get_logger
from ammo_manager.host.interfaces import SheetStore
from ammo_manager.models.enums import CountField, EventName, RollKind
from ammo_manager.models.events import AttributeSnapshot, RollMessage
from ammo_manager.models.sheet import Attribute, AttributeKey, parse_count
from ammo_manager.sync.locator import ItemLocator
from ammo_manager.sync.notifications import Notifier
from ammo_manager.sync.reconciler import Reconciler
from ammo_manager.sync.sheet import CharacterSheet
from ammo_manager.sync.shots import compute_shots_spent


logger = get_logger(__name__)


# =============================================================================
# Roll Messages
# =============================================================================


class RollHandler:
    """Checks ammo before attacks and deducts it after damage rolls."""

    def __init__(
        self,
        store: SheetStore,
        locator: ItemLocator,
        reconciler: Reconciler,
        notifier: Notifier,
        settings: Settings,
    ) -> None:
        self.store = store
        self.locator = locator
        self.reconciler = reconciler
        self.notifier = notifier
        self.settings = settings

    def __call__(self, message: RollMessage | dict[str, Any]) -> None:
        self.handle(message)

    def classify(self, message: RollMessage) -> RollKind | None:
        """Roll kind of a message, None for messages to ignore."""
        if not message.has_roll_data:
            return None
        if message.rolltemplate == self.settings.roll.attack_template:
            return RollKind.ATTACK
        if message.rolltemplate == self.settings.roll.damage_template:
            return RollKind.DAMAGE
        return None

    def handle(self, message: RollMessage | dict[str, Any]) -> None:
        """Process one chat message; never raises."""
        try:
            if not isinstance(message, RollMessage):
                message = RollMessage.model_validate(message)
            kind = self.classify(message)
            if kind is None:
                return
            bind_context(trigger=f"roll:{kind}")

            sheet = self._resolve_sheet(message)
            if sheet is None:
                return
            bind_context(character=sheet.name)

            if kind == RollKind.ATTACK:
                self.handle_attack(message, sheet)
            else:
                self.handle_damage(message, sheet)
        except ResolutionError as exc:
            logger.info("Roll processing stopped", reason=exc.message, **exc.details)
        except Exception:
            logger.exception("Ammo manager roll handler failed")
        finally:
            clear_context()

    def handle_attack(self, message: RollMessage, sheet: CharacterSheet) -> None:
        """Warn when the weapon is out of ammo. The roll itself stands."""
        weapon_row_id = self._resolve_weapon(message, sheet)
        if weapon_row_id is None:
            return
        weapon = sheet.weapon(weapon_row_id)
        if not weapon.uses_ammo:
            logger.debug("Weapon uses no ammo", weapon=weapon.name)
            return

        if weapon.ammo_count is not None and weapon.ammo_count <= 0:
            logger.info("Attack without ammo", weapon=weapon.name, ammo=weapon.ammo_type)
            self.notifier.out_of_ammo(message.who, sheet.name, weapon.ammo_type)

    def handle_damage(self, message: RollMessage, sheet: CharacterSheet) -> None:
        """Deduct the rounds a damage roll spent and sync all copies."""
        s = self.settings.sheet
        weapon_row_id = self._resolve_weapon(message, sheet)
        if weapon_row_id is None:
            return
        weapon = sheet.weapon(weapon_row_id)
        if not weapon.uses_ammo:
            logger.debug("Weapon uses no ammo", weapon=weapon.name)
            return

        ammo_row_id = self.locator.locate_ammo(sheet, weapon.ammo_type)
        shots = compute_shots_spent(
            message,
            weapon.damage,
            weapon.fire_rate,
            weapon.has_quality(self.settings.roll.special_quality),
            settings=self.settings.roll,
        )
        if shots == 0:
            self.notifier.no_ammo_spent(message.who)
            return

        previous = sheet.count(s.ammo_section, ammo_row_id, s.ammo_quantity_field)
        if previous is None:
            raise MalformedValueError(
                "Gear ammo quantity is not a number",
                attribute_name=AttributeKey(
                    section=s.ammo_section,
                    row_id=ammo_row_id,
                    field_name=s.ammo_quantity_field,
                ).name,
                invalid_value=sheet.value(s.ammo_section, ammo_row_id, s.ammo_quantity_field),
            )
        current = previous - shots
        sheet.write(s.ammo_section, ammo_row_id, s.ammo_quantity_field, current)
        self.reconciler.propagate_from_canonical(sheet, weapon.ammo_type, current)

        logger.info(
            "Ammo spent",
            weapon=weapon.name,
            ammo=weapon.ammo_type,
            shots=shots,
            previous=previous,
            current=current,
        )
        self.notifier.ammo_reduced(message.who, sheet.name, weapon.ammo_type, previous, current)

    def _resolve_sheet(self, message: RollMessage) -> CharacterSheet | None:
        sheet_name = message.marker(self.settings.roll.sheet_name_marker)
        if sheet_name is None:
            return None
        try:
            sheet = CharacterSheet.by_name(self.store, sheet_name, self.settings.sheet)
        except CharacterNotFoundError:
            logger.debug("Roll for unknown sheet ignored", sheet=sheet_name)
            return None
        if not sheet.is_player_character:
            return None
        return sheet

    def _resolve_weapon(self, message: RollMessage, sheet: CharacterSheet) -> str | None:
        weapon_name = message.marker(self.settings.roll.weapon_name_marker)
        if weapon_name is None:
            logger.debug("Roll names no weapon")
            return None
        return self.locator.locate_weapon(sheet, weapon_name)


# =============================================================================
# Attribute Changes
# =============================================================================


class AttributeChangeHandler:
    """Keeps gear and weapon ammo counts in sync after any edit."""

    def __init__(self, store: SheetStore, reconciler: Reconciler, settings: Settings) -> None:
        self.store = store
        self.reconciler = reconciler
        self.settings = settings

    def __call__(self, attribute: Attribute, previous: Any) -> None:
        self.handle(attribute, previous)

    def classify(self, key: AttributeKey | None) -> CountField | None:
        """Tracked count field addressed by ``key``, None for any other field."""
        if key is None:
            return None
        s = self.settings.sheet
        if key.section == s.weapons_section and key.field_name == s.weapon_ammo_field:
            return CountField.WEAPON_AMMO
        if key.section == s.ammo_section and key.field_name == s.ammo_quantity_field:
            return CountField.GEAR_QUANTITY
        return None

    def handle(self, attribute: Attribute, previous: Any) -> None:
        """Process one attribute change; never raises."""
        try:
            snapshot = AttributeSnapshot.coerce(previous)
            if is_unchanged(attribute.current, snapshot.current):
                logger.debug("Value already the same", attribute=attribute.name)
                return

            try:
                sheet = CharacterSheet.by_id(
                    self.store, attribute.character_id, self.settings.sheet
                )
            except CharacterNotFoundError:
                return
            if not sheet.is_player_character:
                return

            key = attribute.key_for(self.settings.sheet.row_field_names)
            field = self.classify(key)
            if key is None or field is None:
                return
            bind_context(
                trigger=EventName.CHANGE_ATTRIBUTE,
                character=sheet.name,
                attribute=attribute.name,
            )

            target = parse_count(attribute.current)
            if target is None:
                self._revert(attribute, snapshot)
                return

            if field == CountField.WEAPON_AMMO:
                self.reconciler.propagate_from_weapon(sheet, key.row_id, target)
            else:
                self.reconciler.propagate_from_gear(sheet, key.row_id, target)
        except ResolutionError as exc:
            logger.info("Sync stopped", reason=exc.message, **exc.details)
        except Exception:
            logger.exception("Ammo manager change handler failed")
        finally:
            clear_context()

    def _revert(self, attribute: Attribute, snapshot: AttributeSnapshot) -> None:
        # Sheet edits such as mod swaps can type text into count fields.
        error = MalformedValueError(
            "Non-integer ammo count reverted",
            attribute_name=attribute.name,
            invalid_value=attribute.current,
        )
        if parse_count(snapshot.current) is None:
            # Restoring a non-integer would be reverted in turn, forever.
            logger.warning(
                "Non-integer ammo count left as is, previous value not a number either",
                previous=snapshot.current,
                **error.details,
            )
            return
        logger.warning(error.message, restored=snapshot.current, **error.details)
        self.store.set_attribute(attribute, snapshot.current)


def is_unchanged(current: Any, previous: Any) -> bool:
    """Whether a change event carries no effective change.

    Values are equal when their text is identical or when both parse to
    the same integer (``"12"`` and ``12``).
    """
    if str(current) == str(previous if previous is not None else ""):
        return True
    current_count = parse_count(current)
    return current_count is not None and current_count == parse_count(previous)


__all__ = [
    "RollHandler",
    "AttributeChangeHandler",
    "is_unchanged",
]
