"""Chat notifications rendered with the sheet's roll templates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ammo_manager.core.config import NotificationSettings
from ammo_manager.core.constants import (
    GEAR_DESCRIPTION_FIELD,
    GEAR_NAME_FIELD,
    GEAR_PLAYER_FIELD,
    INJURY_EFFECT_FIELD,
    INJURY_LOCATION_FIELD,
    INJURY_PLAYER_FIELD,
)
from ammo_manager.core.logging import get_logger
from ammo_manager.host.interfaces import ChatSink


logger = get_logger(__name__)


class TemplateMessage(BaseModel):
    """A roll template invocation with its field values.

    Example:
        >>> TemplateMessage(template="fallout_gear", fields={"gearName": "10mm"}).render()
        '&{template:fallout_gear} {{gearName=10mm}}'
    """

    model_config = ConfigDict(frozen=True)

    template: str
    fields: dict[str, str]

    def render(self) -> str:
        parts = [f"&{{template:{self.template}}}"]
        parts.extend(f"{{{{{name}={value}}}}}" for name, value in self.fields.items())
        return " ".join(parts)


class Notifier:
    """Sends the ammo manager's player-facing chat messages."""

    def __init__(self, chat: ChatSink, settings: NotificationSettings) -> None:
        self.chat = chat
        self.settings = settings

    def injury(self, speaker: str, player_name: str, location: str, effect: str) -> None:
        """Send an injury-style notice, used for errors and empty magazines."""
        message = TemplateMessage(
            template=self.settings.injury_template,
            fields={
                INJURY_PLAYER_FIELD: player_name,
                INJURY_LOCATION_FIELD: location,
                INJURY_EFFECT_FIELD: effect,
            },
        )
        self.chat.send_chat(speaker, message.render())

    def gear(self, speaker: str, player_name: str, gear_name: str, description: str = "") -> None:
        message = TemplateMessage(
            template=self.settings.gear_template,
            fields={
                GEAR_PLAYER_FIELD: player_name,
                GEAR_NAME_FIELD: gear_name,
                GEAR_DESCRIPTION_FIELD: description,
            },
        )
        self.chat.send_chat(speaker, message.render())

    def item_not_found(self, character_name: str, search_name: str) -> None:
        effect = (
            f"ERR: Item {search_name} not found, make sure names are the same in "
            "character sheet, and that the item is actually in the sheet"
        )
        self.injury(character_name, character_name, self.settings.error_location, effect)

    def out_of_ammo(self, speaker: str, character_name: str, ammo_type: str) -> None:
        effect = f"Not enough {ammo_type} to fire this weapon."
        self.injury(speaker, character_name, self.settings.empty_location, effect)

    def ammo_reduced(
        self,
        speaker: str,
        character_name: str,
        ammo_type: str,
        previous: int,
        current: int,
    ) -> None:
        self.gear(speaker, character_name, f"{ammo_type} reduced: {previous} -> {current}")

    def no_ammo_spent(self, speaker: str) -> None:
        self.chat.send_chat(speaker, self.settings.no_ammo_spent_text)


__all__ = [
    "TemplateMessage",
    "Notifier",
]
