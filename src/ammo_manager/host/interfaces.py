"""Interfaces the hosting environment must provide.

The ammo manager never owns character data: it reads and writes through
a SheetStore and talks to players through a ChatSink. A production host
adapts its own object model to these classes; ``host.memory`` provides
the in-process reference implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ammo_manager.models.sheet import Attribute, Character


class SheetStore(ABC):
    """Query and mutation access to characters and their attributes."""

    @abstractmethod
    def get_character(self, character_id: str) -> Character | None:
        """Get a character by id, or None if it does not exist."""
        ...

    @abstractmethod
    def find_characters(self, *, name: str | None = None) -> list[Character]:
        """Find characters, optionally filtered by exact name."""
        ...

    @abstractmethod
    def find_attributes(
        self,
        character_id: str,
        *,
        name: str | None = None,
    ) -> list[Attribute]:
        """Find a character's attributes, optionally filtered by exact name.

        Results are returned in insertion order so that "first match"
        lookups are deterministic.
        """
        ...

    @abstractmethod
    def set_attribute(self, attribute: Attribute, value: Any) -> None:
        """Set the current value of an attribute.

        Hosts are expected to publish a ``change:attribute`` event for the
        write as a new, separate invocation.
        """
        ...

    def get_attribute(self, character_id: str, name: str) -> Attribute | None:
        """Get a single attribute by exact name."""
        matches = self.find_attributes(character_id, name=name)
        return matches[0] if matches else None


class ChatSink(ABC):
    """Outbound chat channel."""

    @abstractmethod
    def send_chat(self, speaker: str, message: str) -> None:
        """Post ``message`` to the game chat as ``speaker``."""
        ...


__all__ = [
    "SheetStore",
    "ChatSink",
]
