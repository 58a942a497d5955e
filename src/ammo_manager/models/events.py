"""Pydantic models for events delivered by the hosting environment."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ammo_manager.core.constants import MARKER_PATTERN, PREVIOUS_CURRENT_KEY


_MARKER_RE = re.compile(MARKER_PATTERN)


class InlineRoll(BaseModel):
    """One sub-roll of a roll template message.

    Attributes:
        expression: Die expression as typed into the template (``1d6cs7``).
        result: Numeric result of the sub-roll.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    expression: str
    result: int | float = 0


class RollMessage(BaseModel):
    """A chat message posted to the game, possibly carrying roll data.

    Attributes:
        who: Display name of the speaker.
        content: Template body with ``{{key=value}}`` markers.
        rolltemplate: Roll template tag, None for plain chat.
        inlinerolls: Sub-roll records, None when the message has no rolls.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    who: str = ""
    content: str = ""
    rolltemplate: str | None = None
    inlinerolls: list[InlineRoll] | None = None

    @property
    def has_roll_data(self) -> bool:
        return bool(self.inlinerolls)

    @property
    def markers(self) -> dict[str, str]:
        """All markers of the content; the first occurrence of a key wins."""
        found: dict[str, str] = {}
        for key, value in _MARKER_RE.findall(self.content):
            found.setdefault(key, value)
        return found

    def marker(self, key: str) -> str | None:
        """Value of the ``{{key=...}}`` marker, or None if absent."""
        return self.markers.get(key)

    def has_marker(self, key: str) -> bool:
        return key in self.markers


class AttributeSnapshot(BaseModel):
    """Previous state of a changed attribute, as delivered with the event."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    current: Any = Field(default="")

    @classmethod
    def coerce(cls, previous: Any) -> AttributeSnapshot:
        """Accept a snapshot, a mapping with ``current`` or a bare value."""
        if isinstance(previous, cls):
            return previous
        if isinstance(previous, dict):
            return cls(current=previous.get(PREVIOUS_CURRENT_KEY, ""))
        return cls(current=previous)


__all__ = [
    "InlineRoll",
    "RollMessage",
    "AttributeSnapshot",
]
