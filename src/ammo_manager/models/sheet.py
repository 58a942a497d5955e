"""Pydantic models for character sheet data.

The hosting sheet stores every value as a string attribute whose name
encodes a composite path ``repeating_<section>_<rowId>_<field>``. This
module parses those names once into an ``AttributeKey`` and exposes typed
weapon and ammo row views, so the sync code never slices raw strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any, Self
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ammo_manager.core.constants import KEY_SEPARATOR, REPEATING_PREFIX


# Section names contain no underscore; row ids are opaque and may contain one.
_KEY_PATTERN = re.compile(rf"^{REPEATING_PREFIX}{KEY_SEPARATOR}([^_]+){KEY_SEPARATOR}(.+)$")
_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def new_row_id() -> str:
    """Generate an opaque row identifier in the host's style."""
    return f"-{uuid4().hex[:19]}"


def parse_count(value: Any) -> int | None:
    """Parse a sheet value as a whole number.

    Args:
        value: Raw value read from or written to the sheet.

    Returns:
        The integer, or None when the value is empty, fractional or text.

    Example:
        >>> parse_count(" 12 ")
        12
        >>> parse_count("Laser Musket") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if value is None:
        return None
    text = str(value).strip()
    if not _INTEGER_PATTERN.match(text):
        return None
    return int(text)


# =============================================================================
# Attribute Addressing
# =============================================================================


class AttributeKey(BaseModel):
    """Structured address of a repeating-section attribute.

    Attributes:
        section: Repeating section identifier (e.g. ``pc-weapons``).
        row_id: Row identifier, unique within the section for a character.
        field_name: Field name within the row (e.g. ``weapon_ammo_type``).

    Example:
        >>> key = AttributeKey.parse("repeating_pc-weapons_-Mx1_weapon_ammo")
        >>> key.section, key.row_id, key.field_name
        ('pc-weapons', '-Mx1', 'weapon_ammo')
        >>> key.name
        'repeating_pc-weapons_-Mx1_weapon_ammo'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    section: str = Field(min_length=1)
    row_id: str = Field(min_length=1)
    field_name: str = Field(min_length=1)

    @classmethod
    def parse(cls, name: str, field_names: Iterable[str] = ()) -> Self | None:
        """Parse an attribute name, returning None for non-repeating names.

        Args:
            name: Attribute name.
            field_names: Known row field names. The longest one ending the
                name is taken as the field and everything before it as the
                row id, so row ids containing ``_`` parse correctly. Without
                a known field the row id ends at the first underscore.
        """
        match = _KEY_PATTERN.match(name)
        if match is None:
            return None
        section, rest = match.groups()
        for field_name in sorted(field_names, key=len, reverse=True):
            suffix = KEY_SEPARATOR + field_name
            if rest.endswith(suffix) and len(rest) > len(suffix):
                return cls(section=section, row_id=rest[: -len(suffix)], field_name=field_name)
        row_id, separator, field_name = rest.partition(KEY_SEPARATOR)
        if not separator or not row_id or not field_name:
            return None
        return cls(section=section, row_id=row_id, field_name=field_name)

    @property
    def name(self) -> str:
        """The attribute name this key addresses."""
        return KEY_SEPARATOR.join((REPEATING_PREFIX, self.section, self.row_id, self.field_name))


# =============================================================================
# Store Entities
# =============================================================================


class Character(BaseModel):
    """A character known to the hosting store."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_row_id)
    name: str


class Attribute(BaseModel):
    """A key/value record scoped to a character.

    ``current`` is always held as text; numeric fields are not typed by
    the host and may transiently contain garbage from unrelated edits.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_row_id)
    character_id: str
    name: str
    current: str = ""

    @field_validator("current", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @property
    def key(self) -> AttributeKey | None:
        """Parsed repeating-section key, or None for plain attributes."""
        return AttributeKey.parse(self.name)

    def key_for(self, field_names: Iterable[str]) -> AttributeKey | None:
        """Parsed key, resolving the field against the known row fields."""
        return AttributeKey.parse(self.name, field_names)


# =============================================================================
# Typed Row Views
# =============================================================================


class WeaponRow(BaseModel):
    """Snapshot of a weapon row.

    Attributes:
        row_id: Row identifier in the weapons section.
        name: Weapon name.
        ammo_type: Free-text ammo type; empty for weapons without ammo.
        damage: Damage rating (number of combat dice).
        fire_rate: Fire rate; 0 means single shot.
        qualities: Free-text weapon qualities.
        ammo_count: Denormalized copy of the ammo quantity.
    """

    model_config = ConfigDict(frozen=True)

    row_id: str
    name: str = ""
    ammo_type: str = ""
    damage: int = 0
    fire_rate: int = 0
    qualities: str = ""
    ammo_count: int | None = None

    @property
    def uses_ammo(self) -> bool:
        return bool(self.ammo_type.strip())

    def has_quality(self, quality: str) -> bool:
        """Check whether the qualities text mentions ``quality``."""
        return quality in self.qualities


class AmmoRow(BaseModel):
    """Snapshot of a canonical ammo gear row."""

    model_config = ConfigDict(frozen=True)

    row_id: str
    name: str = ""
    quantity: int | None = None


__all__ = [
    "new_row_id",
    "parse_count",
    "AttributeKey",
    "Character",
    "Attribute",
    "WeaponRow",
    "AmmoRow",
]
