"""Application-wide constants for the ammo manager.

Field names of the chat roll templates are fixed by the existing sheet
templates and must not change.
"""

from __future__ import annotations

# =============================================================================
# Attribute Names
# =============================================================================

REPEATING_PREFIX = "repeating"
"""Prefix of every repeating-section attribute name."""

KEY_SEPARATOR = "_"
"""Separator between prefix, section, row id and field in attribute names."""

# =============================================================================
# Chat Template Fields
# =============================================================================

INJURY_PLAYER_FIELD = "playerName"
INJURY_LOCATION_FIELD = "injuryLocation"
INJURY_EFFECT_FIELD = "injuryEffect"

GEAR_PLAYER_FIELD = "playerName"
GEAR_NAME_FIELD = "gearName"
GEAR_DESCRIPTION_FIELD = "gearDescription"

# =============================================================================
# Event Payloads
# =============================================================================

MARKER_PATTERN = r"\{\{([^=}]+)=([^}]*)\}\}"
"""Regex for ``{{key=value}}`` markers embedded in roll message content."""

PREVIOUS_CURRENT_KEY = "current"
"""Key of the current value in an attribute's previous-state snapshot."""


__all__ = [
    "REPEATING_PREFIX",
    "KEY_SEPARATOR",
    "INJURY_PLAYER_FIELD",
    "INJURY_LOCATION_FIELD",
    "INJURY_EFFECT_FIELD",
    "GEAR_PLAYER_FIELD",
    "GEAR_NAME_FIELD",
    "GEAR_DESCRIPTION_FIELD",
    "MARKER_PATTERN",
    "PREVIOUS_CURRENT_KEY",
]
