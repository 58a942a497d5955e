"""Fuzzy matching of ammunition names.

The weapons section and the gear section of the sheet name the same
ammunition independently: a weapon may list ``0.308`` or ``5 mm`` or
``Fusion Cores`` where the gear row says ``.308``, ``5mm`` and
``Fusion Core``. Matching is a best-effort heuristic: after
normalization, the searched term only has to be contained in the stored
name, so two distinct ammo names sharing a substring can collide.
Callers that know both sides already agree ask for an exact match.
"""

from __future__ import annotations

import re


_LEADING_ZERO = re.compile(r"^0(?=\.)")
_UNIT_SPACING = re.compile(r"(\d)\s+mm", re.IGNORECASE)
_PLURAL_SUFFIX = re.compile(r"s$", re.IGNORECASE)


def normalize(raw_name: str, exact: bool = False) -> str:
    """Normalize an ammunition name for comparison.

    Args:
        raw_name: Free-text name from the sheet.
        exact: Return the name unchanged when True.

    Returns:
        The name with a leading ``0`` before the decimal point removed,
        digit/``mm`` spacing collapsed and one trailing ``s`` stripped.

    Example:
        >>> normalize("0.308")
        '.308'
        >>> normalize("5 mm")
        '5mm'
        >>> normalize("Fusion Cores")
        'Fusion Core'
    """
    if exact:
        return raw_name
    name = _LEADING_ZERO.sub("", raw_name)
    name = _UNIT_SPACING.sub(r"\1mm", name)
    return _PLURAL_SUFFIX.sub("", name)


def names_match(search_name: str, stored_name: str, exact: bool = False) -> bool:
    """Compare a searched name against a stored one.

    Exact mode is case-insensitive equality. Fuzzy mode is case-insensitive
    containment of the normalized search term in the normalized stored
    value; an empty search term never matches.
    """
    if exact:
        return search_name.lower() == stored_name.lower()
    needle = normalize(search_name.strip()).lower()
    if not needle:
        return False
    return needle in normalize(stored_name.strip()).lower()


__all__ = [
    "normalize",
    "names_match",
]
