"""Custom exception hierarchy for the Fallout 2d20 ammo manager.

All exceptions inherit from AmmoManagerError so that the event handlers
can isolate every failure at their boundary while still telling apart
resolution failures (expected, non-fatal) from genuine faults.

Example:
    >>> from ammo_manager.core.exceptions import ItemNotFoundError
    >>> raise ItemNotFoundError("Item not found", item_name="10mm", section="gear-ammo")
"""

from __future__ import annotations

from typing import Any


class AmmoManagerError(Exception):
    """Base exception for all ammo manager errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Resolution Exceptions
# =============================================================================


class ResolutionError(AmmoManagerError):
    """Base exception for entities that could not be resolved from the sheet.

    Resolution failures end processing of the current event only. The
    next roll or edit made by the player is the recovery path.
    """

    def __init__(
        self,
        message: str,
        *,
        character_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize resolution error with character context.

        Args:
            message: Human-readable error description.
            character_name: Name of the character being searched.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if character_name:
            combined_details["character_name"] = character_name
        super().__init__(message, details=combined_details)


class CharacterNotFoundError(ResolutionError):
    """Raised when an event references a character that does not exist."""


class ItemNotFoundError(ResolutionError):
    """Raised when a weapon or ammo row cannot be located by name."""

    def __init__(
        self,
        message: str,
        *,
        item_name: str | None = None,
        section: str | None = None,
        character_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize item lookup error with search context.

        Args:
            message: Human-readable error description.
            item_name: The (normalized) term that was searched for.
            section: Repeating section that was scanned.
            character_name: Name of the character being searched.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if item_name is not None:
            combined_details["item_name"] = item_name
        if section:
            combined_details["section"] = section
        super().__init__(message, character_name=character_name, details=combined_details)


# =============================================================================
# Validation & Configuration Exceptions
# =============================================================================


class MalformedValueError(AmmoManagerError):
    """Raised when a numeric sheet field holds a non-integer value.

    Sheet edits such as equipment swaps can leave stray text in count
    fields; the change handler reverts such values instead of propagating.
    """

    def __init__(
        self,
        message: str,
        *,
        attribute_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize malformed value error with field context.

        Args:
            message: Human-readable error description.
            attribute_name: Full name of the offending attribute.
            invalid_value: The value that failed to parse.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if attribute_name:
            combined_details["attribute_name"] = attribute_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


class ConfigurationError(AmmoManagerError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Dice Exceptions
# =============================================================================


class DiceRollError(AmmoManagerError):
    """Raised when combat dice cannot be rolled."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


# =============================================================================
# Dispatch Exceptions
# =============================================================================


class DispatchError(AmmoManagerError):
    """Raised when the event bus exceeds its redelivery ceiling.

    This signals a feedback loop between writes and change events that
    the equal-value guard failed to break.
    """

    def __init__(
        self,
        message: str,
        *,
        event_name: str | None = None,
        delivered: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dispatch error with queue context.

        Args:
            message: Human-readable error description.
            event_name: Name of the event being delivered when the limit hit.
            delivered: Number of events delivered in the current drain.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if event_name:
            combined_details["event_name"] = event_name
        if delivered is not None:
            combined_details["delivered"] = delivered
        super().__init__(message, details=combined_details)


__all__ = [
    "AmmoManagerError",
    "ResolutionError",
    "CharacterNotFoundError",
    "ItemNotFoundError",
    "MalformedValueError",
    "ConfigurationError",
    "DiceRollError",
    "DispatchError",
]
