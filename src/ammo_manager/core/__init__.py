"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        AmmoManagerError: Base exception for all application errors.
        ResolutionError: A character or sheet row could not be resolved.
        MalformedValueError: A count field holds a non-integer value.
        ConfigurationError: Configuration-related errors.
        DispatchError: The event bus hit its redelivery ceiling.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from ammo_manager.core.config import (
    DispatchSettings,
    NotificationSettings,
    RollSettings,
    Settings,
    SheetSettings,
    clear_settings_cache,
    get_settings,
)
from ammo_manager.core.exceptions import (
    AmmoManagerError,
    CharacterNotFoundError,
    ConfigurationError,
    DiceRollError,
    DispatchError,
    ItemNotFoundError,
    MalformedValueError,
    ResolutionError,
)
from ammo_manager.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "AmmoManagerError",
    "ResolutionError",
    "CharacterNotFoundError",
    "ItemNotFoundError",
    "MalformedValueError",
    "ConfigurationError",
    "DiceRollError",
    "DispatchError",
    # Configuration
    "Settings",
    "SheetSettings",
    "RollSettings",
    "NotificationSettings",
    "DispatchSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
