"""Configuration management for the Fallout 2d20 ammo manager.

Settings are loaded with pydantic-settings from environment variables and
an optional .env file. The defaults match the official Roll20 Fallout 2d20
character sheet, so a stock installation needs no configuration at all.

Example:
    >>> from ammo_manager.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.sheet.weapons_section
    'pc-weapons'

Environment Variables:
    AMMO_MANAGER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    AMMO_MANAGER_JSON_LOGS: Emit JSON log lines instead of console output
    AMMO_MANAGER_ROLL_COMBAT_DIE_PATTERN: Regex matching combat die expressions
    AMMO_MANAGER_DISPATCH_MAX_EVENTS: Redelivery ceiling of the event bus
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ammo_manager.core.exceptions import ConfigurationError


class SheetSettings(BaseSettings):
    """Names used by the character sheet for sections and fields.

    Attributes:
        weapons_section: Repeating section holding weapon rows.
        ammo_section: Repeating section holding canonical ammo rows.
        weapon_name_field: Weapon name field.
        weapon_ammo_type_field: Free-text ammo type of a weapon.
        weapon_damage_field: Weapon damage rating (dice count).
        weapon_fire_rate_field: Weapon fire rate.
        weapon_qualities_field: Free-text weapon qualities.
        weapon_ammo_field: Denormalized ammo count on the weapon row.
        ammo_name_field: Canonical ammo name.
        ammo_quantity_field: Canonical ammo quantity.
        sheet_type_attribute: Attribute classifying the sheet.
        player_sheet_type: Value of the sheet type for player characters.
    """

    model_config = SettingsConfigDict(
        env_prefix="AMMO_MANAGER_SHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    weapons_section: str = Field(default="pc-weapons", description="Weapons section")
    ammo_section: str = Field(default="gear-ammo", description="Ammo gear section")
    weapon_name_field: str = Field(default="weapon_name")
    weapon_ammo_type_field: str = Field(default="weapon_ammo_type")
    weapon_damage_field: str = Field(default="weapon_damage")
    weapon_fire_rate_field: str = Field(default="weapon_fire_rate")
    weapon_qualities_field: str = Field(default="weapon_qualities")
    weapon_ammo_field: str = Field(default="weapon_ammo")
    ammo_name_field: str = Field(default="ammo_name")
    ammo_quantity_field: str = Field(default="ammo_quantity")
    sheet_type_attribute: str = Field(default="sheet_type")
    player_sheet_type: str = Field(default="pc")

    @property
    def row_field_names(self) -> tuple[str, ...]:
        """Every field name of weapon and ammo rows."""
        return (
            self.weapon_name_field,
            self.weapon_ammo_type_field,
            self.weapon_damage_field,
            self.weapon_fire_rate_field,
            self.weapon_qualities_field,
            self.weapon_ammo_field,
            self.ammo_name_field,
            self.ammo_quantity_field,
        )

    @field_validator("weapons_section", "ammo_section", mode="after")
    @classmethod
    def validate_section_name(cls, value: str) -> str:
        """Reject section names that would break attribute key parsing.

        Raises:
            ConfigurationError: If the name is empty or contains an underscore.
        """
        if not value or "_" in value:
            raise ConfigurationError(
                f"Section name {value!r} must be non-empty and contain no underscore",
                config_key="section",
            )
        return value


class RollSettings(BaseSettings):
    """Recognition rules for roll template messages.

    Attributes:
        attack_template: Roll template tag of attack rolls.
        damage_template: Roll template tag of damage rolls.
        combat_die_pattern: Regex matching the expression of one combat die.
        special_quality: Weapon quality marking double-cost (Gatling) weapons.
        sheet_name_marker: Content marker carrying the character name.
        weapon_name_marker: Content marker carrying the weapon name.
        fresh_roll_marker: Content marker present only on fresh damage rolls.
    """

    model_config = SettingsConfigDict(
        env_prefix="AMMO_MANAGER_ROLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    attack_template: str = Field(default="fallout_attacks")
    damage_template: str = Field(default="fallout_damage")
    combat_die_pattern: str = Field(
        default=r"1d6cs7",
        description="Regex matching the expression of a combat die sub-roll",
    )
    special_quality: str = Field(default="Gatling")
    sheet_name_marker: str = Field(default="sheetName")
    weapon_name_marker: str = Field(default="weaponName")
    fresh_roll_marker: str = Field(default="showAdditional")

    @field_validator("combat_die_pattern", mode="after")
    @classmethod
    def validate_pattern(cls, value: str) -> str:
        """Ensure the combat die pattern compiles.

        Raises:
            ConfigurationError: If the pattern is not a valid regex.
        """
        try:
            re.compile(value)
        except re.error as exc:
            raise ConfigurationError(
                f"Invalid combat die pattern: {exc}",
                config_key="combat_die_pattern",
            ) from exc
        return value


class NotificationSettings(BaseSettings):
    """Chat templates and fixed captions for notifications."""

    model_config = SettingsConfigDict(
        env_prefix="AMMO_MANAGER_NOTIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    injury_template: str = Field(default="fallout_injuries")
    gear_template: str = Field(default="fallout_gear")
    error_location: str = Field(default="AMMO API ERROR")
    empty_location: str = Field(default="CLICK!")
    no_ammo_spent_text: str = Field(default="No Ammo Spent")


class DispatchSettings(BaseSettings):
    """Configuration for the reference event bus.

    Attributes:
        max_events: Maximum deliveries within one queue drain before the
            bus reports a feedback loop.
    """

    model_config = SettingsConfigDict(
        env_prefix="AMMO_MANAGER_DISPATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_events: int = Field(
        default=1000,
        ge=1,
        le=1_000_000,
        description="Redelivery ceiling per drain",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration groups.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON logs.
        sheet: Sheet vocabulary.
        roll: Roll message recognition.
        notify: Chat notification templates.
        dispatch: Event bus limits.
    """

    model_config = SettingsConfigDict(
        env_prefix="AMMO_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Fallout Ammo Manager")
    app_version: str = Field(default="0.1.0")
    debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    sheet: SheetSettings = Field(default_factory=SheetSettings)
    roll: RollSettings = Field(default_factory=RollSettings)
    notify: NotificationSettings = Field(default_factory=NotificationSettings)
    dispatch: DispatchSettings = Field(default_factory=DispatchSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "SheetSettings",
    "RollSettings",
    "NotificationSettings",
    "DispatchSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
