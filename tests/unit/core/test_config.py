"""Tests for configuration management."""

from __future__ import annotations

import pytest

from ammo_manager.core.config import (
    DispatchSettings,
    RollSettings,
    Settings,
    SheetSettings,
    clear_settings_cache,
    get_settings,
)
from ammo_manager.core.exceptions import ConfigurationError


class TestSheetSettings:
    """Tests for the sheet vocabulary."""

    def test_defaults_match_official_sheet(self) -> None:
        settings = SheetSettings()

        assert settings.weapons_section == "pc-weapons"
        assert settings.ammo_section == "gear-ammo"
        assert settings.weapon_ammo_field == "weapon_ammo"
        assert settings.ammo_quantity_field == "ammo_quantity"
        assert settings.player_sheet_type == "pc"

    def test_row_field_names(self) -> None:
        names = SheetSettings().row_field_names

        assert "weapon_ammo" in names
        assert "weapon_ammo_type" in names
        assert "ammo_quantity" in names
        assert len(names) == 8

    def test_section_with_underscore_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            SheetSettings(weapons_section="pc_weapons")

        assert "pc_weapons" in str(exc_info.value)

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AMMO_MANAGER_SHEET_AMMO_SECTION", "npc-ammo")

        assert SheetSettings().ammo_section == "npc-ammo"


class TestRollSettings:
    """Tests for roll recognition settings."""

    def test_defaults(self) -> None:
        settings = RollSettings()

        assert settings.attack_template == "fallout_attacks"
        assert settings.damage_template == "fallout_damage"
        assert settings.combat_die_pattern == "1d6cs7"
        assert settings.special_quality == "Gatling"
        assert settings.fresh_roll_marker == "showAdditional"

    def test_invalid_pattern_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            RollSettings(combat_die_pattern="1d6(")

        assert exc_info.value.details["config_key"] == "combat_die_pattern"


class TestDispatchSettings:
    """Tests for the event bus limits."""

    def test_default_ceiling(self) -> None:
        assert DispatchSettings().max_events == 1000

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AMMO_MANAGER_DISPATCH_MAX_EVENTS", "50")

        assert DispatchSettings().max_events == 50


class TestSettings:
    """Tests for the aggregated settings."""

    def test_default_settings(self) -> None:
        settings = Settings()

        assert settings.app_name == "Fallout Ammo Manager"
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.sheet.weapons_section == "pc-weapons"
        assert settings.notify.injury_template == "fallout_injuries"

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AMMO_MANAGER_LOG_LEVEL", "DEBUG")

        assert Settings().log_level == "DEBUG"


class TestGetSettings:
    """Tests for the settings singleton."""

    def test_returns_cached_instance(self) -> None:
        assert get_settings() is get_settings()

    def test_clear_cache_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("AMMO_MANAGER_DEBUG", "true")
        clear_settings_cache()

        second = get_settings()

        assert second is not first
        assert second.debug is True

    def test_invalid_configuration_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AMMO_MANAGER_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError):
            get_settings()
