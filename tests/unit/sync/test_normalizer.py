"""Tests for ammunition name normalization."""

from __future__ import annotations

import pytest

from ammo_manager.sync.normalizer import names_match, normalize


class TestNormalize:
    """Tests for normalize."""

    def test_exact_returns_input(self) -> None:
        assert normalize("0.308 Rounds", exact=True) == "0.308 Rounds"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0.308", ".308"),
            (".308", ".308"),
            ("0.45", ".45"),
            ("5 mm", "5mm"),
            ("5mm", "5mm"),
            ("10  mm", "10mm"),
            ("Fusion Cores", "Fusion Core"),
            ("Fusion Core", "Fusion Core"),
            ("0.50 Rounds", ".50 Round"),
        ],
    )
    def test_fuzzy(self, raw: str, expected: str) -> None:
        assert normalize(raw) == expected

    def test_leading_zero_only_before_decimal_point(self) -> None:
        assert normalize("05mm") == "05mm"

    def test_single_trailing_s_stripped(self) -> None:
        assert normalize("Flamer Fuels") == "Flamer Fuel"
        assert normalize("Mass") == "Mas"

    def test_equivalent_spellings_share_a_key(self) -> None:
        assert normalize(".308") == normalize("0.308")
        assert normalize("5 mm") == normalize("5mm")


class TestNamesMatch:
    """Tests for names_match."""

    @pytest.mark.parametrize(
        ("search", "stored"),
        [
            ("0.308", ".308"),
            (".308", "0.308"),
            ("5 mm", "5mm"),
            ("Fusion Cores", "Fusion Core"),
            ("Fusion Cell", "Fusion Cells"),
            ("10mm", "10mm Ammo"),
            ("10MM", "10mm"),
        ],
    )
    def test_fuzzy_matches(self, search: str, stored: str) -> None:
        assert names_match(search, stored)

    def test_fuzzy_mismatch(self) -> None:
        assert not names_match(".44 Magnum", "10mm")

    def test_empty_search_never_matches(self) -> None:
        assert not names_match("", "10mm")
        assert not names_match("   ", "10mm")

    def test_substring_false_positive(self) -> None:
        # Two distinct calibres sharing a substring collide.
        assert names_match("5mm", ".45mm")

    def test_exact_is_case_insensitive_equality(self) -> None:
        assert names_match("10MM PISTOL", "10mm Pistol", exact=True)
        assert not names_match("10mm", "10mm Pistol", exact=True)
        assert not names_match("0.308", ".308", exact=True)
