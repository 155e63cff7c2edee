"""Tests for phone formatting."""

import pytest

from mushin_lead_form.core.formatting import (
    cursor_position,
    format_phone_number,
    is_international,
    normalize_phone_number,
)


class TestNormalize:
    """Tests for normalize_phone_number."""

    def test_strips_punctuation(self):
        """Punctuation and spaces are removed."""
        assert normalize_phone_number("(555) 123-4567") == "5551234567"

    def test_keeps_international_prefix(self):
        """A leading plus is kept."""
        assert normalize_phone_number("+44 20 7946 0958") == "+442079460958"
        assert is_international("+44 20 7946 0958")

    def test_empty(self):
        """Empty input normalizes to an empty string."""
        assert normalize_phone_number("") == ""
        assert normalize_phone_number(None) == ""


class TestFormat:
    """Tests for format_phone_number."""

    @pytest.mark.parametrize("digits, expected", [
        ("55", "55"),
        ("555", "(555)"),
        ("5551", "(555) 1"),
        ("555123", "(555) 123"),
        ("5551234", "(555) 123-4"),
        ("5551234567", "(555) 123-4567"),
    ])
    def test_progressive(self, digits, expected):
        """Formatting grows as digits are typed."""
        assert format_phone_number(digits) == expected

    def test_international_unpunctuated(self):
        """International numbers are not punctuated."""
        assert format_phone_number("+442079460958") == "+442079460958"

    @pytest.mark.parametrize("raw", [
        "5551234567", "(555) 123-4567", "555.123.4567 ", "+1 (555) 123-4567", "12", "555123456789", "+",
    ])
    def test_round_trip(self, raw):
        """Formatting never changes the stored digits."""
        normalized = normalize_phone_number(raw)
        assert normalize_phone_number(format_phone_number(normalized)) == normalized


class TestCursorPosition:
    """Tests for caret placement after formatting."""

    def test_short_numbers_unchanged(self):
        """No punctuation before the area code is complete."""
        assert cursor_position("55", 2) == 2

    def test_after_area_code(self):
        """The caret skips the area code punctuation."""
        assert cursor_position("5551", 4) == 7

    def test_after_hyphen(self):
        """The caret skips the hyphen."""
        assert cursor_position("5551234", 7) == 11
