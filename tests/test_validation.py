"""Tests for field validators."""

import pytest

from mushin_lead_form.core.validation import (
    is_field_empty,
    sanitize_input,
    validate_address,
    validate_email,
    validate_length,
    validate_name,
    validate_phone,
    validate_price,
    validate_zip_code,
)


class TestValidatePhone:
    """Tests for phone validation."""

    def test_us_number(self):
        """Ten digits is valid."""
        assert validate_phone("5551234567")

    def test_formatted_us_number(self):
        """Punctuation is ignored."""
        assert validate_phone("(555) 123-4567")

    def test_too_short(self):
        """Six digits is too short."""
        assert not validate_phone("555123")

    def test_international_upper_bound(self):
        """Fifteen digits is the maximum."""
        assert validate_phone("+15551234567890")
        assert validate_phone("1" * 15)

    def test_sixteen_digits(self):
        """Sixteen digits is too many."""
        assert not validate_phone("1" * 16)

    def test_empty(self):
        """Empty is invalid."""
        assert not validate_phone("")


class TestValidateEmail:
    """Tests for email validation."""

    @pytest.mark.parametrize("email", ["a@b.com", "jane.doe+offers@example.co.uk", "x_y@sub-domain.org"])
    def test_valid(self, email):
        """Ordinary email addresses pass."""
        assert validate_email(email)

    @pytest.mark.parametrize("email", ["a@b", "a@@b.com", "", "plainaddress", "a b@c.com", "a@-b.com"])
    def test_invalid(self, email):
        """Malformed email addresses fail."""
        assert not validate_email(email)


class TestOtherValidators:
    """Tests for name, zip, address and price validators."""

    def test_name(self):
        """Names are letters, hyphens and apostrophes."""
        assert validate_name("Jane")
        assert validate_name("O'Brien-Smith")
        assert not validate_name("J")
        assert not validate_name("Jane3")

    def test_zip(self):
        """Five or nine digit ZIP codes."""
        assert validate_zip_code("43215")
        assert validate_zip_code("43215-1234")
        assert not validate_zip_code("4321")
        assert not validate_zip_code("43215-12")

    def test_address(self):
        """Addresses need a number, letters and some length."""
        assert validate_address("123 Main Street")
        assert not validate_address("Main Street Road")  # no number
        assert not validate_address("1234567890")  # no letters
        assert not validate_address("1 Elm St")  # too short

    def test_price(self):
        """Prices must be positive numbers."""
        assert validate_price("$250,000")
        assert validate_price("99.5")
        assert not validate_price("0")
        assert not validate_price("free")
        assert not validate_price("")


class TestHelpers:
    """Tests for sanitizing and length helpers."""

    def test_sanitize(self):
        """Angle brackets and whitespace are stripped."""
        assert sanitize_input("  <b>hello</b> ") == "bhello/b"

    def test_is_field_empty(self):
        """None and whitespace count as empty."""
        assert is_field_empty(None)
        assert is_field_empty("   ")
        assert not is_field_empty("x")

    def test_validate_length(self):
        """Length is checked after trimming."""
        assert validate_length("  abc ", 2, 3)
        assert not validate_length("abcd", 1, 3)
