"""Validation utilities for form fields."""

import re

_EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+$"
)
_NAME_PATTERN = re.compile(r"^[a-zA-Z\s'-]+$")
_ZIP_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")


def validate_phone(phone: str) -> bool:
    """Accept US (10 digit) or international (up to 15 digit) numbers in any format."""
    digits = re.sub(r"\D", "", phone or "")
    return 10 <= len(digits) <= 15


def validate_email(email: str) -> bool:
    """Check that an email address is structurally valid."""
    return bool(email) and _EMAIL_PATTERN.match(email) is not None


def validate_name(name: str) -> bool:
    """Letters, spaces, hyphens and apostrophes; at least two characters."""
    return bool(name) and len(name) >= 2 and _NAME_PATTERN.match(name) is not None


def validate_zip_code(zip_code: str) -> bool:
    """US ZIP or ZIP+4."""
    return bool(zip_code) and _ZIP_PATTERN.match(zip_code) is not None


def validate_address(address: str) -> bool:
    """Basic street address check: long enough, has a number and a word."""
    if not address:
        return False
    return (
        len(address.strip()) >= 10
        and re.search(r"\d", address) is not None
        and re.search(r"[a-zA-Z]", address) is not None
    )


def validate_price(price: str) -> bool:
    """Accept prices like "$250,000" or "250000"."""
    cleaned = re.sub(r"[$,\s]", "", price or "")
    try:
        return float(cleaned) > 0
    except ValueError:
        return False


def sanitize_input(value: str) -> str:
    """Trim and strip angle brackets."""
    return re.sub(r"[<>]", "", (value or "").strip())


def is_field_empty(value) -> bool:
    """True for None, empty, or whitespace-only values."""
    return not value or len(str(value).strip()) == 0


def validate_length(value: str, min_length: int, max_length: int) -> bool:
    """Check the trimmed length falls within bounds."""
    length = len((value or "").strip())
    return min_length <= length <= max_length
