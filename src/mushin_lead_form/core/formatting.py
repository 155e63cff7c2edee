"""Phone number normalization and display formatting.

The normalized form (digits, plus a leading "+" for international numbers)
is what gets stored and validated. The punctuated display form is derived
from it and never persisted.
"""

import re

US_PHONE_LENGTH = 10


def normalize_phone_number(value: str) -> str:
    """Strip everything but digits, keeping a leading international "+"."""
    if not value:
        return ""
    value = value.strip()
    digits = re.sub(r"\D", "", value)
    if value.startswith("+"):
        return "+" + digits
    return digits


def format_phone_number(value: str) -> str:
    """Format a phone number for display, e.g. "(555) 123-4567"."""
    normalized = normalize_phone_number(value)
    if normalized.startswith("+"):
        return normalized

    digits = normalized
    if len(digits) < 3:
        return digits
    if len(digits) < 6:
        return f"({digits[:3]}) {digits[3:]}".rstrip()
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}".rstrip("-")


def is_international(value: str) -> bool:
    return normalize_phone_number(value).startswith("+")


def cursor_position(normalized: str, cursor: int) -> int:
    """Where the caret lands after a raw-digit position is reformatted."""
    position = cursor
    if len(normalized) >= 3 and cursor > 0:
        position += 1  # after "("
    if len(normalized) >= 3 and cursor > 3:
        position += 2  # after ") "
    if len(normalized) >= 6 and cursor > 6:
        position += 1  # after "-"
    return position
