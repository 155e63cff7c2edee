"""Phone number input with live formatting."""

from html import escape
from typing import Callable, Optional

from ..core.formatting import (
    US_PHONE_LENGTH,
    cursor_position,
    format_phone_number,
    normalize_phone_number,
)
from .base import error_html, state_classes


class PhoneInput:
    """Keeps digits as the value and a punctuated string for display.

    on_change always receives the normalized value.
    """

    def __init__(
        self,
        on_change: Callable[[str], None],
        value: str = "",
        on_blur: Optional[Callable[[], None]] = None,
        error: Optional[str] = None,
        placeholder: str = "(555) 123-4567",
        required: bool = False,
        disabled: bool = False,
    ):
        self.on_change = on_change
        self.on_blur = on_blur
        self.value = normalize_phone_number(value)
        self.display_value = format_phone_number(self.value)
        self.error = error
        self.placeholder = placeholder
        self.required = required
        self.disabled = disabled
        self.is_focused = False
        self.cursor = len(self.display_value)

    def sync(self, value: str):
        """Controller value changed; refresh the display."""
        self.value = normalize_phone_number(value)
        self.display_value = format_phone_number(self.value)

    def handle_change(self, text: str, cursor: Optional[int] = None) -> bool:
        """Process typed input. Returns False when the keystroke is rejected."""
        normalized = normalize_phone_number(text)

        if len(text) < len(self.display_value):
            self._commit(normalized)
            return True

        digit_count = len(normalized.lstrip("+"))
        if digit_count > US_PHONE_LENGTH and not normalized.startswith("+"):
            return False

        self._commit(normalized)
        if cursor is not None:
            self.cursor = cursor_position(normalized, cursor)
        return True

    def handle_paste(self, text: str):
        """Pasted text is normalized and formatted in one step."""
        self._commit(normalize_phone_number(text))

    def handle_focus(self):
        self.is_focused = True

    def handle_blur(self):
        self.is_focused = False
        if self.on_blur:
            self.on_blur()

    def _commit(self, normalized: str):
        self.value = normalized
        self.display_value = format_phone_number(normalized)
        self.cursor = len(self.display_value)
        self.on_change(normalized)

    @property
    def helper_text(self) -> str:
        if self.error:
            return self.error
        if self.is_focused:
            return "Enter a 10-digit phone number"
        return ""

    def to_html(self, field_id: str = "phone") -> str:
        required_attr = 'required' if self.required else ''
        disabled_attr = 'disabled' if self.disabled else ''
        described = f'aria-describedby="{escape(field_id)}-error"' if self.error else ''
        html = f'''<input type="tel" class="form-control {state_classes(self.error, self.disabled)}" id="{escape(field_id)}"
            name="phone" value="{escape(self.display_value)}" placeholder="{escape(self.placeholder)}"
            autocomplete="tel" inputmode="tel" aria-label="Phone number"
            aria-invalid="{str(bool(self.error)).lower()}" {described} {required_attr} {disabled_attr}>'''
        html += error_html(field_id, self.error)
        return html
