"""Plain text input."""

import re
from html import escape
from typing import Callable, Optional

from .base import error_html, state_classes


class TextInput:
    """Controlled text/email input."""

    def __init__(
        self,
        name: str,
        on_change: Callable[[str], None],
        value: str = "",
        on_blur: Optional[Callable[[], None]] = None,
        input_type: str = "text",
        placeholder: str = "",
        error: Optional[str] = None,
        required: bool = False,
        disabled: bool = False,
        autocomplete: str = "",
        max_length: int = None,
        pattern: str = None,
    ):
        self.name = name
        self.on_change = on_change
        self.on_blur = on_blur
        self.value = value
        self.input_type = input_type
        self.placeholder = placeholder
        self.error = error
        self.required = required
        self.disabled = disabled
        self.autocomplete = autocomplete
        self.max_length = max_length
        self.pattern = pattern

    def handle_change(self, text: str):
        if self.disabled:
            return
        if self.max_length is not None:
            text = text[:self.max_length]
        self.value = text
        self.on_change(text)

    def handle_blur(self):
        if self.on_blur:
            self.on_blur()

    @property
    def matches_pattern(self) -> bool:
        """Browser-style pattern check; empty values always match."""
        if not self.pattern or not self.value:
            return True
        return re.fullmatch(self.pattern, self.value) is not None

    def to_html(self) -> str:
        attrs = [
            f'type="{escape(self.input_type)}"',
            f'class="form-control {state_classes(self.error, self.disabled)}"',
            f'id="{escape(self.name)}"',
            f'name="{escape(self.name)}"',
            f'value="{escape(self.value)}"',
        ]
        if self.placeholder:
            attrs.append(f'placeholder="{escape(self.placeholder)}"')
        if self.autocomplete:
            attrs.append(f'autocomplete="{escape(self.autocomplete)}"')
        if self.max_length is not None:
            attrs.append(f'maxlength="{self.max_length}"')
        if self.pattern:
            attrs.append(f'pattern="{escape(self.pattern)}"')
        if self.required:
            attrs.append('required')
        if self.disabled:
            attrs.append('disabled')
        if self.error:
            attrs.append(f'aria-invalid="true" aria-describedby="{escape(self.name)}-error"')
        return f'<input {" ".join(attrs)}>' + error_html(self.name, self.error)
