"""Select (dropdown) field."""

from html import escape
from typing import Callable, List, Optional

from .base import Option, error_html, state_classes


class SelectField:
    """Controlled dropdown restricted to its options."""

    def __init__(
        self,
        name: str,
        options: List[Option],
        on_change: Callable[[str], None],
        value: str = "",
        placeholder: str = "Select an option",
        error: Optional[str] = None,
        required: bool = False,
        disabled: bool = False,
    ):
        self.name = name
        self.options = list(options)
        self.on_change = on_change
        self.value = value
        self.placeholder = placeholder
        self.error = error
        self.required = required
        self.disabled = disabled

    def handle_change(self, value: str) -> bool:
        """Select a value; unknown values are ignored."""
        if self.disabled:
            return False
        if value and self.get_option(value) is None:
            return False
        self.value = value
        self.on_change(value)
        return True

    def get_option(self, value: str) -> Optional[Option]:
        for option in self.options:
            if option.value == value:
                return option
        return None

    @property
    def selected_description(self) -> str:
        option = self.get_option(self.value) if self.value else None
        return option.description if option else ""

    def to_html(self) -> str:
        required_attr = 'required' if self.required else ''
        disabled_attr = 'disabled' if self.disabled else ''
        options_html = f'<option value="" disabled {"selected" if not self.value else ""}>{escape(self.placeholder)}</option>'
        for opt in self.options:
            selected = 'selected' if opt.value == self.value else ''
            options_html += f'<option value="{escape(opt.value)}" {selected}>{escape(opt.label)}</option>'
        html = (
            f'<select class="form-select {state_classes(self.error, self.disabled)}" id="{escape(self.name)}" '
            f'name="{escape(self.name)}" {required_attr} {disabled_attr}>{options_html}</select>'
        )
        html += error_html(self.name, self.error)
        if self.selected_description:
            html += f'<div class="form-text">{escape(self.selected_description)}</div>'
        return html
