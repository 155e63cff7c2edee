"""Address autocomplete input.

Only a complete, structured address picked from the lookup provider is ever
passed on. Free-typed text stays local to the widget.
"""

import logging
from dataclasses import dataclass
from html import escape
from typing import Any, Callable, Dict, List, Optional

from .base import error_html, state_classes

logger = logging.getLogger(__name__)

INCOMPLETE_ADDRESS_MESSAGE = "Please select a complete address from the dropdown"


@dataclass
class AddressData:
    """A structured address returned by the lookup provider."""
    formatted_address: str = ""
    street_number: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    place_id: str = ""
    lat: Optional[float] = None
    lng: Optional[float] = None

    @property
    def street_address(self) -> str:
        return f"{self.street_number} {self.street}".strip()

    @property
    def is_complete(self) -> bool:
        return all([self.street_number, self.street, self.city, self.state, self.postal_code])

    def to_form_data(self) -> Dict[str, str]:
        """Controller fields for this address."""
        return {
            'address': self.formatted_address,
            'street_address': self.street_address,
            'city': self.city,
            'state': self.state,
            'postal_code': self.postal_code,
            'place_id': self.place_id,
        }

    @classmethod
    def from_place_result(cls, place: Dict[str, Any]) -> "AddressData":
        """Parse a Google Places details result."""
        parts: Dict[str, Dict[str, str]] = {}
        for component in place.get('address_components', []):
            for component_type in component.get('types', []):
                parts.setdefault(component_type, component)

        def long_name(*types: str) -> str:
            for t in types:
                if t in parts:
                    return parts[t].get('long_name', '')
            return ''

        def short_name(*types: str) -> str:
            for t in types:
                if t in parts:
                    return parts[t].get('short_name', '')
            return ''

        location = place.get('geometry', {}).get('location', {})
        return cls(
            formatted_address=place.get('formatted_address', ''),
            street_number=long_name('street_number'),
            street=long_name('route'),
            city=long_name('locality', 'postal_town', 'sublocality', 'administrative_area_level_3'),
            state=short_name('administrative_area_level_1'),
            postal_code=long_name('postal_code'),
            place_id=place.get('place_id', ''),
            lat=location.get('lat'),
            lng=location.get('lng'),
        )


class AddressAutocomplete:
    """Text box bound to an address lookup; emits on confirmed selection only."""

    def __init__(
        self,
        on_change: Callable[[AddressData], None],
        value: str = "",
        error: Optional[str] = None,
        placeholder: str = "Enter your property address",
        required: bool = False,
        disabled: bool = False,
        read_only: bool = False,
    ):
        self.on_change = on_change
        self.value = value
        self.local_value = value
        self.error = error
        self.placeholder = placeholder
        self.required = required
        self.disabled = disabled
        self.read_only = read_only
        self.has_selected = False
        self.is_processing = False
        self.selection_error: Optional[str] = None
        self.suggestions: List[Any] = []

    @property
    def lookup_enabled(self) -> bool:
        return not (self.read_only or self.disabled)

    def handle_input_change(self, text: str):
        """The user is typing; nothing is committed."""
        self.local_value = text
        self.has_selected = False
        self.selection_error = None

    def handle_address_select(self, address: AddressData) -> bool:
        """A suggestion was picked. Returns whether it was accepted."""
        if not self.lookup_enabled:
            return False

        self.is_processing = True
        try:
            if not address.is_complete:
                logger.error(f"Incomplete address selected: {address.formatted_address!r}")
                self.has_selected = False
                self.selection_error = INCOMPLETE_ADDRESS_MESSAGE
                return False

            self.local_value = address.formatted_address
            self.value = address.formatted_address
            self.has_selected = True
            self.selection_error = None
            self.on_change(address)
            return True
        finally:
            self.is_processing = False

    def handle_blur(self):
        if self.local_value and not self.has_selected and not self.read_only:
            self.selection_error = INCOMPLETE_ADDRESS_MESSAGE

    @property
    def status_message(self) -> str:
        if self.error:
            return self.error
        if self.has_selected:
            return "Address verified"
        if self.local_value:
            return self.selection_error or "Please select an address from the dropdown"
        return ""

    def to_html(self, field_id: str = "address") -> str:
        if self.read_only:
            return (
                f'<div class="form-control-plaintext" id="{escape(field_id)}">'
                f'{escape(self.value or "No address provided")}</div>'
            )

        required_attr = 'required' if self.required else ''
        disabled_attr = 'disabled' if self.disabled or self.is_processing else ''
        html = f'''<input type="text" class="form-control {state_classes(self.error, self.disabled)}" id="{escape(field_id)}"
            name="address" value="{escape(self.local_value)}" placeholder="{escape(self.placeholder)}"
            autocomplete="street-address" aria-label="Property address"
            aria-invalid="{str(bool(self.error)).lower()}" {required_attr} {disabled_attr}>'''
        if self.error:
            html += error_html(field_id, self.error)
        elif self.has_selected:
            html += f'<div id="{escape(field_id)}-success" class="valid-feedback d-block">Address verified</div>'
        elif self.local_value:
            html += f'<div class="form-text">{escape(self.status_message)}</div>'
        return html
