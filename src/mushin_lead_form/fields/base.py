"""Shared pieces for field components."""

from dataclasses import dataclass
from html import escape
from typing import Optional


@dataclass(frozen=True)
class Option:
    """A choice in a select field."""
    value: str
    label: str
    description: str = ""


@dataclass
class FormField:
    """Label, required marker and error message around a field's input."""
    label: str
    error: Optional[str] = None
    required: bool = False
    html_for: str = ""
    css_class: str = ""

    def to_html(self, input_html: str) -> str:
        """Wrap rendered input HTML."""
        required_star = '<span class="text-danger">*</span>' if self.required else ''
        for_attr = f' for="{escape(self.html_for)}"' if self.html_for else ''
        html = f'<div class="mb-3 {escape(self.css_class)}">'
        html += f'<label{for_attr} class="form-label">{escape(self.label)} {required_star}</label>'
        html += input_html
        if self.error:
            html += f'<div class="invalid-feedback d-block" role="alert">{escape(self.error)}</div>'
        html += '</div>'
        return html


def error_html(field_id: str, error: Optional[str]) -> str:
    if not error:
        return ''
    return f'<div id="{escape(field_id)}-error" class="invalid-feedback d-block">{escape(error)}</div>'


def state_classes(error: Optional[str], disabled: bool) -> str:
    classes = []
    if error:
        classes.append("is-invalid")
    if disabled:
        classes.append("disabled")
    return " ".join(classes)
