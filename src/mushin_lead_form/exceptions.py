"""Exception types shared across the lead form engine."""

from typing import Optional


class LeadFormError(Exception):
    """Base class for lead form errors."""


class ConfigurationError(LeadFormError):
    """Raised when environment configuration is invalid."""


class LeadApiError(LeadFormError):
    """Raised when the lead API rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UnknownFieldError(LeadFormError, KeyError):
    """Raised when code references a field that is not part of the form."""

    def __init__(self, field_name: str):
        super().__init__(field_name)
        self.field_name = field_name

    def __str__(self) -> str:
        return f"Unknown form field: {self.field_name}"


class ReadOnlyFieldError(LeadFormError):
    """Raised when code tries to set a field the controller manages itself."""

    def __init__(self, field_name: str):
        super().__init__(field_name)
        self.field_name = field_name

    def __str__(self) -> str:
        return f"Form field is read-only: {self.field_name}"
