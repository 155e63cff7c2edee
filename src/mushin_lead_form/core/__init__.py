"""Core form engine: data model, validation, formatting and the state controller."""

from .models import (
    FormStep,
    SubmissionType,
    LeadFormData,
    FormState,
    FormErrors,
    SubmissionResponse,
    StepTransition,
)
from .controller import FormController, validate_field
from .formatting import normalize_phone_number, format_phone_number
from .validation import validate_phone, validate_email

__all__ = [
    "FormStep",
    "SubmissionType",
    "LeadFormData",
    "FormState",
    "FormErrors",
    "SubmissionResponse",
    "StepTransition",
    "FormController",
    "validate_field",
    "normalize_phone_number",
    "format_phone_number",
    "validate_phone",
    "validate_email",
]
