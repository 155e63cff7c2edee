"""Data models for the multi-step lead form."""

from dataclasses import dataclass, field, fields, asdict
from enum import Enum
from typing import Optional, Dict, Any


class FormStep(Enum):
    """Steps of the lead form wizard, in order."""

    INITIAL = "initial"
    PROPERTY_DETAILS = "property-details"
    TIMELINE = "timeline"
    CONTACT = "contact"
    THANK_YOU = "thank-you"

    def next(self) -> "FormStep":
        """Get the step that follows this one (thank-you is terminal)."""
        steps = list(FormStep)
        index = steps.index(self)
        return steps[min(index + 1, len(steps) - 1)]


class SubmissionType(Enum):
    """How much of the lead has been submitted."""

    PARTIAL = "partial"
    COMPLETE = "complete"


# Form errors keyed by field name; "form" holds the form-level message.
FormErrors = Dict[str, str]


@dataclass
class LeadFormData:
    """A prospective seller's property and contact details."""

    # Address (required)
    address: str = ""
    street_address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    place_id: str = ""

    # Contact (phone and consent required)
    phone: str = ""  # normalized digits, see core.formatting
    consent: bool = False
    first_name: str = ""
    last_name: str = ""
    email: str = ""

    # Property details
    is_property_listed: Optional[bool] = None
    property_condition: str = ""
    timeframe: str = ""
    price: str = ""
    comments: str = ""
    referral_source: str = ""

    # System tracking
    timestamp: str = ""
    last_updated: str = ""
    lead_id: str = ""
    submission_type: Optional[SubmissionType] = None


@dataclass
class FormState(LeadFormData):
    """Lead data plus transient UI flags."""

    is_submitting: bool = False
    error: str = ""

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    def lead_data(self) -> Dict[str, Any]:
        """Wire form of the lead record, without the UI flags."""
        data = self.to_dict()
        data.pop("isSubmitting", None)
        data.pop("error", None)
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary for JSON storage and the API."""
        data = {}
        for name, value in asdict(self).items():
            if isinstance(value, SubmissionType):
                value = value.value
            data[_to_camel(name)] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormState":
        """Build a state from stored data; stored values win over defaults."""
        known = set(cls.field_names())
        values = {}
        for key, value in data.items():
            name = _to_snake(key)
            if name not in known:
                continue
            if name == "submission_type" and value:
                try:
                    value = SubmissionType(value)
                except ValueError:
                    value = None
            values[name] = value
        return cls(**values)


@dataclass
class SubmissionResponse:
    """Outcome of a partial or complete submission."""

    success: bool
    error: Optional[str] = None
    message: Optional[str] = None
    lead_id: Optional[str] = None


@dataclass
class StepTransition:
    """Result of advancing the wizard by one step."""

    from_step: FormStep
    to_step: FormStep
    advanced: bool
    partial_result: Optional[SubmissionResponse] = None
    missing: list = field(default_factory=list)


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _to_snake(name: str) -> str:
    out = []
    for char in name:
        if char.isupper():
            out.append("_")
            out.append(char.lower())
        else:
            out.append(char)
    return "".join(out)
