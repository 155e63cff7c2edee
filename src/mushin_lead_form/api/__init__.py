"""Client for the lead submission API."""

from .client import LeadApiClient
from .schemas import PartialSubmitResponse, FormSubmitResponse

__all__ = ["LeadApiClient", "PartialSubmitResponse", "FormSubmitResponse"]
