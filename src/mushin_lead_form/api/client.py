"""HTTP client for the partial and complete lead endpoints."""

import logging
from typing import Optional, Dict, Any

import requests
from pydantic import ValidationError

from ..exceptions import LeadApiError
from .schemas import PartialSubmitResponse, FormSubmitResponse, ErrorResponse

logger = logging.getLogger(__name__)

PARTIAL_PATH = "/api/submit-partial"
FORM_PATH = "/api/submit-form"


class LeadApiClient:
    """Posts lead data to the website backend.

    Every failure (transport error, non-2xx status, malformed body) is raised
    as LeadApiError so callers have a single thing to catch.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15.0
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def submit_partial(self, payload: Dict[str, Any]) -> PartialSubmitResponse:
        """Save the address/phone/consent portion of a lead."""
        body = self._post(PARTIAL_PATH, payload, "Failed to submit partial lead")
        try:
            return PartialSubmitResponse.model_validate(body)
        except ValidationError as e:
            raise LeadApiError("Invalid response from server") from e

    def submit_form(self, payload: Dict[str, Any]) -> FormSubmitResponse:
        """Submit the complete lead record."""
        body = self._post(FORM_PATH, payload, "Failed to submit form")
        try:
            return FormSubmitResponse.model_validate(body)
        except ValidationError as e:
            raise LeadApiError("Invalid response from server") from e

    def _post(self, path: str, payload: Dict[str, Any], default_error: str) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Request to {path} failed: {e}")
            raise LeadApiError(default_error) from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.ok:
            message = default_error
            if isinstance(body, dict):
                try:
                    message = ErrorResponse.model_validate(body).error or default_error
                except ValidationError:
                    pass
            logger.warning(f"{path} returned {response.status_code}: {message}")
            raise LeadApiError(message, status_code=response.status_code)

        if not isinstance(body, dict):
            raise LeadApiError("Invalid response from server", status_code=response.status_code)
        return body
