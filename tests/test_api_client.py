"""Tests for the lead API client."""

import pytest
import requests

from mushin_lead_form.api.client import LeadApiClient
from mushin_lead_form.exceptions import LeadApiError

from fakes import FakeResponse, FakeSession


def make_client(response=None, error=None):
    session = FakeSession(response=response, error=error)
    return LeadApiClient("https://offers.example.com/", session=session, timeout=3), session


class TestSubmitPartial:
    """Tests for POST /api/submit-partial."""

    def test_success(self):
        """A lead id comes back from the partial endpoint."""
        client, session = make_client(FakeResponse(200, {"leadId": "L1", "status": "ok"}))
        result = client.submit_partial({"address": "123 Main St", "phone": "5551234567", "consent": True})

        assert result.lead_id == "L1"
        method, url, kwargs = session.calls[0]
        assert method == "POST"
        assert url == "https://offers.example.com/api/submit-partial"
        assert kwargs["json"]["phone"] == "5551234567"
        assert kwargs["timeout"] == 3

    def test_error_body(self):
        """The server error message is surfaced."""
        client, _ = make_client(FakeResponse(400, {"error": "Invalid phone"}))
        with pytest.raises(LeadApiError) as exc_info:
            client.submit_partial({})
        assert exc_info.value.message == "Invalid phone"
        assert exc_info.value.status_code == 400

    def test_error_without_body(self):
        """A failure without a body uses the default message."""
        client, _ = make_client(FakeResponse(502, None))
        with pytest.raises(LeadApiError) as exc_info:
            client.submit_partial({})
        assert exc_info.value.message == "Failed to submit partial lead"

    def test_missing_lead_id(self):
        """A reply without a lead id is invalid."""
        client, _ = make_client(FakeResponse(200, {"status": "ok"}))
        with pytest.raises(LeadApiError, match="Invalid response"):
            client.submit_partial({})

    def test_transport_error(self):
        """Connection failures become LeadApiError."""
        client, _ = make_client(error=requests.ConnectionError("refused"))
        with pytest.raises(LeadApiError) as exc_info:
            client.submit_partial({})
        assert exc_info.value.status_code is None


class TestSubmitForm:
    """Tests for POST /api/submit-form."""

    def test_success(self):
        """A successful submission returns the parsed reply."""
        client, session = make_client(FakeResponse(200, {"success": True, "leadId": "L1", "message": "Thanks"}))
        result = client.submit_form({"address": "123 Main St"})

        assert result.success
        assert result.lead_id == "L1"
        assert result.message == "Thanks"
        assert session.calls[0][1].endswith("/api/submit-form")

    def test_unsuccessful_body_is_returned(self):
        """success false is returned, not raised."""
        client, _ = make_client(FakeResponse(200, {"success": False, "error": "Duplicate"}))
        result = client.submit_form({})
        assert not result.success
        assert result.error == "Duplicate"

    def test_server_error(self):
        """Server errors raise with the server message."""
        client, _ = make_client(FakeResponse(500, {"error": "Database unavailable"}))
        with pytest.raises(LeadApiError, match="Database unavailable"):
            client.submit_form({})

    def test_non_json_success(self):
        """A non-JSON reply is invalid."""
        client, _ = make_client(FakeResponse(200, None))
        with pytest.raises(LeadApiError, match="Invalid response"):
            client.submit_form({})
