"""Stand-ins for requests sessions, responses and the lead API client."""

import requests

from mushin_lead_form.api.schemas import FormSubmitResponse, PartialSubmitResponse


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.body is None:
            raise ValueError("No JSON object could be decoded")
        return self.body

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response

    def post(self, url, **kwargs):
        return self._request("POST", url, **kwargs)

    def get(self, url, **kwargs):
        return self._request("GET", url, **kwargs)


class FakeApiClient:
    """Records calls instead of talking HTTP."""

    def __init__(self, lead_id="L0", form_body=None, partial_error=None, form_error=None):
        self.lead_id = lead_id
        self.form_body = form_body if form_body is not None else {"success": True, "leadId": "L1"}
        self.partial_error = partial_error
        self.form_error = form_error
        self.partial_calls = []
        self.form_calls = []
        self.on_submit_form = None

    def submit_partial(self, payload):
        self.partial_calls.append(payload)
        if self.partial_error:
            raise self.partial_error
        return PartialSubmitResponse(leadId=self.lead_id)

    def submit_form(self, payload):
        self.form_calls.append(payload)
        if self.on_submit_form:
            self.on_submit_form()
        if self.form_error:
            raise self.form_error
        return FormSubmitResponse.model_validate(self.form_body)


PLACE_RESULT = {
    "formatted_address": "123 Main St, Columbus, OH 43215, USA",
    "place_id": "ChIJabc",
    "geometry": {"location": {"lat": 39.96, "lng": -83.0}},
    "address_components": [
        {"long_name": "123", "short_name": "123", "types": ["street_number"]},
        {"long_name": "Main Street", "short_name": "Main St", "types": ["route"]},
        {"long_name": "Columbus", "short_name": "Columbus", "types": ["locality", "political"]},
        {"long_name": "Franklin County", "short_name": "Franklin County",
         "types": ["administrative_area_level_2", "political"]},
        {"long_name": "Ohio", "short_name": "OH", "types": ["administrative_area_level_1", "political"]},
        {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
        {"long_name": "43215", "short_name": "43215", "types": ["postal_code"]},
    ],
}
