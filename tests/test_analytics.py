"""Tests for conversion tracking."""

from mushin_lead_form.tracking.analytics import (
    AnalyticsEvent,
    AnalyticsProvider,
    AnalyticsTracker,
    FacebookConversionsProvider,
    GoogleAnalyticsProvider,
    LoggingProvider,
)

from fakes import FakeResponse, FakeSession


class RecordingProvider(AnalyticsProvider):
    def __init__(self):
        self.events = []

    def get_name(self):
        return "recording"

    def send(self, event):
        self.events.append(event)
        return True


class BrokenProvider(AnalyticsProvider):
    def get_name(self):
        return "broken"

    def send(self, event):
        raise RuntimeError("tracker blocked")


class TestAnalyticsTracker:
    """Tests for AnalyticsTracker fan-out."""

    def test_no_providers_is_noop(self):
        """With no providers nothing is sent."""
        tracker = AnalyticsTracker()
        assert tracker.track_event("generate_lead") == 0
        tracker.track_submission_success("L1")

    def test_failing_provider_does_not_raise(self):
        """A failing provider does not stop the others."""
        recorder = RecordingProvider()
        tracker = AnalyticsTracker([BrokenProvider(), recorder])
        assert tracker.track_event("generate_lead") == 1
        assert len(recorder.events) == 1

    def test_lead_generated(self):
        """A partial lead sends the GA and pixel events."""
        recorder = RecordingProvider()
        AnalyticsTracker([recorder]).track_lead_generated("L1")
        names = [e.event for e in recorder.events]
        assert names == ["generate_lead", "Lead"]
        assert recorder.events[0].custom_parameters["currency"] == "USD"

    def test_submission_success(self):
        """A complete submission sends the success, pixel and trigger events."""
        recorder = RecordingProvider()
        AnalyticsTracker([recorder]).track_submission_success("L1")
        names = [e.event for e in recorder.events]
        assert names == ["form_submission_success", "Lead", "trigger"]
        params = recorder.events[0].params()
        assert params["event_category"] == "Lead"
        assert params["event_label"] == "Complete"

    def test_ads_conversion_when_configured(self):
        """A Google Ads conversion is added when configured."""
        recorder = RecordingProvider()
        tracker = AnalyticsTracker([recorder], google_ads_id="AW-123", google_ads_label="abc")
        tracker.track_submission_success("L1")
        conversion = recorder.events[-1]
        assert conversion.event == "conversion"
        assert conversion.custom_parameters["send_to"] == "AW-123/abc"


class TestProviders:
    """Tests for the concrete providers."""

    def test_google_analytics_payload(self):
        """GA4 events go to the Measurement Protocol endpoint."""
        session = FakeSession(FakeResponse(204))
        provider = GoogleAnalyticsProvider("G-TEST", "secret", client_id="cid", session=session)
        assert provider.send(AnalyticsEvent(event="generate_lead", value=0))

        method, url, kwargs = session.calls[0]
        assert url == GoogleAnalyticsProvider.ENDPOINT
        assert kwargs["params"] == {"measurement_id": "G-TEST", "api_secret": "secret"}
        assert kwargs["json"]["client_id"] == "cid"
        assert kwargs["json"]["events"][0] == {"name": "generate_lead", "params": {"value": 0}}

    def test_facebook_maps_lead(self):
        """generate_lead is sent to Facebook as Lead."""
        session = FakeSession(FakeResponse(200, {}))
        provider = FacebookConversionsProvider("123", "token", session=session)
        assert provider.send(AnalyticsEvent(event="generate_lead"))
        assert session.calls[0][2]["json"]["data"][0]["event_name"] == "Lead"

    def test_facebook_skips_unmapped(self):
        """Events Facebook has no mapping for are skipped."""
        session = FakeSession()
        provider = FacebookConversionsProvider("123", "token", session=session)
        assert not provider.send(AnalyticsEvent(event="trigger"))
        assert session.calls == []

    def test_logging_provider(self):
        """The logging provider always succeeds."""
        assert LoggingProvider().send(AnalyticsEvent(event="trigger"))
