"""Analytics providers for lead conversion events.

Tracking is fire-and-forget: a missing, misconfigured or failing provider
never affects the form flow.
"""

import logging
import time
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

import requests

logger = logging.getLogger(__name__)


@dataclass
class AnalyticsEvent:
    """A single tracked event."""
    event: str
    category: str = ""
    label: str = ""
    value: float = None
    custom_parameters: Dict[str, Any] = field(default_factory=dict)

    def params(self) -> Dict[str, Any]:
        data = dict(self.custom_parameters)
        if self.category:
            data['event_category'] = self.category
        if self.label:
            data['event_label'] = self.label
        if self.value is not None:
            data['value'] = self.value
        return data


class AnalyticsProvider(ABC):
    """Base class for analytics providers."""

    @abstractmethod
    def send(self, event: AnalyticsEvent) -> bool:
        """Send an event; return whether the provider accepted it."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get the provider name."""
        pass


class GoogleAnalyticsProvider(AnalyticsProvider):
    """GA4 Measurement Protocol."""

    ENDPOINT = "https://www.google-analytics.com/mp/collect"

    def __init__(self, measurement_id: str, api_secret: str, client_id: str = None,
                 session: Optional[requests.Session] = None, timeout: float = 5.0):
        self.measurement_id = measurement_id
        self.api_secret = api_secret
        self.client_id = client_id or str(uuid.uuid4())
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_name(self) -> str:
        return "google_analytics"

    def send(self, event: AnalyticsEvent) -> bool:
        response = self.session.post(
            self.ENDPOINT,
            params={'measurement_id': self.measurement_id, 'api_secret': self.api_secret},
            json={
                'client_id': self.client_id,
                'events': [{'name': event.event, 'params': event.params()}]
            },
            timeout=self.timeout
        )
        return response.ok


class FacebookConversionsProvider(AnalyticsProvider):
    """Meta Conversions API; only forwards the events it maps."""

    API_VERSION = "v18.0"
    EVENT_MAP = {
        'generate_lead': 'Lead',
        'form_submission_success': 'CompleteRegistration',
        'Lead': 'Lead',
    }

    def __init__(self, pixel_id: str, access_token: str,
                 session: Optional[requests.Session] = None, timeout: float = 5.0):
        self.pixel_id = pixel_id
        self.access_token = access_token
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_name(self) -> str:
        return "facebook"

    def send(self, event: AnalyticsEvent) -> bool:
        fb_event = self.EVENT_MAP.get(event.event)
        if not fb_event:
            return False

        response = self.session.post(
            f"https://graph.facebook.com/{self.API_VERSION}/{self.pixel_id}/events",
            params={'access_token': self.access_token},
            json={
                'data': [{
                    'event_name': fb_event,
                    'event_time': int(time.time()),
                    'action_source': 'website',
                    'custom_data': event.params(),
                }]
            },
            timeout=self.timeout
        )
        return response.ok


class LoggingProvider(AnalyticsProvider):
    """Writes events to the log; handy for development."""

    def get_name(self) -> str:
        return "log"

    def send(self, event: AnalyticsEvent) -> bool:
        logger.info(f"[ANALYTICS] {event.event} {event.params()}")
        return True


class AnalyticsTracker:
    """Fan events out to every configured provider."""

    def __init__(self, providers: List[AnalyticsProvider] = None,
                 google_ads_id: str = "", google_ads_label: str = ""):
        self.providers = list(providers or [])
        self.google_ads_id = google_ads_id
        self.google_ads_label = google_ads_label

    def track(self, event: AnalyticsEvent) -> int:
        """Send to all providers; returns how many accepted the event."""
        accepted = 0
        for provider in self.providers:
            try:
                if provider.send(event):
                    accepted += 1
            except Exception as e:
                logger.warning(f"Analytics provider {provider.get_name()} failed for {event.event}: {e}")
        return accepted

    def track_event(self, name: str, params: Dict[str, Any] = None) -> int:
        return self.track(AnalyticsEvent(event=name, custom_parameters=dict(params or {})))

    def track_conversion(self, conversion_id: str, conversion_label: str,
                         params: Dict[str, Any] = None) -> int:
        """Google Ads conversion event."""
        data = {'send_to': f"{conversion_id}/{conversion_label}"}
        data.update(params or {})
        return self.track_event('conversion', data)

    def track_lead_generated(self, lead_id: str):
        """First partial submission succeeded."""
        self.track(AnalyticsEvent(
            event='generate_lead',
            custom_parameters={'currency': 'USD', 'value': 0, 'lead_id': lead_id}
        ))
        self.track_event('Lead', {'lead_id': lead_id})

    def track_submission_success(self, lead_id: Optional[str]):
        """Complete submission succeeded."""
        self.track(AnalyticsEvent(
            event='form_submission_success',
            category='Lead',
            label='Complete',
            custom_parameters={'lead_id': lead_id} if lead_id else {}
        ))
        self.track_event('Lead', {'lead_id': lead_id} if lead_id else {})
        self.track_event('trigger', {'trigger': 'form_submission_success'})
        if self.google_ads_id and self.google_ads_label:
            self.track_conversion(self.google_ads_id, self.google_ads_label)
