"""Composition root: builds the controller and its collaborators."""

import logging
from typing import Optional

from .api.client import LeadApiClient
from .config import Settings, get_settings
from .core.controller import FormController, PartialCaptureHook
from .geocoding.places import GooglePlacesClient
from .storage.snapshot import JsonFileSnapshotStore, SnapshotStore
from .tracking.analytics import (
    AnalyticsTracker,
    FacebookConversionsProvider,
    GoogleAnalyticsProvider,
    LoggingProvider,
)

logger = logging.getLogger(__name__)


def build_tracker(settings: Settings) -> AnalyticsTracker:
    """Analytics with whichever providers are configured."""
    providers = []
    if settings.google_analytics_enabled:
        providers.append(GoogleAnalyticsProvider(settings.ga_measurement_id, settings.ga_api_secret))
    if settings.facebook_enabled:
        providers.append(FacebookConversionsProvider(settings.fb_pixel_id, settings.fb_access_token))
    if settings.log_level == "DEBUG":
        providers.append(LoggingProvider())
    return AnalyticsTracker(
        providers,
        google_ads_id=settings.google_ads_id,
        google_ads_label=settings.google_ads_conversion_label
    )


def build_controller(
    settings: Optional[Settings] = None,
    store: Optional[SnapshotStore] = None,
    api_client: Optional[LeadApiClient] = None,
    partial_capture: Optional[PartialCaptureHook] = None
) -> FormController:
    """Create the single FormController for this process."""
    settings = settings or get_settings()
    store = store or JsonFileSnapshotStore(settings.snapshot_path)
    api_client = api_client or LeadApiClient(settings.api_base_url, timeout=settings.request_timeout)
    controller = FormController(
        store=store,
        api_client=api_client,
        tracker=build_tracker(settings),
        partial_capture=partial_capture
    )
    logger.debug(f"Form controller ready (api={settings.api_base_url}, snapshot={settings.snapshot_path})")
    return controller


def build_places_client(settings: Optional[Settings] = None) -> GooglePlacesClient:
    settings = settings or get_settings()
    return GooglePlacesClient(settings.google_maps_api_key)
