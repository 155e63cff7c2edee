"""Best-effort conversion tracking."""

from .analytics import (
    AnalyticsEvent,
    AnalyticsProvider,
    AnalyticsTracker,
    GoogleAnalyticsProvider,
    FacebookConversionsProvider,
    LoggingProvider,
)

__all__ = [
    'AnalyticsEvent',
    'AnalyticsProvider',
    'AnalyticsTracker',
    'GoogleAnalyticsProvider',
    'FacebookConversionsProvider',
    'LoggingProvider',
]
