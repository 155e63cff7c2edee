"""Environment-based configuration for the lead form engine."""

import logging
import os
from pathlib import Path

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Settings:
    """Configuration loaded from environment variables."""

    def __init__(self):
        self.api_base_url = os.getenv("MUSHIN_API_BASE_URL", "http://localhost:3000").rstrip("/")
        self.request_timeout = _float_env("MUSHIN_REQUEST_TIMEOUT", 15.0)
        self.snapshot_path = Path(os.getenv(
            "MUSHIN_SNAPSHOT_PATH",
            str(Path.home() / ".mushin-lead-form" / "snapshot.json"),
        )).expanduser()
        self.log_level = os.getenv("MUSHIN_LOG_LEVEL", "INFO").upper()

        # Analytics
        self.ga_measurement_id = os.getenv("GA_MEASUREMENT_ID", "")
        self.ga_api_secret = os.getenv("GA_API_SECRET", "")
        self.google_ads_id = os.getenv("GOOGLE_ADS_ID", "")
        self.google_ads_conversion_label = os.getenv("GOOGLE_ADS_CONVERSION_LABEL", "")
        self.fb_pixel_id = os.getenv("FB_PIXEL_ID", "")
        self.fb_access_token = os.getenv("FB_ACCESS_TOKEN", "")

        # Address lookup
        self.google_maps_api_key = os.getenv("GOOGLE_MAPS_API_KEY", "")

    @property
    def google_analytics_enabled(self) -> bool:
        return bool(self.ga_measurement_id and self.ga_api_secret)

    @property
    def facebook_enabled(self) -> bool:
        return bool(self.fb_pixel_id and self.fb_access_token)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be greater than zero")
    return value


_settings = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings():
    """Forget cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
