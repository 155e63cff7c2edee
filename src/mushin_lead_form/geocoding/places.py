"""Google Places lookups used by the address autocomplete."""

import logging
from dataclasses import dataclass
from typing import List, Optional

import requests

from ..fields.address import AddressData

logger = logging.getLogger(__name__)


@dataclass
class PlacePrediction:
    """One autocomplete suggestion."""
    description: str
    place_id: str


class GooglePlacesClient:
    """Google Places API (autocomplete + details), restricted to US addresses."""

    BASE_URL = "https://maps.googleapis.com/maps/api/place"
    DETAIL_FIELDS = "address_component,formatted_address,geometry,place_id"

    def __init__(self, api_key: str, session: Optional[requests.Session] = None, timeout: float = 10.0):
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def autocomplete(self, query: str) -> List[PlacePrediction]:
        """Suggest addresses for partially typed text."""
        if not self.enabled:
            logger.warning("Google Maps API key not configured")
            return []
        if not query or not query.strip():
            return []

        try:
            response = self.session.get(
                f"{self.BASE_URL}/autocomplete/json",
                params={
                    "input": query.strip(),
                    "types": "address",
                    "components": "country:us",
                    "key": self.api_key,
                },
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Places autocomplete error: {e}")
            return []

        if data.get("status") not in ("OK", "ZERO_RESULTS"):
            logger.error(f"Places autocomplete status: {data.get('status')}")
            return []

        return [
            PlacePrediction(description=p.get("description", ""), place_id=p.get("place_id", ""))
            for p in data.get("predictions", [])
            if p.get("place_id")
        ]

    def place_details(self, place_id: str) -> Optional[AddressData]:
        """Resolve a suggestion into a structured address."""
        if not self.enabled or not place_id:
            return None

        try:
            response = self.session.get(
                f"{self.BASE_URL}/details/json",
                params={"place_id": place_id, "fields": self.DETAIL_FIELDS, "key": self.api_key},
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Places details error: {e}")
            return None

        if data.get("status") != "OK":
            logger.error(f"Places details status for {place_id}: {data.get('status')}")
            return None

        return AddressData.from_place_result(data.get("result", {}))
