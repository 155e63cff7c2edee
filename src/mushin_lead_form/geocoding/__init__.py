"""Address lookup against an external places service."""

from .places import GooglePlacesClient, PlacePrediction

__all__ = ["GooglePlacesClient", "PlacePrediction"]
