"""Mushin Lead Form - multi-step seller lead capture engine."""

__version__ = "1.0.0"
