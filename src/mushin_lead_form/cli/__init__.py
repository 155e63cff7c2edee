"""Command-line interface for the lead form."""

from .main import cli

__all__ = ["cli"]
