"""Command-line interface for Sound Tracker."""

from .app import app

__all__ = ["app"]
