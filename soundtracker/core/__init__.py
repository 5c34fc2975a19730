"""Core models, catalog and error types for Sound Tracker."""

from .catalog import BUILTIN_SOUNDS, Catalog
from .errors import (
    SoundTrackerError,
    ImportRejected,
    DuplicateSoundError,
    ConfigError,
)

__all__ = [
    "BUILTIN_SOUNDS",
    "Catalog",
    "SoundTrackerError",
    "ImportRejected",
    "DuplicateSoundError",
    "ConfigError",
]
