"""Data models for Sound Tracker.

This package contains all Pydantic models used across the system:
- sound.py: Axes and vocabularies, sound definitions, selection rows
- document.py: Export documents, persistence snapshots, import results
"""

from .sound import (
    # Axes
    Axis,
    AXIS_VOCABULARIES,
    FREQUENCY_BANDS,
    STEREO_PRESENCES,
    DEPTHS,
    SHAPES,
    # Entities
    SoundDefinition,
    SelectionRow,
    unique_values,
)
from .document import (
    EXPORT_VERSION,
    APP_TAG,
    Snapshot,
    ExportDocument,
    ImportStatus,
    ImportResult,
)

__all__ = [
    # Axes
    "Axis",
    "AXIS_VOCABULARIES",
    "FREQUENCY_BANDS",
    "STEREO_PRESENCES",
    "DEPTHS",
    "SHAPES",
    # Entities
    "SoundDefinition",
    "SelectionRow",
    "unique_values",
    # Documents
    "EXPORT_VERSION",
    "APP_TAG",
    "Snapshot",
    "ExportDocument",
    "ImportStatus",
    "ImportResult",
]
