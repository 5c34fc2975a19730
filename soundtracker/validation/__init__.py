"""Shared validation primitives for Sound Tracker.

This module provides the structural checks applied to untrusted JSON
before it is turned into models.

Modules:
    documents: Shape checks for imported rows and custom sound definitions
"""

from .documents import (
    ShapeCheck,
    validate_row_shape,
    validate_sound_shape,
)

__all__ = [
    "ShapeCheck",
    "validate_row_shape",
    "validate_sound_shape",
]
