"""Export and import of Sound Tracker project documents."""

from .exporter import build_export_document, export_json, export_filename
from .importer import (
    INVALID_JSON_MESSAGE,
    MISSING_ROWS_MESSAGE,
    parse_import,
)

__all__ = [
    "build_export_document",
    "export_json",
    "export_filename",
    "INVALID_JSON_MESSAGE",
    "MISSING_ROWS_MESSAGE",
    "parse_import",
]
