"""Export of a project to a portable JSON document."""

from datetime import datetime, timezone
from typing import Iterable

from ..core.models import ExportDocument, SelectionRow, SoundDefinition


def build_export_document(
    rows: Iterable[SelectionRow],
    custom_sounds: Iterable[SoundDefinition],
    now: datetime | None = None,
) -> ExportDocument:
    return ExportDocument(
        selected_rows=tuple(rows),
        custom_sounds=tuple(custom_sounds),
        exported_at=now or datetime.now(timezone.utc),
    )


def export_json(
    rows: Iterable[SelectionRow],
    custom_sounds: Iterable[SoundDefinition],
    now: datetime | None = None,
    indent: int | None = 2,
) -> str:
    """Serialize rows and custom sounds as a pretty-printed export document."""
    document = build_export_document(rows, custom_sounds, now=now)
    return document.model_dump_json(by_alias=True, indent=indent)


def export_filename(now: datetime | None = None) -> str:
    """Timestamped file name, e.g. ``sound-tracker-export-2025-01-31T09-15-00.json``."""
    now = now or datetime.now(timezone.utc)
    stamp = now.strftime("%Y-%m-%dT%H-%M-%S")
    return f"sound-tracker-export-{stamp}.json"
