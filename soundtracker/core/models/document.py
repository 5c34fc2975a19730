"""Export documents, persistence snapshots and import results."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .sound import SelectionRow, SoundDefinition


EXPORT_VERSION = 1
APP_TAG = "sound-tracker"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Snapshot(BaseModel):
    """State written to the local snapshot slot after every change."""

    model_config = ConfigDict(populate_by_name=True)

    selected_rows: tuple[SelectionRow, ...] = Field(default=(), alias="selectedRows")
    custom_sounds: tuple[SoundDefinition, ...] = Field(
        default=(), alias="customSounds"
    )


class ExportDocument(BaseModel):
    """Self-describing project file produced by export."""

    model_config = ConfigDict(populate_by_name=True)

    version: int = EXPORT_VERSION
    exported_at: datetime = Field(default_factory=_utc_now, alias="exportedAt")
    app: str = APP_TAG
    selected_rows: tuple[SelectionRow, ...] = Field(default=(), alias="selectedRows")
    custom_sounds: tuple[SoundDefinition, ...] = Field(
        default=(), alias="customSounds"
    )


class ImportStatus(str, Enum):
    """Outcome of parsing an import document that was not rejected."""

    VALID = "valid"
    PARTIALLY_VALID = "partially_valid"


class ImportResult(BaseModel):
    """Validated content of an import document, ready to apply.

    ``custom_sounds`` is None when the document carried no usable
    ``customSounds`` array, in which case applying the import leaves the
    custom catalog untouched.
    """

    rows: tuple[SelectionRow, ...] = ()
    custom_sounds: tuple[SoundDefinition, ...] | None = None
    dropped_rows: int = 0
    dropped_sounds: int = 0

    @property
    def status(self) -> ImportStatus:
        if self.dropped_rows or self.dropped_sounds:
            return ImportStatus.PARTIALLY_VALID
        return ImportStatus.VALID

    @property
    def needs_confirmation(self) -> bool:
        return self.status is ImportStatus.PARTIALLY_VALID
