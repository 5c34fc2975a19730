"""Local snapshot persistence for Sound Tracker."""

from .snapshot import DEFAULT_KEY, STORAGE_FILENAME, SlotStore, SnapshotStore

__all__ = [
    "DEFAULT_KEY",
    "STORAGE_FILENAME",
    "SlotStore",
    "SnapshotStore",
]
