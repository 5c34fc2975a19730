"""Local persistence of the project snapshot.

Storage is a small string-keyed slot store backed by one JSON file in the
data directory. The project lives under a single namespaced key holding a
JSON ``{selectedRows, customSounds}`` document. Read and write failures are
logged and treated as absent data; they never reach the caller.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..core.models import Snapshot


logger = logging.getLogger(__name__)

DEFAULT_KEY = "sound-tracker:v1"
STORAGE_FILENAME = "storage.json"


class SlotStore:
    """String-keyed string slots persisted to a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"[Storage] Could not read {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"[Storage] Ignoring malformed storage file {self.path}")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> bool:
        """Store a value. Returns False if the write failed."""
        slots = self._read_all()
        slots[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(slots, f, indent=2)
            tmp.replace(self.path)
        except OSError as e:
            logger.warning(f"[Storage] Could not write {self.path}: {e}")
            return False
        return True


class SnapshotStore:
    """Loads and saves the project snapshot under one slot key.

    Args:
        data_dir: Directory holding the storage file.
        key: Slot key for the snapshot.
    """

    def __init__(self, data_dir: Path, key: str = DEFAULT_KEY) -> None:
        self.slots = SlotStore(Path(data_dir) / STORAGE_FILENAME)
        self.key = key

    def load(self) -> Snapshot:
        """Read the stored snapshot; anything missing or malformed is empty."""
        raw = self.slots.get(self.key)
        if raw is None:
            return Snapshot()
        try:
            return Snapshot.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(
                f"[Storage] Discarding malformed snapshot '{self.key}' "
                f"({e.error_count()} errors)"
            )
            return Snapshot()

    def save(self, snapshot: Snapshot) -> bool:
        payload = snapshot.model_dump_json(by_alias=True)
        saved = self.slots.set(self.key, payload)
        if saved:
            logger.debug(
                f"[Storage] Saved {len(snapshot.selected_rows)} rows to '{self.key}'"
            )
        return saved

    def observer(self):
        """Session observer that saves after every accepted transition."""

        def _persist(session) -> None:
            self.save(session.snapshot())

        return _persist
