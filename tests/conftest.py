"""Global fixtures for Sound Tracker tests."""

import itertools

import pytest

from soundtracker.core.catalog import Catalog
from soundtracker.core.models import SelectionRow, SoundDefinition
from soundtracker.engine import Session
from soundtracker.storage import SnapshotStore


@pytest.fixture
def catalog():
    """Built-in catalog plus one custom sound."""
    return Catalog(
        custom=[
            SoundDefinition(
                id="vocal",
                name="Vocal Chop",
                default_freq_bands=["mid"],
                default_stereo_presence=["narrow"],
                default_depth=["front"],
                default_shape=["transient"],
            )
        ]
    )


@pytest.fixture
def id_factory():
    """Deterministic row ids: row-1, row-2, ..."""
    counter = itertools.count(1)
    return lambda: f"row-{next(counter)}"


@pytest.fixture
def sample_rows():
    """Two rows as they would come out of add + a few edits."""
    return (
        SelectionRow(
            row_id="row-a",
            sound_id="bass",
            label="Sub",
            freq_bands=["low", "low-mid"],
            stereo_presences=["narrow", "wide"],
            depths=["front"],
            shapes=["transient", "sustained"],
        ),
        SelectionRow(
            row_id="row-b",
            sound_id="pad",
            label="",
            freq_bands=["low-mid", "mid"],
            stereo_presences=["medium", "wide"],
            depths=["middle", "back"],
            shapes=["sustained"],
        ),
    )


@pytest.fixture
def session(catalog, id_factory):
    return Session(catalog=catalog, id_factory=id_factory)


@pytest.fixture
def snapshot_store(tmp_path):
    return SnapshotStore(tmp_path / "data")


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point config and storage at a temporary home directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("SOUND_TRACKER_HOME", str(home))
    return home
