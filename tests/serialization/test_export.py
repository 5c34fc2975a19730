"""Tests for project export."""

import json
from datetime import datetime, timezone

from soundtracker.core.models import SoundDefinition
from soundtracker.serialization import (
    build_export_document,
    export_filename,
    export_json,
    parse_import,
)


class TestExport:
    """Tests for export_json and friends."""

    def test_document_shape(self, sample_rows):
        now = datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)
        data = json.loads(export_json(sample_rows, [], now=now))

        assert data["version"] == 1
        assert data["app"] == "sound-tracker"
        assert data["exportedAt"].startswith("2025-03-01T12:30:00")
        assert [r["rowId"] for r in data["selectedRows"]] == ["row-a", "row-b"]
        assert data["customSounds"] == []

    def test_rows_use_exported_field_names(self, sample_rows):
        row = json.loads(export_json(sample_rows, []))["selectedRows"][0]

        assert row == {
            "rowId": "row-a",
            "soundId": "bass",
            "label": "Sub",
            "freqBands": ["low", "low-mid"],
            "stereoPresences": ["narrow", "wide"],
            "depths": ["front"],
            "shapes": ["transient", "sustained"],
        }

    def test_custom_sound_field_names(self):
        sound = SoundDefinition(id="drone", name="Drone", default_depth=["back"])
        data = json.loads(export_json([], [sound]))

        assert data["customSounds"] == [
            {
                "id": "drone",
                "name": "Drone",
                "defaultFreqBands": [],
                "defaultStereoPresence": [],
                "defaultDepth": ["back"],
                "defaultShape": [],
            }
        ]

    def test_pretty_printed(self, sample_rows):
        assert "\n  " in export_json(sample_rows, [], indent=2)

    def test_round_trip(self, sample_rows, catalog):
        text = export_json(sample_rows, catalog.custom)
        result = parse_import(text)

        assert not result.needs_confirmation
        assert result.rows == sample_rows
        assert result.custom_sounds == catalog.custom

    def test_round_trip_keeps_custom_sound_extra_fields(self):
        text = json.dumps(
            {
                "selectedRows": [],
                "customSounds": [{"id": "drone", "name": "Drone", "colour": "teal"}],
            }
        )
        sounds = parse_import(text).custom_sounds
        exported = json.loads(export_json([], sounds))

        assert exported["customSounds"][0]["colour"] == "teal"
        assert parse_import(export_json([], sounds)).custom_sounds == sounds

    def test_round_trip_keeps_extra_fields(self):
        text = json.dumps(
            {
                "selectedRows": [
                    {"rowId": "r1", "soundId": "bass", "freqBands": [], "color": "red"}
                ]
            }
        )
        rows = parse_import(text).rows
        exported = json.loads(export_json(rows, []))

        assert exported["selectedRows"][0]["color"] == "red"
        assert parse_import(export_json(rows, [])).rows == rows

    def test_build_document_defaults_timestamp(self):
        document = build_export_document([], [])
        assert document.exported_at.tzinfo is not None

    def test_export_filename(self):
        now = datetime(2025, 1, 31, 9, 15, 0, tzinfo=timezone.utc)
        assert export_filename(now) == "sound-tracker-export-2025-01-31T09-15-00.json"
