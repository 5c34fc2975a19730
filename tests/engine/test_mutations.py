"""Tests for the pure row transition functions."""

import random

import pytest

from soundtracker.core.catalog import Catalog
from soundtracker.core.models import Axis
from soundtracker.engine import (
    AddSound,
    ClearRows,
    RelabelRow,
    RemoveRow,
    ToggleAttribute,
    add_sound,
    apply_command,
    clear_rows,
    relabel_row,
    remove_row,
    toggle_attribute,
)


class TestAddSound:
    """Tests for add_sound."""

    def test_add_seeds_row_from_defaults(self, catalog, id_factory):
        rows = add_sound((), "bass", catalog, id_factory)

        assert len(rows) == 1
        row = rows[0]
        assert row.row_id == "row-1"
        assert row.sound_id == "bass"
        assert row.label == ""
        assert row.freq_bands == ("low", "low-mid")
        assert row.stereo_presences == ("narrow", "wide")
        assert row.depths == ("front",)
        assert row.shapes == ("transient", "sustained")

    def test_add_appends_at_end(self, catalog, id_factory, sample_rows):
        rows = add_sound(sample_rows, "bell", catalog, id_factory)

        assert rows[:2] == sample_rows
        assert rows[2].sound_id == "bell"

    def test_add_custom_sound(self, catalog, id_factory):
        rows = add_sound((), "vocal", catalog, id_factory)
        assert rows[0].freq_bands == ("mid",)

    def test_add_unknown_sound_is_noop(self, catalog, id_factory, sample_rows):
        rows = add_sound(sample_rows, "nonexistent-id", catalog, id_factory)

        assert rows is sample_rows
        assert len(rows) == 2

    def test_add_redraws_colliding_id(self, catalog, sample_rows):
        ids = iter(["row-a", "row-b", "row-c"])
        rows = add_sound(sample_rows, "bass", catalog, lambda: next(ids))

        assert rows[-1].row_id == "row-c"

    def test_toggling_row_leaves_definition_defaults_alone(self, catalog, id_factory):
        rows = add_sound((), "bass", catalog, id_factory)
        toggle_attribute(rows, "row-1", Axis.FREQUENCY, "low")

        assert catalog.resolve("bass").default_freq_bands == ("low", "low-mid")

    def test_default_ids_are_unique(self):
        catalog = Catalog()
        rows = ()
        for _ in range(50):
            rows = add_sound(rows, "keys", catalog)
        assert len({row.row_id for row in rows}) == 50


class TestRemoveAndRelabel:
    """Tests for remove_row and relabel_row."""

    def test_remove_matching_row(self, sample_rows):
        rows = remove_row(sample_rows, "row-a")
        assert [r.row_id for r in rows] == ["row-b"]

    def test_remove_unknown_row_is_noop(self, sample_rows):
        assert remove_row(sample_rows, "missing") is sample_rows

    def test_relabel_replaces_label(self, sample_rows):
        rows = relabel_row(sample_rows, "row-b", "Warm pad")

        assert rows[1].label == "Warm pad"
        assert rows[0] == sample_rows[0]
        # Original rows untouched
        assert sample_rows[1].label == ""

    def test_relabel_to_empty(self, sample_rows):
        rows = relabel_row(sample_rows, "row-a", "")
        assert rows[0].label == ""

    def test_relabel_unknown_row_is_noop(self, sample_rows):
        assert relabel_row(sample_rows, "missing", "x") is sample_rows


class TestToggleAttribute:
    """Tests for toggle_attribute."""

    def test_toggle_adds_missing_value(self, sample_rows):
        rows = toggle_attribute(sample_rows, "row-a", Axis.FREQUENCY, "high")
        assert rows[0].freq_bands == ("low", "low-mid", "high")

    def test_toggle_removes_present_value(self, sample_rows):
        rows = toggle_attribute(sample_rows, "row-a", Axis.STEREO, "wide")
        assert rows[0].stereo_presences == ("narrow",)

    def test_toggle_accepts_axis_name(self, sample_rows):
        rows = toggle_attribute(sample_rows, "row-b", "depths", "front")
        assert "front" in rows[1].depths

    def test_toggle_twice_restores_set(self, sample_rows):
        once = toggle_attribute(sample_rows, "row-b", Axis.SHAPE, "transient")
        twice = toggle_attribute(once, "row-b", Axis.SHAPE, "transient")

        assert once[1].shapes != sample_rows[1].shapes
        assert set(twice[1].shapes) == set(sample_rows[1].shapes)

    def test_toggle_allows_off_vocabulary_value(self, sample_rows):
        rows = toggle_attribute(sample_rows, "row-a", Axis.FREQUENCY, "ultrasonic")
        assert "ultrasonic" in rows[0].freq_bands

    def test_toggle_unknown_row_is_noop(self, sample_rows):
        assert toggle_attribute(sample_rows, "missing", Axis.DEPTH, "back") is sample_rows

    def test_toggle_unknown_axis_raises(self, sample_rows):
        with pytest.raises(ValueError):
            toggle_attribute(sample_rows, "row-a", "colour", "red")

    def test_toggle_can_empty_a_set(self, sample_rows):
        rows = toggle_attribute(sample_rows, "row-a", Axis.DEPTH, "front")
        assert rows[0].depths == ()


class TestClearAndDispatch:
    """Tests for clear_rows and apply_command."""

    def test_clear(self, sample_rows):
        assert clear_rows(sample_rows) == ()

    def test_clear_empty_is_noop(self):
        rows = ()
        assert clear_rows(rows) is rows

    def test_apply_command_dispatch(self, catalog, id_factory):
        rows = apply_command((), AddSound(sound_id="lead"), catalog, id_factory)
        rows = apply_command(rows, RelabelRow(row_id="row-1", label="Hook"), catalog)
        rows = apply_command(
            rows,
            ToggleAttribute(row_id="row-1", axis=Axis.SHAPE, value="transient"),
            catalog,
        )

        assert rows[0].label == "Hook"
        assert rows[0].shapes == ("sustained", "transient")

        rows = apply_command(rows, RemoveRow(row_id="row-1"), catalog)
        assert rows == ()
        assert apply_command(rows, ClearRows(), catalog) == ()


class TestRowIdUniqueness:
    """Row ids stay unique across arbitrary command sequences."""

    def test_random_command_sequences(self, catalog, id_factory):
        rng = random.Random(7)
        sound_ids = [s.id for s in catalog.all()] + ["unknown"]
        rows = ()

        for _ in range(300):
            choice = rng.random()
            existing = [r.row_id for r in rows] or ["missing"]
            if choice < 0.4:
                rows = add_sound(rows, rng.choice(sound_ids), catalog, id_factory)
            elif choice < 0.55:
                rows = remove_row(rows, rng.choice(existing))
            elif choice < 0.7:
                rows = relabel_row(rows, rng.choice(existing), f"label {rng.random()}")
            else:
                axis = rng.choice(list(Axis))
                rows = toggle_attribute(rows, rng.choice(existing), axis, rng.choice(["low", "wide", "back", "x"]))

            ids = [r.row_id for r in rows]
            assert len(ids) == len(set(ids))
