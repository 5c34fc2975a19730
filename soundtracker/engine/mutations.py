"""Pure transition functions over the row collection.

Every function takes the current rows and returns the next rows. When an
operation changes nothing, the *same* tuple object is returned, so callers
can tell an accepted transition from a no-op with an identity check.
"""

import logging
import uuid
from typing import Callable

from ..core.catalog import Catalog
from ..core.models import Axis, SelectionRow
from .commands import (
    AddSound,
    ClearRows,
    Command,
    RelabelRow,
    RemoveRow,
    ToggleAttribute,
)


logger = logging.getLogger(__name__)

Rows = tuple[SelectionRow, ...]

# Produces a fresh opaque row identifier on each call
IdFactory = Callable[[], str]


def new_row_id() -> str:
    return uuid.uuid4().hex


def _index_of(rows: Rows, row_id: str) -> int | None:
    for i, row in enumerate(rows):
        if row.row_id == row_id:
            return i
    return None


def _replace_at(rows: Rows, index: int, row: SelectionRow) -> Rows:
    return rows[:index] + (row,) + rows[index + 1 :]


def add_sound(
    rows: Rows,
    sound_id: str,
    catalog: Catalog,
    id_factory: IdFactory = new_row_id,
) -> Rows:
    """Append a row seeded from the catalog defaults of ``sound_id``.

    Unknown sounds are ignored: there are no defaults to seed from.
    """
    sound = catalog.resolve(sound_id)
    if sound is None:
        logger.debug(f"[Mutations] add ignored, unknown sound '{sound_id}'")
        return rows

    taken = {row.row_id for row in rows}
    row_id = id_factory()
    while row_id in taken:
        row_id = id_factory()

    row = SelectionRow(
        row_id=row_id,
        sound_id=sound.id,
        label="",
        freq_bands=tuple(sound.default_freq_bands),
        stereo_presences=tuple(sound.default_stereo_presence),
        depths=tuple(sound.default_depth),
        shapes=tuple(sound.default_shape),
    )
    return rows + (row,)


def remove_row(rows: Rows, row_id: str) -> Rows:
    index = _index_of(rows, row_id)
    if index is None:
        return rows
    return rows[:index] + rows[index + 1 :]


def relabel_row(rows: Rows, row_id: str, label: str) -> Rows:
    index = _index_of(rows, row_id)
    if index is None:
        return rows
    row = rows[index]
    if row.label == label:
        return rows
    return _replace_at(rows, index, row.model_copy(update={"label": label}))


def toggle_attribute(rows: Rows, row_id: str, axis: Axis | str, value: str) -> Rows:
    """Flip membership of ``value`` in one axis set of a row.

    Values outside the axis vocabulary are accepted as-is.

    Raises:
        ValueError: If ``axis`` is not an axis name.
    """
    axis = Axis(axis)
    index = _index_of(rows, row_id)
    if index is None:
        return rows

    row = rows[index]
    current = row.tags(axis)
    if value in current:
        updated = tuple(v for v in current if v != value)
    else:
        updated = current + (value,)
    return _replace_at(rows, index, row.model_copy(update={axis.field_name: updated}))


def clear_rows(rows: Rows) -> Rows:
    """Drop every row. Callers confirm with the user first."""
    if not rows:
        return rows
    return ()


def apply_command(
    rows: Rows,
    command: Command,
    catalog: Catalog,
    id_factory: IdFactory = new_row_id,
) -> Rows:
    """Dispatch a command object to its transition function."""
    if isinstance(command, AddSound):
        return add_sound(rows, command.sound_id, catalog, id_factory)
    if isinstance(command, RemoveRow):
        return remove_row(rows, command.row_id)
    if isinstance(command, RelabelRow):
        return relabel_row(rows, command.row_id, command.label)
    if isinstance(command, ToggleAttribute):
        return toggle_attribute(rows, command.row_id, command.axis, command.value)
    if isinstance(command, ClearRows):
        return clear_rows(rows)
    raise TypeError(f"Unsupported command: {command!r}")
