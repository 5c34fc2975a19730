"""Selection & aggregation engine.

The engine keeps the ordered rows of a project and derives per-axis totals.

Layers:
    commands: Command objects (AddSound, RemoveRow, RelabelRow, ...)
    mutations: Pure transition functions rows + command -> rows
    aggregator: Per-axis counts over the full vocabularies
    session: State container that applies commands and notifies observers
"""

from .commands import (
    AddSound,
    RemoveRow,
    RelabelRow,
    ToggleAttribute,
    ClearRows,
    Command,
)
from .mutations import (
    add_sound,
    remove_row,
    relabel_row,
    toggle_attribute,
    clear_rows,
    apply_command,
    new_row_id,
)
from .aggregator import AxisTotals, aggregate, count_axis
from .session import Session

__all__ = [
    # Commands
    "AddSound",
    "RemoveRow",
    "RelabelRow",
    "ToggleAttribute",
    "ClearRows",
    "Command",
    # Mutations
    "add_sound",
    "remove_row",
    "relabel_row",
    "toggle_attribute",
    "clear_rows",
    "apply_command",
    "new_row_id",
    # Aggregation
    "AxisTotals",
    "aggregate",
    "count_axis",
    # State
    "Session",
]
