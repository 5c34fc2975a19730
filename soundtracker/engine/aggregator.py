"""Per-axis tag counts derived from the current rows.

Counts are recomputed from scratch on every call. Projects hold tens of
rows, so there is no cache to keep in sync.
"""

import logging
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from ..core.models import AXIS_VOCABULARIES, Axis, SelectionRow


logger = logging.getLogger(__name__)


class AxisTotals(BaseModel):
    """Counts per vocabulary value for each axis.

    Each mapping always holds the whole vocabulary of its axis, in
    vocabulary order, with zero for values no row carries.
    """

    model_config = ConfigDict(frozen=True)

    frequency: dict[str, int]
    stereo: dict[str, int]
    depth: dict[str, int]
    shape: dict[str, int]

    def for_axis(self, axis: Axis | str) -> dict[str, int]:
        axis = Axis(axis)
        return {
            Axis.FREQUENCY: self.frequency,
            Axis.STEREO: self.stereo,
            Axis.DEPTH: self.depth,
            Axis.SHAPE: self.shape,
        }[axis]

    def chart_series(self, axis: Axis | str) -> list[dict]:
        """Chart points ``{"name", "count"}`` in vocabulary order."""
        return [
            {"name": name, "count": count}
            for name, count in self.for_axis(axis).items()
        ]


def count_axis(rows: Iterable[SelectionRow], axis: Axis) -> dict[str, int]:
    """Count how many rows carry each vocabulary value of one axis."""
    counts = {value: 0 for value in AXIS_VOCABULARIES[axis]}
    for row in rows:
        for value in row.tags(axis):
            if value in counts:
                counts[value] += 1
            else:
                logger.debug(
                    f"[Aggregator] Row {row.row_id} has off-vocabulary "
                    f"{axis.value} value '{value}', not counted"
                )
    return counts


def aggregate(rows: Iterable[SelectionRow]) -> AxisTotals:
    rows = tuple(rows)
    return AxisTotals(
        frequency=count_axis(rows, Axis.FREQUENCY),
        stereo=count_axis(rows, Axis.STEREO),
        depth=count_axis(rows, Axis.DEPTH),
        shape=count_axis(rows, Axis.SHAPE),
    )
