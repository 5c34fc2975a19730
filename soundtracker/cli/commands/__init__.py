"""CLI commands for Sound Tracker."""

from . import (
    rows,
    catalog,
    project,
    config,
)

__all__ = [
    "rows",
    "catalog",
    "project",
    "config",
]
