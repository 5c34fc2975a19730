"""Explicit state container for a Sound Tracker project.

The Session owns the row tuple and the catalog. It applies commands through
the pure functions in ``mutations`` and notifies observers after every
accepted transition; a persistence observer is attached by the composition
root (the CLI) rather than written into the engine.
"""

import logging
from typing import Callable

from ..core.catalog import Catalog
from ..core.models import ImportResult, SelectionRow, Snapshot, SoundDefinition
from .aggregator import AxisTotals, aggregate
from .commands import Command
from .mutations import IdFactory, Rows, apply_command, new_row_id


logger = logging.getLogger(__name__)

# Called with the session after each accepted transition
Observer = Callable[["Session"], None]


class Session:
    """Row Store plus custom catalog for one project.

    Args:
        rows: Initial rows in display order.
        catalog: Merged catalog; defaults to built-ins only.
        id_factory: Row id generator, injectable for tests.
    """

    def __init__(
        self,
        rows: Rows = (),
        catalog: Catalog | None = None,
        id_factory: IdFactory = new_row_id,
    ) -> None:
        self._rows: Rows = tuple(rows)
        self._catalog = catalog if catalog is not None else Catalog()
        self._id_factory = id_factory
        self._observers: list[Observer] = []

    @classmethod
    def from_snapshot(
        cls, snapshot: Snapshot, id_factory: IdFactory = new_row_id
    ) -> "Session":
        return cls(
            rows=snapshot.selected_rows,
            catalog=Catalog(custom=snapshot.custom_sounds),
            id_factory=id_factory,
        )

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> Rows:
        return self._rows

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def custom_sounds(self) -> tuple[SoundDefinition, ...]:
        return self._catalog.custom

    def totals(self) -> AxisTotals:
        return aggregate(self._rows)

    def find(self, row_id: str) -> SelectionRow | None:
        for row in self._rows:
            if row.row_id == row_id:
                return row
        return None

    def snapshot(self) -> Snapshot:
        return Snapshot(selected_rows=self._rows, custom_sounds=self.custom_sounds)

    # -------------------------------------------------------------------------
    # Write side
    # -------------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def dispatch(self, command: Command) -> bool:
        """Apply a command. Returns True if the rows changed."""
        updated = apply_command(self._rows, command, self._catalog, self._id_factory)
        if updated is self._rows:
            logger.debug(f"[Session] {command.kind} made no change")
            return False
        self._rows = updated
        logger.info(f"[Session] {command.kind} applied, {len(updated)} rows")
        self._notify()
        return True

    def define_sound(self, sound: SoundDefinition) -> None:
        """Register a custom sound.

        Raises:
            DuplicateSoundError: If the id is already in the catalog.
        """
        self._catalog = self._catalog.with_custom(sound)
        logger.info(f"[Session] Defined custom sound '{sound.id}'")
        self._notify()

    def apply_import(self, result: ImportResult) -> None:
        """Replace the rows (and custom sounds, when present) wholesale."""
        self._rows = tuple(result.rows)
        if result.custom_sounds is not None:
            self._catalog = self._catalog.replace_custom(result.custom_sounds)
        logger.info(
            f"[Session] Import applied, {len(self._rows)} rows, "
            f"{len(self.custom_sounds)} custom sounds"
        )
        self._notify()

    def _notify(self) -> None:
        for observer in self._observers:
            observer(self)
