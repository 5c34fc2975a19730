"""Typer application and shared helpers for the Sound Tracker CLI.

The CLI is the composition root: each invocation loads the stored snapshot
into a Session, attaches the persistence observer, and runs one command.
"""

import logging
from typing import NoReturn, Optional

import typer

from .. import __version__
from ..config import SoundTrackerConfig, get_config
from ..engine import Session
from ..storage import SnapshotStore


app = typer.Typer(
    name="sound-tracker",
    help="Sound Tracker - Keep your music projects balanced",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sound-tracker {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log engine activity to stderr"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Track the sounds in a music project and their per-axis balance."""
    level = "DEBUG" if verbose else get_config().logging.level
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def open_session() -> tuple[Session, SoundTrackerConfig]:
    """Load the stored project and persist every accepted change."""
    config = get_config()
    store = SnapshotStore(config.data_dir, key=config.storage.key)
    session = Session.from_snapshot(store.load())
    session.subscribe(store.observer())
    return session, config


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


# Registers the commands on ``app``
from . import commands  # noqa: E402,F401
