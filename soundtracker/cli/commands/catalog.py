"""Catalog commands: list sounds and define custom ones."""

from typing import List, Optional

import typer

from ...core.errors import DuplicateSoundError
from ...core.models import SoundDefinition
from ..app import app, fail, open_session


@app.command()
def sounds():
    """List the sounds that can be added, built-in first."""
    session, _ = open_session()
    custom_ids = {s.id for s in session.custom_sounds}
    for sound in session.catalog.all():
        marker = " (custom)" if sound.id in custom_ids else ""
        typer.echo(f"{sound.id:<12} {sound.name}{marker}")


@app.command()
def define(
    sound_id: str = typer.Argument(..., help="New catalog id, e.g. vocal-chop"),
    name: str = typer.Argument(..., help="Display name"),
    freq: Optional[List[str]] = typer.Option(None, "--freq", help="Default frequency band (repeatable)"),
    stereo: Optional[List[str]] = typer.Option(None, "--stereo", help="Default stereo width (repeatable)"),
    depth: Optional[List[str]] = typer.Option(None, "--depth", help="Default depth (repeatable)"),
    shape: Optional[List[str]] = typer.Option(None, "--shape", help="Default shape (repeatable)"),
):
    """Register a custom sound with its default tags."""
    sound = SoundDefinition(
        id=sound_id,
        name=name,
        default_freq_bands=freq or [],
        default_stereo_presence=stereo or [],
        default_depth=depth or [],
        default_shape=shape or [],
    )
    session, _ = open_session()
    try:
        session.define_sound(sound)
    except DuplicateSoundError as e:
        fail(str(e))
    typer.echo(f"Defined {name} ({sound_id})")
