"""Row commands: add, remove, label, toggle, list, totals, clear."""

import typer

from ...core.models import AXIS_VOCABULARIES, Axis
from ...engine import AddSound, ClearRows, RelabelRow, RemoveRow, ToggleAttribute
from ..app import app, fail, open_session


AXIS_ALIASES = {
    "freq": Axis.FREQUENCY,
    "frequency": Axis.FREQUENCY,
    "stereo": Axis.STEREO,
    "depth": Axis.DEPTH,
    "shape": Axis.SHAPE,
}

AXIS_TITLES = {
    Axis.FREQUENCY: "Frequency",
    Axis.STEREO: "Stereo",
    Axis.DEPTH: "Depth",
    Axis.SHAPE: "Shape",
}


def parse_axis(name: str) -> Axis:
    """Accept an axis field name (freqBands) or a short alias (freq)."""
    if name in AXIS_ALIASES:
        return AXIS_ALIASES[name]
    try:
        return Axis(name)
    except ValueError:
        names = ", ".join(list(AXIS_ALIASES) + [a.value for a in Axis])
        fail(f"Unknown axis '{name}' (expected one of: {names})")


def _require_row(session, row_id: str) -> None:
    if session.find(row_id) is None:
        fail(f"No row with id {row_id}")


@app.command()
def add(sound_id: str = typer.Argument(..., help="Catalog id of the sound, e.g. bass")):
    """Add a sound to the project, tagged with its catalog defaults."""
    session, _ = open_session()
    if not session.dispatch(AddSound(sound_id=sound_id)):
        typer.echo(f"Unknown sound '{sound_id}', nothing added.")
        return
    row = session.rows[-1]
    typer.echo(f"Added {session.catalog.display_name(row.sound_id)} as {row.row_id}")


@app.command()
def remove(row_id: str = typer.Argument(..., help="Id of the row to remove")):
    """Remove a row from the project."""
    session, _ = open_session()
    if session.dispatch(RemoveRow(row_id=row_id)):
        typer.echo(f"Removed {row_id}")
    else:
        typer.echo(f"No row with id {row_id}, nothing removed.")


@app.command()
def label(
    row_id: str = typer.Argument(..., help="Id of the row to label"),
    text: str = typer.Argument(..., help="New label, may be empty"),
):
    """Set the free-text label of a row."""
    session, _ = open_session()
    _require_row(session, row_id)
    session.dispatch(RelabelRow(row_id=row_id, label=text))
    typer.echo(f"Labelled {row_id}: {text!r}")


@app.command()
def toggle(
    row_id: str = typer.Argument(..., help="Id of the row to change"),
    axis: str = typer.Argument(..., help="freq, stereo, depth or shape"),
    value: str = typer.Argument(..., help="Tag to switch on or off, e.g. low-mid"),
):
    """Switch one tag of a row on or off."""
    parsed = parse_axis(axis)
    session, _ = open_session()
    _require_row(session, row_id)
    session.dispatch(ToggleAttribute(row_id=row_id, axis=parsed, value=value))

    state = "on" if session.find(row_id).has_tag(parsed, value) else "off"
    typer.echo(f"{AXIS_TITLES[parsed]} '{value}' is now {state} for {row_id}")
    if value not in AXIS_VOCABULARIES[parsed]:
        typer.echo(f"Note: '{value}' is not a standard {AXIS_TITLES[parsed].lower()} value and is not counted in totals.")


@app.command("list")
def list_rows():
    """Show the selected sounds and their tags."""
    session, _ = open_session()
    if not session.rows:
        typer.echo("No Sounds selected, add some sounds!")
        return

    for row in session.rows:
        name = session.catalog.display_name(row.sound_id)
        header = f"{row.row_id}  {name}"
        if row.label:
            header += f"  [{row.label}]"
        typer.echo(header)
        for axis in Axis:
            tags = ", ".join(row.tags(axis)) or "-"
            typer.echo(f"    {AXIS_TITLES[axis]:<10} {tags}")


@app.command()
def totals():
    """Show how many rows carry each tag, per axis."""
    session, _ = open_session()
    result = session.totals()
    for axis in Axis:
        typer.echo(f"{AXIS_TITLES[axis]} Totals")
        for name, count in result.for_axis(axis).items():
            typer.echo(f"  {name}: {count}")


@app.command()
def clear(yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt")):
    """Remove every row from the project."""
    session, _ = open_session()
    if not session.rows:
        typer.echo("Nothing to clear.")
        return
    if not yes and not typer.confirm("Are you sure you want to clear all sounds?"):
        typer.echo("Clear cancelled.")
        return
    session.dispatch(ClearRows())
    typer.echo("Cleared all sounds.")
