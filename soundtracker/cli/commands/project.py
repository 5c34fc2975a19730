"""Project file commands: export and import."""

from pathlib import Path
from typing import Optional

import typer

from ...core.errors import ImportRejected
from ...serialization import export_filename, export_json, parse_import
from ..app import app, fail, open_session


PARTIAL_IMPORT_PROMPT = "Some rows in this file look invalid and will be skipped. Continue?"


@app.command("export")
def export_project(
    path: Optional[Path] = typer.Argument(
        None, help="Output file (default: timestamped file in the export directory)"
    ),
):
    """Write the project to a JSON file."""
    session, config = open_session()
    if not session.rows and not session.custom_sounds:
        fail("Nothing to export, add some sounds first")

    if path is None:
        path = config.export_dir / export_filename()

    text = export_json(session.rows, session.custom_sounds, indent=config.export.indent)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    except OSError as e:
        fail(f"Could not write {path}: {e}")
    typer.echo(f"Exported {len(session.rows)} rows to {path}")


@app.command("import")
def import_project(
    path: Path = typer.Argument(..., help="Project file to import"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip invalid rows without asking"),
):
    """Replace the project with the contents of a JSON file."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        fail(f"Could not read {path}: {e}")

    try:
        result = parse_import(raw)
    except ImportRejected as e:
        fail(e.reason)

    if result.needs_confirmation:
        typer.echo(
            f"{result.dropped_rows} row(s) and {result.dropped_sounds} custom sound(s) are invalid."
        )
        if not yes and not typer.confirm(PARTIAL_IMPORT_PROMPT):
            typer.echo("Import abandoned, project unchanged.")
            return

    session, _ = open_session()
    session.apply_import(result)
    typer.echo(f"Imported {len(result.rows)} rows from {path}")
