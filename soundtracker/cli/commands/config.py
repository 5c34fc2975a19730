"""Config command: show or change user settings."""

from typing import Optional

import typer

from ...config import config_path, get_config, save_config, set_config_value
from ...core.errors import ConfigError
from ..app import app, fail


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="show or set"),
    key: Optional[str] = typer.Argument(None, help="Setting to change, e.g. export.indent"),
    value: Optional[str] = typer.Argument(None, help="New value"),
):
    """Show or change Sound Tracker settings."""
    config = get_config()

    if action == "show":
        typer.echo(f"Config file: {config_path()}")
        typer.echo("Storage")
        typer.echo(f"  data_dir: {config.storage.data_dir}")
        typer.echo(f"  key: {config.storage.key}")
        typer.echo("Export")
        typer.echo(f"  directory: {config.export.directory}")
        typer.echo(f"  indent: {config.export.indent}")
        typer.echo("Logging")
        typer.echo(f"  level: {config.logging.level}")
        return

    if action == "set":
        if key is None or value is None:
            fail("Usage: sound-tracker config set KEY VALUE")
        try:
            updated = set_config_value(config, key, value)
        except ConfigError as e:
            fail(e.message)
        path = save_config(updated)
        typer.echo(f"Set {key} = {value} in {path}")
        return

    fail(f"Unknown action: {action} (expected show or set)")
