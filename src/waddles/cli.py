"""Waddles command-line interface.

This module provides the startup entrypoint, which loads waddles.toml
and stops the process on any settings failure, plus helpers for creating
and checking settings files.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from waddles.constants import SAMPLE_FILE_MODE, SETTINGS_FILENAME
from waddles.logs import configure_logging
from waddles.settings import (
    Settings,
    SettingsError,
    load_settings,
    read_settings_file,
    resolve_config_dir,
    write_sample_settings,
)
from waddles.utils.file import write_text_with_mode

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Waddles Discord bot", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "waddles.cli"

DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging until settings load")
DST_ARGUMENT = typer.Argument(..., help="Output waddles.toml")
FILE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Settings file to check")


@app.callback()
def main() -> None:
    """Waddles Discord bot."""
    # .env may supply WADL_CONFIG_DIR and values referenced as ${NAME}
    load_dotenv()


@app.command()
def run(debug: bool = DEBUG_OPTION) -> None:
    """Load settings and start up.

    Exits with status 1 when no settings file exists (a sample is written)
    or when the file cannot be read or parsed.
    """
    configure_logging(debug)

    try:
        settings = load_settings()
    except SettingsError as exc:
        logger.critical("%s", exc)
        raise typer.Exit(code=1) from exc

    typer.echo(
        f"Settings loaded from {settings.get_config_file_location(SETTINGS_FILENAME)} "
        f"(guild {settings.waddles.guild_id or '-'}, prefix {settings.waddles.prefix!r})"
    )


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("path")
def config_path() -> None:
    """Print where the settings file is looked up."""
    typer.echo(resolve_config_dir() + SETTINGS_FILENAME)


@config_app.command("validate")
def validate_config(file: Path = FILE_ARGUMENT):
    """Validate a settings file against the schema."""
    try:
        read_settings_file(file)
        typer.echo("✅ Config valid")
    except SettingsError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("sample")
def sample(dst: Path = DST_ARGUMENT):
    """Write a default, commented settings file."""
    try:
        write_sample_settings(dst)
    except SettingsError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    typer.secho(f"Sample config written to {dst}", fg=typer.colors.GREEN)


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a settings file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "waddles": {
                "prefix": typer.prompt("Command prefix", default="!"),
                "token": typer.prompt("Discord bot token", hide_input=True),
                "guild-id": typer.prompt("Guild ID"),
                "log-level": typer.prompt("Log level", default="info"),
            },
            "database": {
                "host": typer.prompt("Database host", default="localhost"),
                "port": typer.prompt("Database port", default="5432"),
                "user": typer.prompt("Database user", default="waddles"),
                "pass": typer.prompt("Database password", hide_input=True),
                "database-name": typer.prompt("Database name", default="waddles"),
            },
        }
        try:
            cfg = Settings.model_validate(data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                loc = ".".join(str(part) for part in e["loc"])
                typer.secho(f"  • {loc} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    write_text_with_mode(dst, cfg.to_toml(), SAMPLE_FILE_MODE)
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
