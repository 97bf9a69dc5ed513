"""Typer application for the ``mimeweave`` command."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated

import typer
from rich.table import Table

from mimeweave import meta
from mimeweave.cli.commands import render_message
from mimeweave.cli.common import console, exit_error
from mimeweave.config import ConfigError, get_config
from mimeweave.logging import init_logging

app = typer.Typer(
    name=meta.__app_name__,
    help=f"{meta.__app_name__}: build and render MIME email messages.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{meta.__app_name__} {meta.__version__}")
        raise typer.Exit()


def _configured_preset() -> str | None:
    """Return the ``logging.preset`` value from the configuration cascade."""
    try:
        section = get_config().get("logging") or {}
    except ConfigError as e:
        exit_error(str(e))
    if not isinstance(section, Mapping):
        exit_error(f"logging must be a mapping, got {section!r}")
    preset = section.get("preset")
    return str(preset) if preset else None


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
    log_preset: Annotated[
        str | None,
        typer.Option("--log", help="Logging preset: dev, prod or debug."),
    ] = None,
) -> None:
    """Build and render MIME email messages."""
    if log_preset is not None:
        try:
            init_logging(preset=log_preset)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--log") from e
        return

    preset = _configured_preset()
    if preset is None:
        return
    try:
        init_logging(preset=preset)
    except ValueError as e:
        exit_error(f"logging.preset: {e}")


@app.command()
def info(
    full: Annotated[
        bool,
        typer.Option("--full", "-f", help="Show full package metadata."),
    ] = False,
) -> None:
    """Show the installed version (and metadata with --full)."""
    if not full:
        console.print(f"[bold cyan]{meta.__app_name__}[/] {meta.__version__}")
        return

    table = Table(title=meta.__app_name__, show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("Version", meta.__version__)
    table.add_row("Description", meta.__description__)
    table.add_row("Author", meta.__author__)
    table.add_row("Email", meta.__email__)
    table.add_row("URL", meta.__url__)
    table.add_row("License", meta.__license_type__)
    console.print(table)


app.command(name="render")(render_message)


def main() -> None:
    """Run the CLI application."""
    app()


__all__ = ["app", "main"]
