"""Shared console helpers for CLI commands."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console

# Status output goes to stderr so rendered bytes can be piped from stdout.
console = Console(stderr=True)


def exit_error(message: str, code: int = 1) -> NoReturn:
    """Print an error message and exit with ``code``."""
    console.print(f"[red]Error:[/] {message}", soft_wrap=True)
    raise typer.Exit(code=code)


__all__ = ["console", "exit_error"]
