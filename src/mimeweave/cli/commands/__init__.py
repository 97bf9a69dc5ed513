"""CLI command implementations."""

from mimeweave.cli.commands.render import render_message

__all__ = ["render_message"]
