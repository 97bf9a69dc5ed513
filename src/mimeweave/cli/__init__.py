"""Command line interface for mimeweave."""

from mimeweave.cli.app import app, main

__all__ = ["app", "main"]
