"""Entry point for ``python -m mimeweave``."""

from mimeweave.cli.app import app


def main() -> None:
    """Run the mimeweave CLI."""
    app()


if __name__ == "__main__":
    main()
