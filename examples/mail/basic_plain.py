"""Plain-text mail composition using :class:`mimeweave.EmailMessage`."""

from __future__ import annotations

from mimeweave import EmailMessage


def build_plain_message() -> None:
    """Construct a plain-text message and print the raw MIME payload."""
    raw = (
        EmailMessage()
        .sender("sender@example.com")
        .to("user@example.com")
        .subject("Plain Greetings")
        .text("Hello from mimeweave!\nThis message only carries a text/plain part.")
        .render()
    )
    print(raw.decode("utf-8"))


if __name__ == "__main__":  # pragma: no cover - manual example
    build_plain_message()
