"""Text, HTML and binary attachments in a single message."""

from __future__ import annotations

from base64 import b64decode

from mimeweave import Attachment, EmailMessage

_LOGO_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAusB9Y9dOAoAAAAASUVORK5CYII="


def build_message_with_attachments() -> None:
    """Create a message with both alternatives and two attachments."""
    message = (
        EmailMessage()
        .sender("reports@example.com")
        .to("ops@example.com")
        .cc("lead@example.com")
        .subject("Daily metrics report")
        .text("Please find the report attached.")
        .html("<p>Please find the report attached.</p>")
        .attachment(
            Attachment(
                name="daily-report.csv",
                mime="text/csv",
                data=b"metric,value\nconversions,42\n",
                description="Daily metrics",
            )
        )
        .attachment(Attachment(name="logo.png", mime="image/png", data=b64decode(_LOGO_BASE64)))
        .header("X-Report-Id", "daily-2026-10-19")
    )

    print(f"Deliver to: {', '.join(message.destinations)}")
    print(message.render().decode("utf-8"))


if __name__ == "__main__":  # pragma: no cover - manual example
    build_message_with_attachments()
