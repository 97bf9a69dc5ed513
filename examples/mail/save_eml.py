"""Render a message to an ``.eml`` file using configured render options.

Drop a ``mimeweave.conf.yml`` next to this script to change the policy::

    mail:
      emit_bcc_header: false
"""

from __future__ import annotations

from pathlib import Path

from mimeweave import EmailMessage, RenderOptions, init_logging


def save_message(target: Path) -> None:
    """Render a message with BCC recipients and write it to ``target``."""
    init_logging(preset="debug")

    message = (
        EmailMessage(RenderOptions.from_config())
        .sender("newsletter@example.com")
        .to("subscribers@example.com")
        .bcc("archive@example.com")
        .subject("October newsletter")
        .html("<h1>October</h1><p>News of the month.</p>")
    )
    target.write_bytes(message.render())
    print(f"Wrote {target} for {len(message.destinations)} recipient(s)")


if __name__ == "__main__":  # pragma: no cover - manual example
    save_message(Path("newsletter.eml"))
