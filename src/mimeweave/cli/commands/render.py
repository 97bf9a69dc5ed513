"""Render an email message to an ``.eml`` file or stdout."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Annotated

import typer

from mimeweave.cli.common import console, exit_error
from mimeweave.config import ConfigError, load_config
from mimeweave.mail import Attachment, EmailMessage, MailError, RenderOptions

DEFAULT_MIME_TYPE = "application/octet-stream"


def _guess_mime(path: Path) -> str:
    """Guess a MIME type from the file extension.

    Args:
        path: Attachment path.

    Returns:
        Guessed MIME type, ``application/octet-stream`` when unknown.
    """
    mime, _ = mimetypes.guess_type(path.name)
    return mime or DEFAULT_MIME_TYPE


def _parse_header(raw: str) -> tuple[str, str]:
    """Split a ``Name: value`` option into its parts."""
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        exit_error(f"Invalid header '{raw}'. Expected 'Name: value'.")
    return name.strip(), value.strip()


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        exit_error(f"Cannot read '{path}': {e}")


def _load_attachment(path: Path) -> Attachment:
    try:
        data = path.read_bytes()
    except OSError as e:
        exit_error(f"Cannot read attachment '{path}': {e}")
    return Attachment(name=path.name, mime=_guess_mime(path), data=data)


def _resolve_options(config_path: Path | None, no_bcc_header: bool) -> RenderOptions:
    try:
        config = load_config(config_path)
        options = RenderOptions.from_config(config)
    except (ConfigError, MailError) as e:
        exit_error(str(e))

    if no_bcc_header:
        return RenderOptions(
            emit_bcc_header=False,
            boundary_prefix=options.boundary_prefix,
            boundary_algorithm=options.boundary_algorithm,
        )
    return options


def render_message(
    sender: Annotated[
        str | None,
        typer.Option("--from", help="Sender address."),
    ] = None,
    to: Annotated[
        list[str] | None,
        typer.Option("--to", help="Recipient address (repeatable)."),
    ] = None,
    cc: Annotated[
        list[str] | None,
        typer.Option("--cc", help="Carbon-copy address (repeatable)."),
    ] = None,
    bcc: Annotated[
        list[str] | None,
        typer.Option("--bcc", help="Blind carbon-copy address (repeatable)."),
    ] = None,
    subject: Annotated[
        str | None,
        typer.Option("--subject", "-s", help="Subject line."),
    ] = None,
    text: Annotated[
        str | None,
        typer.Option("--text", "-t", help="Plain-text body."),
    ] = None,
    text_file: Annotated[
        Path | None,
        typer.Option("--text-file", help="Read the plain-text body from a UTF-8 file."),
    ] = None,
    html: Annotated[
        str | None,
        typer.Option("--html", help="HTML body."),
    ] = None,
    html_file: Annotated[
        Path | None,
        typer.Option("--html-file", help="Read the HTML body from a UTF-8 file."),
    ] = None,
    attach: Annotated[
        list[Path] | None,
        typer.Option("--attach", "-a", help="File to attach (repeatable)."),
    ] = None,
    header: Annotated[
        list[str] | None,
        typer.Option("--header", "-H", help="Custom header as 'Name: value' (repeatable)."),
    ] = None,
    no_bcc_header: Annotated[
        bool,
        typer.Option("--no-bcc-header", help="Keep BCC recipients out of the header block."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Configuration file to load instead of the cascade."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the message to this file instead of stdout."),
    ] = None,
) -> None:
    """Build a multipart/mixed message and write its raw bytes.

    Examples:
        # Plain-text message to stdout
        mimeweave render --from me@example.com --to you@example.com -s Hi -t "hello"

        # HTML + text with an attachment, saved as .eml
        mimeweave render --from me@example.com --to you@example.com \\
            --text-file body.txt --html-file body.html -a report.pdf -o out.eml
    """
    if text is not None and text_file is not None:
        exit_error("Use either --text or --text-file, not both.")
    if html is not None and html_file is not None:
        exit_error("Use either --html or --html-file, not both.")

    message = EmailMessage(_resolve_options(config_path, no_bcc_header))

    if sender:
        message.sender(sender)
    for address in to or []:
        message.to(address)
    for address in cc or []:
        message.cc(address)
    for address in bcc or []:
        message.bcc(address)
    if subject is not None:
        message.subject(subject)

    if text_file is not None:
        text = _read_text(text_file)
    if text is not None:
        message.text(text)
    if html_file is not None:
        html = _read_text(html_file)
    if html is not None:
        message.html(html)

    for path in attach or []:
        message.attachment(_load_attachment(path))
    for raw_header in header or []:
        message.header(*_parse_header(raw_header))

    try:
        raw = message.render()
    except MailError as e:
        exit_error(str(e))

    if output is None:
        typer.echo(raw, nl=False)
        return

    try:
        output.write_bytes(raw)
    except OSError as e:
        exit_error(f"Cannot write '{output}': {e}")

    console.print(
        f"[green]Wrote[/] {output} "
        f"[dim]({len(raw)} bytes, {len(message.destinations)} recipient(s), "
        f"{len(message.attachments)} attachment(s))[/]",
        soft_wrap=True,
    )


__all__ = ["render_message"]
