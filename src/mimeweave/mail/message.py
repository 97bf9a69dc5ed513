"""Chainable email message builder and MIME renderer.

:class:`EmailMessage` accumulates addresses, subject, bodies, attachments and
custom headers through fluent setters, then renders a complete
``multipart/mixed`` message to bytes::

    multipart/mixed
        multipart/alternative
            text/plain   (when a text body is set)
            text/html    (when an HTML body is set)
        attachment 1 (base64)
        attachment 2 (base64)
        ...

Examples:
    >>> message = (
    ...     EmailMessage()
    ...     .sender("a@example.com")
    ...     .to("b@example.com")
    ...     .subject("Hi")
    ...     .text("hello")
    ... )
    >>> raw = message.render()
    >>> raw.startswith(b"From:  a@example.com\\r\\nTo: b@example.com\\r\\n")
    True
"""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING

from mimeweave.logging import TRACE_LEVEL
from mimeweave.mail.boundary import alternative_boundary, generate_boundary
from mimeweave.mail.exceptions import MailRenderError
from mimeweave.mail.options import RenderOptions

if TYPE_CHECKING:
    from mimeweave.mail.attachment import Attachment

__all__ = ["CRLF", "EmailMessage"]

log = logging.getLogger(__name__)

CRLF = "\r\n"


class EmailMessage:
    """Mutable email message rendered on demand to MIME bytes.

    Setters return the instance so calls can be chained. ``to``, ``cc``,
    ``bcc`` and ``attachment`` append; every other setter overwrites. No
    address, MIME type or header validation happens here.

    The boundary is generated once, at construction. :meth:`render` is a pure
    function of the current state and may be called any number of times.

    Instances are not synchronized. Share a :meth:`copy` rather than the
    instance itself when rendering from several threads.

    Args:
        options: Render-time policy. Defaults to :class:`RenderOptions()`.
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self._options = options or RenderOptions()

        self._from: str | None = None
        self._to: list[str] = []
        self._cc: list[str] = []
        self._bcc: list[str] = []
        self._subject: str | None = None
        self._text: str | None = None
        self._html: str | None = None
        self._attachments: list[Attachment] = []
        self._headers: dict[str, str] = {}

        self._boundary = generate_boundary(
            self._options.boundary_prefix,
            self._options.boundary_algorithm,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(from={self._from!r}, destinations={len(self.destinations)}, "
            f"attachments={len(self._attachments)}, boundary={self._boundary[:12]!r})"
        )

    def __bytes__(self) -> bytes:
        return self.render()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def options(self) -> RenderOptions:
        """Return the render options bound to this message."""
        return self._options

    @property
    def boundary(self) -> str:
        """Return the outer multipart/mixed boundary."""
        return self._boundary

    @property
    def alternative_boundary(self) -> str:
        """Return the inner multipart/alternative boundary."""
        return alternative_boundary(self._boundary)

    @property
    def destinations(self) -> list[str]:
        """Return every recipient: to, then cc, then bcc, without deduplication."""
        return self._to + self._cc + self._bcc

    @property
    def attachments(self) -> tuple[Attachment, ...]:
        """Return the attachments in insertion order."""
        return tuple(self._attachments)

    @property
    def headers(self) -> dict[str, str]:
        """Return a copy of the custom headers, empty values included."""
        return dict(self._headers)

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------

    def sender(self, address: str) -> EmailMessage:
        """Set the ``From`` address."""
        self._from = address
        return self

    def to(self, address: str) -> EmailMessage:
        """Append a primary recipient."""
        self._to.append(address)
        return self

    def cc(self, address: str) -> EmailMessage:
        """Append a carbon-copy recipient."""
        self._cc.append(address)
        return self

    def bcc(self, address: str) -> EmailMessage:
        """Append a blind carbon-copy recipient."""
        self._bcc.append(address)
        return self

    def subject(self, subject: str) -> EmailMessage:
        """Set the subject line."""
        self._subject = subject
        return self

    def text(self, body: str) -> EmailMessage:
        """Set the plain-text alternative."""
        self._text = body
        return self

    def html(self, body: str) -> EmailMessage:
        """Set the HTML alternative."""
        self._html = body
        return self

    def attachment(self, attachment: Attachment) -> EmailMessage:
        """Append an attachment."""
        self._attachments.append(attachment)
        return self

    def header(self, name: str, value: str) -> EmailMessage:
        """Set a custom header, replacing any previous value for ``name``.

        Headers whose value is empty are kept but skipped at render time, so
        setting ``""`` later suppresses a header set earlier.
        """
        self._headers[name] = value
        return self

    def copy(self) -> EmailMessage:
        """Return an independent copy sharing the same boundary.

        Attachments are immutable and shared between both copies.
        """
        clone = type(self).__new__(type(self))
        clone._options = self._options
        clone._from = self._from
        clone._to = list(self._to)
        clone._cc = list(self._cc)
        clone._bcc = list(self._bcc)
        clone._subject = self._subject
        clone._text = self._text
        clone._html = self._html
        clone._attachments = list(self._attachments)
        clone._headers = dict(self._headers)
        clone._boundary = self._boundary
        return clone

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> bytes:
        """Render the message to CRLF-delimited UTF-8 bytes.

        Returns:
            Header block, blank line and nested multipart body.

        Raises:
            MailRenderError: If an attachment payload is not bytes-like or
                the text cannot be encoded as UTF-8.
        """
        lines = self.render_lines()
        try:
            raw = CRLF.join(lines).encode("utf-8")
        except TypeError as e:
            raise MailRenderError("message", f"non-text value in message fields ({e})") from e
        except UnicodeEncodeError as e:
            raise MailRenderError("message", f"text is not encodable as UTF-8 ({e.reason})") from e

        log.debug(
            "Rendered message: %d bytes, %d recipient(s), %d attachment(s)",
            len(raw),
            len(self.destinations),
            len(self._attachments),
        )
        return raw

    def render_lines(self) -> list[str]:
        """Return the message as a list of lines, before CRLF joining.

        Raises:
            MailRenderError: If an attachment payload cannot be encoded.
        """
        trace_enabled = log.isEnabledFor(TRACE_LEVEL)
        sub_boundary = self.alternative_boundary

        lines = self._render_header()

        lines.append(f"--{self._boundary}")
        lines.append("Content-Type: multipart/alternative;")
        lines.append(f' boundary="{sub_boundary}"')
        lines.append("")

        if self._text:
            if trace_enabled:
                log.log(TRACE_LEVEL, "[MIME] text/plain alternative (%d chars)", len(self._text))
            lines.extend(self._render_alternative(sub_boundary, "text/plain", self._text))

        if self._html:
            if trace_enabled:
                log.log(TRACE_LEVEL, "[MIME] text/html alternative (%d chars)", len(self._html))
            lines.extend(self._render_alternative(sub_boundary, "text/html", self._html))

        lines.append(f"--{sub_boundary}--")
        lines.append("")

        for attachment in self._attachments:
            lines.extend(self._render_attachment(attachment))
            if trace_enabled:
                log.log(TRACE_LEVEL, "[MIME] attachment %r (%s)", attachment.name, attachment.mime)

        lines.append(f"--{self._boundary}--")
        return lines

    def _render_header(self) -> list[str]:
        lines: list[str] = []

        if self._from:
            lines.append(f"From:  {self._from}")

        lines.append(f"To: {', '.join(self._to)}")

        if self._cc:
            lines.append(f"CC: {', '.join(self._cc)}")

        if self._bcc and self._options.emit_bcc_header:
            lines.append(f"BCC: {', '.join(self._bcc)}")

        lines.append(f"Subject: {self._subject or ''}")

        lines.append("Content-Type: multipart/mixed;")
        lines.append(f' boundary="{self._boundary}"')

        for name, value in self._headers.items():
            if value:
                lines.append(f"{name}: {value}")

        lines.append("MIME-Version: 1.0")
        lines.append("")
        return lines

    @staticmethod
    def _render_alternative(sub_boundary: str, content_type: str, body: str) -> list[str]:
        return [
            f"--{sub_boundary}",
            f'Content-Type: {content_type}; charset="UTF-8"',
            "Content-Transfer-Encoding: 8bit",
            "",
            body,
            "",
        ]

    def _render_attachment(self, attachment: Attachment) -> list[str]:
        try:
            payload = base64.b64encode(attachment.data).decode("ascii")
        except TypeError as e:
            raise MailRenderError(
                f"attachment '{attachment.name}'",
                f"payload must be bytes-like, got {type(attachment.data).__name__}",
            ) from e

        return [
            f"--{self._boundary}",
            f'Content-Type: {attachment.mime}; name="{attachment.name}"',
            f"Content-Description: {attachment.display_description}",
            f'Content-Disposition: attachment;filename="{attachment.name}";',
            "Content-Transfer-Encoding: base64",
            "",
            payload,
            "",
        ]
