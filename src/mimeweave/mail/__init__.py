"""MIME email building and rendering.

Examples:
    >>> from mimeweave.mail import Attachment, EmailMessage
    >>> raw = (
    ...     EmailMessage()
    ...     .sender("reports@example.com")
    ...     .to("team@example.com")
    ...     .subject("Weekly report")
    ...     .text("See attached.")
    ...     .attachment(Attachment(name="report.csv", mime="text/csv", data=b"a,b\\n"))
    ...     .render()
    ... )
"""

from mimeweave.mail.attachment import Attachment
from mimeweave.mail.boundary import alternative_boundary, generate_boundary
from mimeweave.mail.exceptions import (
    MailConfigurationError,
    MailError,
    MailRenderError,
)
from mimeweave.mail.message import CRLF, EmailMessage
from mimeweave.mail.options import RenderOptions

__all__ = [
    "CRLF",
    "Attachment",
    "EmailMessage",
    "MailConfigurationError",
    "MailError",
    "MailRenderError",
    "RenderOptions",
    "alternative_boundary",
    "generate_boundary",
]
