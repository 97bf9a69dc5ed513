"""mimeweave: chainable MIME email builder.

Build a message with fluent setters and render it to bytes ready for an
SMTP ``DATA`` payload, an ``.eml`` file or a queue.

Examples:
    >>> from mimeweave import EmailMessage
    >>> raw = EmailMessage().sender("a@example.com").to("b@example.com").text("hi").render()
"""

from mimeweave.config import (
    MimeweaveError,
    clear_config,
    get_config,
    load_config,
    require_config,
)
from mimeweave.logging import LogManager, get_logger, init_logging
from mimeweave.mail import (
    Attachment,
    EmailMessage,
    MailConfigurationError,
    MailError,
    MailRenderError,
    RenderOptions,
)
from mimeweave.meta import __version__

__all__ = [
    "Attachment",
    "EmailMessage",
    "LogManager",
    "MailConfigurationError",
    "MailError",
    "MailRenderError",
    "MimeweaveError",
    "RenderOptions",
    "__version__",
    "clear_config",
    "get_config",
    "get_logger",
    "init_logging",
    "load_config",
    "require_config",
]
