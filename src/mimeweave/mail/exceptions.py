"""Specialized exceptions raised by the mimeweave.mail module.

Exception hierarchy::

    MimeweaveError
        MailError (base for all mail errors)
            MailConfigurationError (invalid render options, also ValueError)
            MailRenderError (a message could not be serialized)
"""

from __future__ import annotations

from mimeweave.config.exceptions import MimeweaveError


class MailError(MimeweaveError):
    """Base exception for all mail module errors."""


class MailConfigurationError(MailError, ValueError):
    """Render options contain an invalid value."""


class MailRenderError(MailError):
    """Rendering a message failed.

    The message being rendered is left untouched; callers may fix its state
    and render again.

    Attributes:
        part: The part being rendered when the failure happened.
        reason: Description of the failure.
    """

    def __init__(self, part: str, reason: str) -> None:
        """Initialize MailRenderError.

        Args:
            part: The part being rendered (e.g. ``attachment 'a.pdf'``).
            reason: Description of the failure.
        """
        super().__init__(f"Cannot render {part}: {reason}")
        self.part = part
        self.reason = reason


__all__ = [
    "MailConfigurationError",
    "MailError",
    "MailRenderError",
]
