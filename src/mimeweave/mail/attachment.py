"""Attachment value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Attachment:
    """A binary file carried by a message.

    No validation is performed: the name and MIME type are emitted as given.

    Attributes:
        name: File name announced in the part headers.
        mime: MIME type of the payload (e.g. ``application/pdf``).
        data: Raw payload bytes.
        description: Content-Description value, defaults to ``name``.

    Examples:
        >>> report = Attachment(name="report.csv", mime="text/csv", data=b"a,b\\n1,2\\n")
        >>> report.display_description
        'report.csv'
    """

    name: str
    mime: str
    data: bytes
    description: str | None = None

    @property
    def display_description(self) -> str:
        """Return the description, falling back to the file name."""
        return self.description or self.name


__all__ = ["Attachment"]
