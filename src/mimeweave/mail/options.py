"""Render-time policy for :class:`mimeweave.mail.EmailMessage`."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mimeweave.mail.boundary import (
    DEFAULT_BOUNDARY_ALGORITHM,
    DEFAULT_BOUNDARY_PREFIX,
    validate_algorithm,
)
from mimeweave.mail.exceptions import MailConfigurationError


def _section(value: Any, name: str) -> Mapping[str, Any]:
    # An empty YAML section loads as None.
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise MailConfigurationError(f"{name} must be a mapping, got {value!r}")
    return value


def _text(section: Mapping[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    if value is None or value == "":
        return default
    if isinstance(value, (Mapping, list, bool)):
        raise MailConfigurationError(f"mail.boundary.{key} must be a string, got {value!r}")
    return str(value)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Policy knobs applied when a message is built and rendered.

    Attributes:
        emit_bcc_header: Write a ``BCC:`` header line when blind recipients
            are set. Disable it for relays that must never see the BCC list
            in headers; ``destinations`` is unaffected either way.
        boundary_prefix: Fixed text mixed into the boundary seed.
        boundary_algorithm: :mod:`hashlib` algorithm used for the boundary.

    Examples:
        >>> RenderOptions().emit_bcc_header
        True
        >>> RenderOptions(boundary_algorithm="nope")
        Traceback (most recent call last):
        ...
        mimeweave.mail.exceptions.MailConfigurationError: Unsupported boundary hash algorithm 'nope'
    """

    emit_bcc_header: bool = True
    boundary_prefix: str = DEFAULT_BOUNDARY_PREFIX
    boundary_algorithm: str = DEFAULT_BOUNDARY_ALGORITHM

    def __post_init__(self) -> None:
        """Validate option values.

        Raises:
            MailConfigurationError: If the hash algorithm is unsupported.
        """
        validate_algorithm(self.boundary_algorithm)

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None = None) -> RenderOptions:
        """Build options from the ``mail`` section of a configuration.

        Args:
            config: Full configuration mapping. When omitted the cached
                configuration from :func:`mimeweave.config.get_config` is used.

        Returns:
            Options with every missing key left at its default.

        Raises:
            MailConfigurationError: If a section is not a mapping or a value
                has the wrong type.
        """
        if config is None:
            from mimeweave.config import get_config

            config = get_config()

        mail_section = _section(config.get("mail"), "mail")
        boundary_section = _section(mail_section.get("boundary"), "mail.boundary")

        emit_bcc = mail_section.get("emit_bcc_header", True)
        if not isinstance(emit_bcc, bool):
            raise MailConfigurationError(f"mail.emit_bcc_header must be a boolean, got {emit_bcc!r}")

        return cls(
            emit_bcc_header=emit_bcc,
            boundary_prefix=_text(boundary_section, "prefix", DEFAULT_BOUNDARY_PREFIX),
            boundary_algorithm=_text(boundary_section, "algorithm", DEFAULT_BOUNDARY_ALGORITHM),
        )


__all__ = ["RenderOptions"]
