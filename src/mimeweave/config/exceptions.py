"""Exceptions shared by mimeweave and raised by the config module.

Exception hierarchy::

    MimeweaveError (base for every library error)
        ConfigError (base for configuration errors)
            ConfigFileNotFoundError (explicit file missing)
            ConfigFormatError (unparsable or non-mapping document)
            ConfigNotLoadedError (require_config() before load)
"""

from __future__ import annotations


class MimeweaveError(Exception):
    """Base exception for all mimeweave errors."""


class ConfigError(MimeweaveError):
    """Base exception for configuration errors."""


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """A configuration file that was explicitly requested does not exist."""


class ConfigFormatError(ConfigError, ValueError):
    """A configuration file could not be parsed into a mapping.

    Attributes:
        path: File that failed to parse.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize ConfigFormatError.

        Args:
            path: File that failed to parse.
            reason: Description of the parse failure.
        """
        super().__init__(f"Invalid configuration file '{path}': {reason}")
        self.path = path
        self.reason = reason


class ConfigNotLoadedError(ConfigError):
    """Configuration was required before any file was loaded."""


__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigNotLoadedError",
    "MimeweaveError",
]
