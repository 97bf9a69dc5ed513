"""Configuration management for mimeweave.

Examples:
    >>> from mimeweave.config import get_config
    >>> config = get_config()  # doctest: +SKIP
    >>> config.mail.emit_bcc_header  # doctest: +SKIP
    True
"""

from mimeweave.config.exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigNotLoadedError,
    MimeweaveError,
)
from mimeweave.config.loader import (
    CONFIG_FILENAME,
    clear_config,
    get_config,
    load_config,
    require_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigNotLoadedError",
    "MimeweaveError",
    "clear_config",
    "get_config",
    "load_config",
    "require_config",
]
