"""Logging setup for mimeweave.

Library modules log through ``logging.getLogger(__name__)``; applications
call :func:`init_logging` once to attach handlers to the ``mimeweave``
logger hierarchy.
"""

from __future__ import annotations

import logging
from typing import Any

from mimeweave.logging.manager import (
    LOGGING_LEVEL,
    SUCCESS_LEVEL,
    TRACE_LEVEL,
    LogManager,
)

_root_logger: LogManager | None = None


def init_logging(preset: str | None = None, config: dict[str, Any] | None = None) -> LogManager:
    """Create the package LogManager and wire its handlers to ``mimeweave``.

    Args:
        preset: Named preset (``dev``, ``prod``, ``debug``).
        config: Explicit configuration merged over the preset.

    Returns:
        The configured LogManager.
    """
    global _root_logger  # pylint: disable=global-statement

    manager = LogManager(config=config, preset=preset)

    std_logger = logging.getLogger("mimeweave")
    for handler in std_logger.handlers[:]:
        std_logger.removeHandler(handler)
    for handler in manager.handlers:
        std_logger.addHandler(handler)
    std_logger.setLevel(TRACE_LEVEL)
    std_logger.propagate = False

    _root_logger = manager
    return manager


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger in the ``mimeweave`` namespace.

    ``get_logger()`` returns the LogManager created by :func:`init_logging`
    when there is one, the plain ``mimeweave`` logger otherwise.
    """
    if name is None:
        return _root_logger if _root_logger is not None else logging.getLogger("mimeweave")
    if name == "mimeweave" or name.startswith("mimeweave."):
        return logging.getLogger(name)
    return logging.getLogger(f"mimeweave.{name}")


__all__ = [
    "LOGGING_LEVEL",
    "SUCCESS_LEVEL",
    "TRACE_LEVEL",
    "LogManager",
    "get_logger",
    "init_logging",
]
