"""Tests for mimeweave.logging initialization helpers."""

from __future__ import annotations

import logging

import mimeweave.logging as mimeweave_logging
from mimeweave.logging import TRACE_LEVEL, LogManager, get_logger, init_logging


class TestInitLogging:
    """Tests for init_logging()."""

    def test_returns_log_manager(self) -> None:
        """init_logging() creates and stores a LogManager."""
        logger = init_logging(preset="dev")
        assert isinstance(logger, LogManager)
        assert mimeweave_logging._root_logger is logger  # pylint: disable=protected-access

    def test_configures_package_logger(self) -> None:
        """The mimeweave logger receives the manager handlers."""
        manager = init_logging(preset="dev")
        std_logger = logging.getLogger("mimeweave")
        assert std_logger.level == TRACE_LEVEL
        assert std_logger.propagate is False
        for handler in manager.handlers:
            assert handler in std_logger.handlers

    def test_reinit_replaces_handlers(self) -> None:
        """Calling init_logging() twice does not stack handlers."""
        init_logging(preset="dev")
        manager = init_logging(preset="prod")
        assert logging.getLogger("mimeweave").handlers == manager.handlers


class TestGetLogger:
    """Tests for get_logger()."""

    def test_prefixes_namespace(self) -> None:
        """Bare names are placed under mimeweave."""
        assert get_logger("cli").name == "mimeweave.cli"

    def test_keeps_existing_prefix(self) -> None:
        """Names already in the namespace are kept."""
        assert get_logger("mimeweave.mail.message").name == "mimeweave.mail.message"

    def test_none_before_init(self) -> None:
        """Without init, get_logger() returns the plain package logger."""
        assert get_logger() is logging.getLogger("mimeweave")

    def test_none_after_init(self) -> None:
        """After init, get_logger() returns the LogManager."""
        manager = init_logging(preset="prod")
        assert get_logger() is manager
