"""Shared pytest fixtures for the mimeweave test suite."""

from __future__ import annotations

# Disable Rich colors and force wide terminal BEFORE any imports
# Rich checks these at import time
import os

os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"
os.environ["FORCE_COLOR"] = "0"
os.environ["COLUMNS"] = "200"  # Prevent text wrapping in CLI output

import logging
from collections.abc import Callable, Generator
from email import policy
from email.message import Message
from email.parser import BytesParser
from pathlib import Path

import pytest

import mimeweave.config.loader as _cfg_loader
from mimeweave.mail import EmailMessage

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Keep user configuration files out of every test.

    Home and cwd both point to an empty temporary directory, and the cached
    configuration is cleared before and after the test.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(tmp_path)
    _cfg_loader.clear_config()
    yield home
    _cfg_loader.clear_config()


@pytest.fixture
def cfg_loader() -> object:
    """Expose the config loader module for testing private helpers."""
    return _cfg_loader


@pytest.fixture
def parse_mime() -> Callable[[bytes], Message]:
    """Parse rendered bytes with the standard library parser."""

    def _parse(raw: bytes) -> Message:
        return BytesParser(policy=policy.compat32).parsebytes(raw)

    return _parse


@pytest.fixture
def scenario_message() -> EmailMessage:
    """Return the reference single-recipient plain-text message."""
    return EmailMessage().sender("a@x.com").to("b@x.com").subject("Hi").text("hello")


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo init_logging() side effects so caplog keeps seeing records."""
    yield
    import mimeweave.logging as mimeweave_logging

    std_logger = logging.getLogger("mimeweave")
    for handler in std_logger.handlers[:]:
        std_logger.removeHandler(handler)
    std_logger.setLevel(logging.NOTSET)
    std_logger.propagate = True
    mimeweave_logging._root_logger = None  # pylint: disable=protected-access
