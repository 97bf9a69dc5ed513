"""Rich-backed logger with TRACE and SUCCESS levels.

:class:`LogManager` is a :class:`logging.Logger` subclass configured from a
plain dict (or a named preset). Console output goes through
:class:`rich.logging.RichHandler`, file output through a standard
:class:`logging.FileHandler`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

TRACE_LEVEL = 5
SUCCESS_LEVEL = 25

LOGGING_LEVEL = SimpleNamespace(
    TRACE=TRACE_LEVEL,
    DEBUG=logging.DEBUG,
    INFO=logging.INFO,
    SUCCESS=SUCCESS_LEVEL,
    WARNING=logging.WARNING,
    ERROR=logging.ERROR,
    CRITICAL=logging.CRITICAL,
)

logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")

# Hard limits for log file paths
HARD_MAX_FILE_PATH_LENGTH = 4096
HARD_MAX_FILE_NAME_LENGTH = 255
FORBIDDEN_PATH_COMPONENTS = frozenset({"..", "~"})
ALLOWED_LOG_EXTENSIONS = frozenset({"", ".log", ".txt", ".json"})

FALLBACK_DEFAULTS: dict[str, Any] = {
    "output": "console",
    "console": {
        "level": "INFO",
        "show_path": False,
        "tracebacks_show_locals": False,
    },
    "file": {
        "level": "DEBUG",
        "file_path": "mimeweave.log",
        "auto_create_dir": False,
        "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    },
    "theme": {
        "trace": "medium_purple4 on dark_olive_green1",
        "debug": "dim",
        "info": "cyan",
        "success": "bold green",
        "warning": "yellow",
        "error": "bold red",
        "critical": "bold white on red",
    },
    "icons": {
        "show": True,
        "trace": "🔬",
        "debug": "🐞",
        "info": "ℹ️",
        "success": "✅",
        "warning": "⚠️",
        "error": "❌",
        "critical": "🔥",
    },
}

FALLBACK_PRESETS: dict[str, dict[str, Any]] = {
    "dev": {
        "output": "console",
        "console": {"level": "DEBUG", "show_path": True},
    },
    "prod": {
        "output": "console",
        "console": {"level": "WARNING", "tracebacks_show_locals": False},
        "icons": {"show": False},
    },
    "debug": {
        "output": "console",
        "console": {"level": "TRACE", "show_path": True, "tracebacks_show_locals": True},
    },
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate_log_file_path(file_path: str | Path) -> Path:
    """Validate a log file path against the hard limits.

    Args:
        file_path: Candidate log file path.

    Returns:
        The resolved path.

    Raises:
        ValueError: If the path is too long, uses a forbidden component,
            or carries a disallowed extension.
    """
    raw = str(file_path)
    if len(raw) > HARD_MAX_FILE_PATH_LENGTH:
        raise ValueError(f"Log file path exceeds maximum length of {HARD_MAX_FILE_PATH_LENGTH}")

    path = Path(raw)
    if any(part in FORBIDDEN_PATH_COMPONENTS for part in path.parts):
        raise ValueError(f"Log file path contains a forbidden component: {raw}")
    if len(path.name) > HARD_MAX_FILE_NAME_LENGTH:
        raise ValueError(f"Log file name exceeds maximum length of {HARD_MAX_FILE_NAME_LENGTH}")
    if path.suffix.lower() not in ALLOWED_LOG_EXTENSIONS:
        raise ValueError(f"Log file extension '{path.suffix}' is not allowed")
    return path.resolve()


def _level(value: str | int) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value}")
    return level


class LogManager(logging.Logger):
    """Logger configured from a dict or a named preset.

    Args:
        name: Logger name.
        config: Configuration overrides merged over the defaults.
        preset: Name of a preset from :data:`FALLBACK_PRESETS`, applied
            before ``config``.

    Examples:
        >>> logger = LogManager(preset="dev")  # doctest: +SKIP
        >>> logger.trace("Rendering part", part="text/plain")  # doctest: +SKIP
    """

    def __init__(
        self,
        name: str = "mimeweave",
        *,
        config: dict[str, Any] | None = None,
        preset: str | None = None,
    ) -> None:
        super().__init__(name, level=TRACE_LEVEL)

        settings = dict(FALLBACK_DEFAULTS)
        if preset is not None:
            if preset not in FALLBACK_PRESETS:
                raise ValueError(f"Unknown logging preset '{preset}'. Choose from: {', '.join(FALLBACK_PRESETS)}")
            settings = _merge(settings, FALLBACK_PRESETS[preset])
        if config:
            settings = _merge(settings, config)
        self.settings = settings

        output = settings.get("output", "console")
        if output in ("console", "both"):
            self.addHandler(self._console_handler(settings))
        if output in ("file", "both"):
            self.addHandler(self._file_handler(settings["file"]))

    def _console_handler(self, settings: dict[str, Any]) -> logging.Handler:
        console_cfg = settings["console"]
        console = Console(stderr=True, theme=Theme({f"logging.level.{k}": v for k, v in settings["theme"].items()}))
        handler = RichHandler(
            console=console,
            show_path=bool(console_cfg.get("show_path", False)),
            rich_tracebacks=True,
            tracebacks_show_locals=bool(console_cfg.get("tracebacks_show_locals", False)),
        )
        handler.setLevel(_level(console_cfg.get("level", "INFO")))
        return handler

    def _file_handler(self, file_cfg: dict[str, Any]) -> logging.Handler:
        path = _validate_log_file_path(file_cfg["file_path"])
        if file_cfg.get("auto_create_dir"):
            path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(_level(file_cfg.get("level", "DEBUG")))
        handler.setFormatter(logging.Formatter(file_cfg["format"]))
        return handler

    def _with_icon(self, level_name: str, msg: str) -> str:
        icons = self.settings["icons"]
        if icons.get("show") and icons.get(level_name):
            return f"{icons[level_name]} {msg}"
        return msg

    @staticmethod
    def _with_context(msg: str, context: dict[str, Any]) -> str:
        if not context:
            return msg
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{msg} | {pairs}"

    def trace(self, msg: str, **context: Any) -> None:
        """Log at TRACE level with optional structured context."""
        if self.isEnabledFor(TRACE_LEVEL):
            self.log(TRACE_LEVEL, self._with_icon("trace", self._with_context(msg, context)))

    def success(self, msg: str, **context: Any) -> None:
        """Log at SUCCESS level with optional structured context."""
        if self.isEnabledFor(SUCCESS_LEVEL):
            self.log(SUCCESS_LEVEL, self._with_icon("success", self._with_context(msg, context)))


__all__ = [
    "ALLOWED_LOG_EXTENSIONS",
    "FALLBACK_DEFAULTS",
    "FALLBACK_PRESETS",
    "FORBIDDEN_PATH_COMPONENTS",
    "HARD_MAX_FILE_NAME_LENGTH",
    "HARD_MAX_FILE_PATH_LENGTH",
    "LOGGING_LEVEL",
    "SUCCESS_LEVEL",
    "TRACE_LEVEL",
    "LogManager",
]
