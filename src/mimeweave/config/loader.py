"""Cascading YAML configuration loader.

Configuration is searched in the following order, each layer being deep
merged over the previous one:

1. The default ``mimeweave.conf.yml`` packaged with the library
2. ``~/.config/mimeweave.conf.yml``
3. ``~/mimeweave.conf.yml``
4. ``./mimeweave.conf.yml`` (current working directory)

An explicit ``path`` skips the cascade and loads that single file over the
packaged defaults.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from box import Box

from mimeweave.config.exceptions import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigNotLoadedError,
)

log = logging.getLogger(__name__)

CONFIG_FILENAME = "mimeweave.conf.yml"

_config: Box | None = None


def _load_yaml_file(path: Path, encoding: str = "utf-8") -> dict[str, Any]:
    """Parse a YAML file and return its top-level mapping.

    Args:
        path: File to read.
        encoding: Text encoding of the file.

    Returns:
        Parsed mapping (empty dict for an empty file).

    Raises:
        ConfigFormatError: If the YAML is invalid or not a mapping.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding=encoding))
    except yaml.YAMLError as e:
        raise ConfigFormatError(str(path), str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFormatError(str(path), f"expected a mapping, got {type(data).__name__}")
    return data


def _load_default_config(encoding: str = "utf-8") -> dict[str, Any]:
    """Load the configuration file packaged with mimeweave."""
    source = resources.files("mimeweave").joinpath(CONFIG_FILENAME)
    data = yaml.safe_load(source.read_text(encoding=encoding))
    return data or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` recursively updated with ``override``."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _cascade_paths() -> list[Path]:
    """Return candidate user configuration files, lowest priority first."""
    home = Path.home()
    return [
        home / ".config" / CONFIG_FILENAME,
        home / CONFIG_FILENAME,
        Path.cwd() / CONFIG_FILENAME,
    ]


def load_config(path: str | Path | None = None, *, encoding: str = "utf-8") -> Box:
    """Load configuration and cache it for :func:`get_config`.

    Args:
        path: Explicit configuration file. When omitted the cascade is used.
        encoding: Text encoding of the configuration files.

    Returns:
        Merged configuration as a :class:`box.Box`.

    Raises:
        ConfigFileNotFoundError: If ``path`` does not exist.
        ConfigFormatError: If any file cannot be parsed.

    Examples:
        >>> config = load_config()  # doctest: +SKIP
        >>> config.mail.boundary.algorithm  # doctest: +SKIP
        'sha256'
    """
    global _config  # pylint: disable=global-statement

    data = _load_default_config(encoding)

    if path is not None:
        explicit = Path(path)
        if not explicit.is_file():
            raise ConfigFileNotFoundError(f"Configuration file not found: {explicit}")
        log.debug("Loading configuration from %s", explicit)
        data = _deep_merge(data, _load_yaml_file(explicit, encoding))
    else:
        seen: set[Path] = set()
        for candidate in _cascade_paths():
            resolved = candidate.resolve()
            if resolved in seen or not candidate.is_file():
                continue
            seen.add(resolved)
            log.debug("Merging configuration layer %s", candidate)
            data = _deep_merge(data, _load_yaml_file(candidate, encoding))

    _config = Box(data)
    return _config


def get_config() -> Box:
    """Return the cached configuration, loading it on first use."""
    if _config is None:
        return load_config()
    return _config


def require_config() -> Box:
    """Return the cached configuration without loading.

    Raises:
        ConfigNotLoadedError: If :func:`load_config` was never called.
    """
    if _config is None:
        raise ConfigNotLoadedError("Configuration not loaded. Call load_config() first.")
    return _config


def clear_config() -> None:
    """Forget the cached configuration."""
    global _config  # pylint: disable=global-statement
    _config = None


__all__ = [
    "CONFIG_FILENAME",
    "clear_config",
    "get_config",
    "load_config",
    "require_config",
]
