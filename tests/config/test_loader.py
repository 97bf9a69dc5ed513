"""Tests for the cascading configuration loader."""

# pylint: disable=protected-access,redefined-outer-name

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from box import Box

from mimeweave.config import (
    CONFIG_FILENAME,
    clear_config,
    get_config,
    load_config,
    require_config,
)
from mimeweave.config.exceptions import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigNotLoadedError,
    MimeweaveError,
)


def test_packaged_defaults() -> None:
    """Without user files the packaged defaults are returned."""
    config = load_config()
    assert isinstance(config, Box)
    assert config.mail.emit_bcc_header is True
    assert config.mail.boundary.prefix == "bounds"
    assert config.mail.boundary.algorithm == "sha256"
    assert config.logging.preset == "prod"


def test_cwd_layer_overrides_defaults(tmp_path: Path) -> None:
    """A file in the working directory is merged over the defaults."""
    (tmp_path / CONFIG_FILENAME).write_text("mail:\n  boundary:\n    algorithm: sha512\n", encoding="utf-8")
    config = load_config()
    assert config.mail.boundary.algorithm == "sha512"
    # Sibling keys survive the deep merge
    assert config.mail.boundary.prefix == "bounds"
    assert config.mail.emit_bcc_header is True


@pytest.mark.parametrize(
    "layers, expected",
    [
        ({".config": "config-dir"}, "config-dir"),
        ({".config": "config-dir", "home": "home"}, "home"),
        ({".config": "config-dir", "home": "home", "cwd": "cwd"}, "cwd"),
    ],
    ids=["config dir", "home", "cwd"],
)
def test_zone_override(tmp_path: Path, isolated_config: Path, layers: dict[str, str], expected: str) -> None:
    """Later layers in the cascade win."""
    locations = {
        ".config": isolated_config / ".config",
        "home": isolated_config,
        "cwd": tmp_path,
    }
    for zone, prefix in layers.items():
        locations[zone].mkdir(parents=True, exist_ok=True)
        (locations[zone] / CONFIG_FILENAME).write_text(
            f"mail:\n  boundary:\n    prefix: {prefix}\n", encoding="utf-8"
        )

    assert load_config().mail.boundary.prefix == expected


def test_explicit_path(tmp_path: Path) -> None:
    """An explicit path is merged over the defaults and skips the cascade."""
    (tmp_path / CONFIG_FILENAME).write_text("mail:\n  emit_bcc_header: false\n", encoding="utf-8")
    custom = tmp_path / "custom" / "mail.yml"
    custom.parent.mkdir()
    custom.write_text("mail:\n  boundary:\n    prefix: custom\n", encoding="utf-8")

    config = load_config(path=custom)
    assert config.mail.boundary.prefix == "custom"
    assert config.mail.emit_bcc_header is True


def test_explicit_path_missing(tmp_path: Path) -> None:
    """A missing explicit file raises ConfigFileNotFoundError."""
    with pytest.raises(ConfigFileNotFoundError):
        load_config(path=tmp_path / "missing.yml")


def test_invalid_yaml(tmp_path: Path) -> None:
    """Unparsable YAML raises ConfigFormatError."""
    bad = tmp_path / "bad.yml"
    bad.write_text("mail: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigFormatError) as exc_info:
        load_config(path=bad)
    assert exc_info.value.path == str(bad)


def test_non_mapping_document(tmp_path: Path) -> None:
    """A YAML list at the top level is rejected."""
    bad = tmp_path / "list.yml"
    bad.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigFormatError, match="expected a mapping"):
        load_config(path=bad)


def test_empty_file_keeps_defaults(tmp_path: Path) -> None:
    """An empty user file changes nothing."""
    (tmp_path / CONFIG_FILENAME).write_text("", encoding="utf-8")
    assert load_config().mail.boundary.algorithm == "sha256"


def test_get_config_caches() -> None:
    """get_config() loads once and returns the cached Box."""
    first = get_config()
    assert get_config() is first


def test_require_config_before_load() -> None:
    """require_config() does not load implicitly."""
    with pytest.raises(ConfigNotLoadedError):
        require_config()


def test_require_config_after_load() -> None:
    """require_config() returns what load_config() cached."""
    config = load_config()
    assert require_config() is config


def test_clear_config() -> None:
    """clear_config() drops the cache."""
    load_config()
    clear_config()
    with pytest.raises(ConfigNotLoadedError):
        require_config()


def test_errors_share_base() -> None:
    """Every config error is a MimeweaveError."""
    for exc_type in (ConfigFileNotFoundError, ConfigFormatError, ConfigNotLoadedError):
        assert issubclass(exc_type, MimeweaveError)


def test_deep_merge(cfg_loader: Any) -> None:
    """Nested mappings merge, scalars and lists replace."""
    merged = cfg_loader._deep_merge(
        {"a": {"b": 1, "c": [1]}, "d": 1},
        {"a": {"c": [2]}, "e": 2},
    )
    assert merged == {"a": {"b": 1, "c": [2]}, "d": 1, "e": 2}
