"""Tests for RenderOptions and its configuration binding."""

from __future__ import annotations

from pathlib import Path

import pytest
from box import Box

from mimeweave.config import load_config
from mimeweave.mail import MailConfigurationError, RenderOptions


class TestRenderOptions:
    """Coverage for the RenderOptions dataclass."""

    def test_defaults(self) -> None:
        """Defaults keep the BCC header and use sha256."""
        options = RenderOptions()
        assert options.emit_bcc_header is True
        assert options.boundary_prefix == "bounds"
        assert options.boundary_algorithm == "sha256"

    def test_frozen(self) -> None:
        """Options cannot be mutated after creation."""
        options = RenderOptions()
        with pytest.raises(AttributeError):
            options.emit_bcc_header = False  # type: ignore[misc]

    def test_invalid_algorithm(self) -> None:
        """Unknown algorithms are rejected at construction."""
        with pytest.raises(MailConfigurationError):
            RenderOptions(boundary_algorithm="rot13")

    def test_configuration_error_is_value_error(self) -> None:
        """MailConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            RenderOptions(boundary_algorithm="rot13")


class TestFromConfig:
    """Coverage for RenderOptions.from_config()."""

    def test_from_explicit_mapping(self) -> None:
        """Values are read from the mail section."""
        config = Box({"mail": {"emit_bcc_header": False, "boundary": {"prefix": "x", "algorithm": "sha512"}}})
        options = RenderOptions.from_config(config)
        assert options == RenderOptions(emit_bcc_header=False, boundary_prefix="x", boundary_algorithm="sha512")

    def test_missing_section_uses_defaults(self) -> None:
        """An empty configuration yields default options."""
        assert RenderOptions.from_config({}) == RenderOptions()

    def test_rejects_non_boolean_bcc_flag(self) -> None:
        """A quoted boolean is a configuration error."""
        with pytest.raises(MailConfigurationError, match="emit_bcc_header"):
            RenderOptions.from_config({"mail": {"emit_bcc_header": "no"}})

    def test_packaged_defaults(self) -> None:
        """The packaged configuration matches the built-in defaults."""
        assert RenderOptions.from_config(load_config()) == RenderOptions()

    def test_reads_cached_configuration(self, tmp_path: Path) -> None:
        """Without an argument the cached configuration is used."""
        (tmp_path / "mimeweave.conf.yml").write_text("mail:\n  emit_bcc_header: false\n", encoding="utf-8")
        load_config()
        assert RenderOptions.from_config().emit_bcc_header is False

    @pytest.mark.parametrize(
        "config, section",
        [
            ({"mail": True}, "mail must be a mapping"),
            ({"mail": ["a"]}, "mail must be a mapping"),
            ({"mail": {"boundary": "sha256"}}, "mail.boundary must be a mapping"),
        ],
    )
    def test_rejects_non_mapping_sections(self, config: dict, section: str) -> None:
        """Scalar or list sections are configuration errors."""
        with pytest.raises(MailConfigurationError, match=section):
            RenderOptions.from_config(config)

    def test_empty_sections_use_defaults(self, tmp_path: Path) -> None:
        """Empty YAML sections load as None and keep the defaults."""
        config = tmp_path / "empty.yml"
        config.write_text("mail:\n  boundary:\n    prefix:\n    algorithm:\n", encoding="utf-8")
        assert RenderOptions.from_config(load_config(config)) == RenderOptions()

    def test_rejects_non_string_prefix(self) -> None:
        """A nested value cannot be used as the boundary prefix."""
        with pytest.raises(MailConfigurationError, match=r"mail\.boundary\.prefix"):
            RenderOptions.from_config({"mail": {"boundary": {"prefix": {"a": 1}}}})

    def test_numeric_prefix_is_stringified(self) -> None:
        """YAML numbers are accepted as prefix text."""
        assert RenderOptions.from_config({"mail": {"boundary": {"prefix": 42}}}).boundary_prefix == "42"
