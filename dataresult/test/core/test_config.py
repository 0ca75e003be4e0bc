"""Tests for dataresult.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from dataresult.core.config import (
    Config,
    ConfigError,
    NetworkConfig,
    OutputConfig,
    load_config,
    load_config_or_default,
)
from dataresult.core.result import Failure, Success
from dataresult.errors.file import FileResultError
from dataresult.errors.network import CustomNetworkResultError, NetworkResultError


class TestDefaults:
    """Test config defaults and structure."""

    def test_defaults(self) -> None:
        config = Config()
        assert config.output.color is True
        assert dict(config.network.messages) == {}

    def test_frozen(self) -> None:
        config = OutputConfig()
        with pytest.raises(AttributeError):
            config.color = False  # type: ignore[misc]


class TestFromDict:
    """Test Config.from_dict parsing."""

    def test_empty(self) -> None:
        assert Config.from_dict({}).output.color is True

    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "network": {"messages": {"418": "I'm a teapot", "599": " Timeout "}},
                "output": {"color": False},
            }
        )
        assert dict(config.network.messages) == {418: "I'm a teapot", 599: "Timeout"}
        assert config.output.color is False

    def test_ignores_blank_and_non_string_messages(self) -> None:
        config = Config.from_dict({"network": {"messages": {"418": "", "419": 3}}})
        assert dict(config.network.messages) == {}

    def test_non_numeric_key_raises(self) -> None:
        with pytest.raises(ValueError, match="not a status code"):
            Config.from_dict({"network": {"messages": {"teapot": "x"}}})

    def test_wrong_color_type_uses_default(self) -> None:
        assert Config.from_dict({"output": {"color": "no"}}).output.color is True


class TestNetworkError:
    """Test Config.network_error resolution."""

    def test_canonical_code(self) -> None:
        assert Config().network_error(404) is NetworkResultError.NOT_FOUND

    def test_configured_custom_code(self) -> None:
        config = Config(network=NetworkConfig(messages={418: "I'm a teapot"}))
        assert config.network_error(418) == CustomNetworkResultError(418, "I'm a teapot")

    def test_unconfigured_custom_code(self) -> None:
        assert Config().network_error(999) == CustomNetworkResultError(999, "Unknown Error (999)")


class TestLoadConfig:
    """Test loading dataresult.toml from disk."""

    def test_load_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "dataresult.toml"
        path.write_text(
            '[network.messages]\n418 = "I\'m a teapot"\n\n[output]\ncolor = false\n',
            encoding="utf-8",
        )
        result = load_config(path)
        assert isinstance(result, Success)
        assert result.data.network.messages[418] == "I'm a teapot"
        assert result.data.output.color is False

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert result == Failure(FileResultError.NOT_FOUND)

    def test_directory(self, tmp_path: Path) -> None:
        result = load_config(tmp_path)
        assert result.is_failure()

    def test_parent_is_a_file(self, tmp_path: Path) -> None:
        """OS errors other than not-found or permission are read failures."""
        parent = tmp_path / "file.txt"
        parent.write_text("", encoding="utf-8")
        result = load_config(parent / "dataresult.toml")
        assert result == Failure(FileResultError.READ_FAILED)

    def test_parent_is_a_file_falls_back_to_default(self, tmp_path: Path) -> None:
        parent = tmp_path / "file.txt"
        parent.write_text("", encoding="utf-8")
        config = load_config_or_default(parent / "dataresult.toml")
        assert config.output.color is True

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "dataresult.toml"
        path.write_text("[output\ncolor = ", encoding="utf-8")
        result = load_config(path)
        error = result.get_error_or_none()
        assert isinstance(error, ConfigError)
        assert "Invalid TOML syntax" in error.message
        assert error.path == path

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "dataresult.toml"
        path.write_text('[network.messages]\nteapot = "x"\n', encoding="utf-8")
        error = load_config(path).get_error_or_none()
        assert isinstance(error, ConfigError)
        assert "Invalid config structure" in error.error_message()
        assert str(path) in error.error_message()

    def test_load_or_default(self, tmp_path: Path) -> None:
        config = load_config_or_default(tmp_path / "missing.toml")
        assert config.output.color is True
        assert dict(config.network.messages) == {}
