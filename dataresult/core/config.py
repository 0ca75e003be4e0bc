"""Typed configuration loading and access.

This module provides dataclasses for the dataresult.toml structure:

    [network.messages]
    418 = "I'm a teapot"

    [output]
    color = true

Loading returns a DataResult rather than raising, so callers branch on
Success / Failure like any other operation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from dataresult.errors.file import FileResultError
from dataresult.errors.network import AnyNetworkResultError, NetworkResultError
from dataresult.errors.permission import PermissionResultError

from .result import DataResult, Failure, Success
from .structured import StrDict, as_str_dict, get_bool, get_str_map, get_table

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "NetworkConfig",
    "OutputConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "dataresult.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be parsed."""

    message: str
    path: Path | None = None

    def error_message(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} ({self.path})"


type ConfigLoadError = ConfigError | FileResultError | PermissionResultError


def _empty_messages() -> Mapping[int, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class NetworkConfig:
    """Messages for status codes outside the canonical set."""

    messages: Mapping[int, str] = field(default_factory=_empty_messages)


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Console output settings."""

    color: bool = True


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    network: NetworkConfig = field(default_factory=NetworkConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def network_error(self, code: int) -> AnyNetworkResultError:
        """Resolve a status code, using configured messages for unknown codes."""
        return NetworkResultError.from_code(code, self.network.messages.get(code))

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a network message key is not an integer code.
        """
        network: StrDict = get_table(data, "network") or {}
        output: StrDict = get_table(data, "output") or {}

        messages: dict[int, str] = {}
        for key, text in get_str_map(network, "messages").items():
            try:
                messages[int(key)] = text
            except ValueError:
                raise ValueError(f"network.messages key is not a status code: {key!r}") from None

        color = get_bool(output, "color")
        return cls(
            network=NetworkConfig(messages=MappingProxyType(messages)),
            output=OutputConfig(color=True if color is None else color),
        )


def _parse_toml(path: Path) -> Success[StrDict] | Failure[ConfigLoadError, StrDict]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
    except FileNotFoundError:
        return Failure(FileResultError.NOT_FOUND)
    except PermissionError:
        return Failure(PermissionResultError.DENIED)
    except OSError:
        return Failure(FileResultError.READ_FAILED)
    except tomllib.TOMLDecodeError as e:
        return Failure(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Failure(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Failure(ConfigError("Config root must be a TOML table", path=path))
    return Success(data)


def load_config(path: Path) -> DataResult[Config, ConfigLoadError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to dataresult.toml

    Returns:
        Success(Config), or Failure with FileResultError.NOT_FOUND,
        PermissionResultError.DENIED or ConfigError.
    """
    result = _parse_toml(path)
    if isinstance(result, Failure):
        return Failure(result.error)

    try:
        return Success(Config.from_dict(result.data))
    except (KeyError, TypeError, ValueError) as e:
        return Failure(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return default config on any failure.

    This is useful when config is optional.
    """
    return load_config(path).get_data_or(Config())
