from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from dataresult.core.config import CONFIG_FILENAME, Config, ConfigError, load_config
from dataresult.core.errors import ErrorCode
from dataresult.core.result import Failure
from dataresult.errors.file import FileResultError
from dataresult.output.console import ConsoleProtocol, RichConsole

CONFIG_ENV = "DATARESULT_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    config_path: Path
    console: ConsoleProtocol


def config_path() -> tuple[Path, bool]:
    """Return the config path and whether it was requested explicitly."""
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env).expanduser(), True
    return Path.cwd() / CONFIG_FILENAME, False


def build_context() -> CLIContext:
    path, explicit = config_path()
    result = load_config(path)

    if isinstance(result, Failure):
        if result.error is FileResultError.NOT_FOUND and not explicit:
            return CLIContext(config=Config(), config_path=path, console=RichConsole())
        message = result.error.error_message()
        if not isinstance(result.error, ConfigError):
            message = f"{message} ({path})"
        typer.echo(f"error: {message}", err=True)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    config = result.get_data_or(Config())
    return CLIContext(
        config=config,
        config_path=path,
        console=RichConsole(color=config.output.color),
    )
