from __future__ import annotations

import typer

from dataresult.cli.context import config_path
from dataresult.core.config import Config, load_config
from dataresult.core.errors import ErrorCode
from dataresult.core.result import Failure
from dataresult.output.console import RichConsole
from dataresult.output.render import print_data_result


def config() -> None:
    """Validate the config file and show the load result."""
    path, _ = config_path()
    result = load_config(path)

    console = RichConsole(color=result.get_data_or(Config()).output.color)
    console.print(f"config: {path}")
    print_data_result(result, console)

    if isinstance(result, Failure):
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
