from __future__ import annotations

import os
from pathlib import Path

import typer

from dataresult import __version__
from dataresult.cli.commands.config_cmd import config
from dataresult.cli.commands.lookup import codes, file_error, network_error, permission_error
from dataresult.cli.context import CONFIG_ENV


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(codes)
app.command("network")(network_error)
app.command("file")(file_error)
app.command("permission")(permission_error)
app.command()(config)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        help="Path to dataresult.toml (default: ./dataresult.toml)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if config_file is not None:
        os.environ[CONFIG_ENV] = str(config_file)


def main() -> None:
    app()
