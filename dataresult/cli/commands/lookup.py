from __future__ import annotations

from typing import NoReturn

import typer

from dataresult.cli.context import CLIContext, build_context
from dataresult.core.errors import ErrorCode, ResultError
from dataresult.core.result import Failure
from dataresult.errors.file import FileResultError
from dataresult.errors.network import NetworkResultError
from dataresult.errors.permission import PermissionResultError
from dataresult.output.console import Style
from dataresult.output.render import print_data_result


def codes() -> None:
    """List canonical network errors and configured custom codes."""
    ctx = build_context()
    for member in sorted(NetworkResultError, key=lambda m: m.code):
        ctx.console.print(f"{member.code}  {member.name.lower():<24} {member.message}")

    custom = sorted(ctx.config.network.messages.items())
    if custom:
        ctx.console.print(f"custom ({ctx.config_path.name}):", Style.DIM)
        for code, message in custom:
            ctx.console.print(f"{code}  {'custom':<24} {message}", Style.DIM)


def network_error(
    code: int = typer.Argument(..., help="Status code, e.g. 404"),
    message: str | None = typer.Option(
        None, "--message", "-m", help="Message used when the code is not canonical"
    ),
) -> None:
    """Show the network error for a status code."""
    ctx = build_context()
    if message is not None:
        error = NetworkResultError.from_code(code, message)
    else:
        error = ctx.config.network_error(code)
    _show(ctx, error)


def file_error(
    text: str = typer.Argument(..., help="Error message, or a key with --key"),
    key: bool = typer.Option(False, "--key", help="Look up by stable key (e.g. not_found)"),
) -> None:
    """Show the file error for a message or key."""
    ctx = build_context()
    if not key:
        _show(ctx, FileResultError.from_message(text))
        return

    found = FileResultError.from_key(text)
    if found is None:
        _unknown_key(ctx, text, [m.key for m in FileResultError])
    _show(ctx, found)


def permission_error(
    text: str = typer.Argument(..., help="Error message, or a key with --key"),
    key: bool = typer.Option(False, "--key", help="Look up by stable key (e.g. denied)"),
) -> None:
    """Show the permission error for a message or key."""
    ctx = build_context()
    if not key:
        _show(ctx, PermissionResultError.from_message(text))
        return

    found = PermissionResultError.from_key(text)
    if found is None:
        _unknown_key(ctx, text, [m.key for m in PermissionResultError])
    _show(ctx, found)


def _show(ctx: CLIContext, error: ResultError) -> None:
    print_data_result(Failure(error), ctx.console)


def _unknown_key(ctx: CLIContext, key: str, available: list[str]) -> NoReturn:
    ctx.console.error(f"unknown key: {key}")
    ctx.console.print(f"Available: {', '.join(available)}", Style.DIM)
    raise typer.Exit(code=int(ErrorCode.USER_ERROR))
