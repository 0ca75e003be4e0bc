"""DataResult presentation utilities.

Centralized formatting and exit code mapping for results shown by the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dataresult.core.errors import ErrorCode, ResultError
from dataresult.core.result import DataResult, Failure, Idle, Loading, Success
from dataresult.output.console import Style

if TYPE_CHECKING:
    from dataresult.output.console import ConsoleProtocol

__all__ = ["data_result_exit_code", "print_data_result", "style_for"]


def style_for[D, E: ResultError](result: DataResult[D, E]) -> Style:
    """Console style used for each variant."""
    match result:
        case Success():
            return Style.SUCCESS
        case Failure():
            return Style.ERROR
        case Loading():
            return Style.WARNING
        case Idle():
            return Style.INFO


def print_data_result[D, E: ResultError](
    result: DataResult[D, E], console: ConsoleProtocol
) -> None:
    """Print a DataResult to console with appropriate formatting."""
    style = style_for(result)
    match result:
        case Success(data, status_code):
            console.print(f"success ({status_code}): {data!r}", style)
        case Failure(error, data):
            console.print(f"failure: {error.error_message()}", style)
            console.print(f"error: {error}", Style.DIM)
            if data is not None:
                console.print(f"data: {data!r}", Style.DIM)
        case Loading(data):
            console.print("loading", style)
            if data is not None:
                console.print(f"data: {data!r}", Style.DIM)
        case Idle(data):
            console.print("idle", style)
            if data is not None:
                console.print(f"data: {data!r}", Style.DIM)


def data_result_exit_code[D, E: ResultError](result: DataResult[D, E]) -> int:
    """Get exit code for a DataResult: Failure is a user error, anything else OK."""
    if isinstance(result, Failure):
        return int(ErrorCode.USER_ERROR)
    return int(ErrorCode.OK)
