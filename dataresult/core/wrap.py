"""Lifting helpers and the catch-wrapping boundary.

``run_catching_for_result`` is the single place where an exception raised by
caller code is turned into a ``Failure`` value. Everywhere else, exceptions
propagate to the caller untouched.

Usage:
    result = run_catching_for_result(lambda: json.loads(payload))
    match result:
        case Success(doc):
            ...
        case Failure(ExceptionResultError(exception=exc)):
            ...
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from dataresult.errors.exception import ExceptionResultError

from .constants import CODE_SUCCESS_OK
from .errors import NullTransformationError, ResultError
from .result import Failure, Idle, Loading, Success

__all__ = [
    "run_catching_for_result",
    "run_catching_for_result_async",
    "wrap_as_failure",
    "wrap_as_idle",
    "wrap_as_loading",
    "wrap_as_success",
]


def wrap_as_idle[D](data: D | None = None) -> Idle[D]:
    return Idle(data)


def wrap_as_loading[D](data: D | None = None) -> Loading[D]:
    return Loading(data)


def wrap_as_success[D](data: D, status_code: int = CODE_SUCCESS_OK) -> Success[D]:
    """Lift a value into Success. Raises ValueError for ``None``."""
    return Success(data, status_code)


def wrap_as_failure[E: ResultError, D](error: E, data: D | None = None) -> Failure[E, D]:
    return Failure(error, data)


def _classify[D](value: D | None) -> Success[D] | Failure[NullTransformationError, D]:
    if value is None:
        return Failure(NullTransformationError())
    return Success(value)


def run_catching_for_result[D](
    block: Callable[[], D | None],
) -> Success[D] | Failure[ExceptionResultError, D] | Failure[NullTransformationError, D]:
    """Run ``block`` and capture its outcome as a DataResult.

    Only ``Exception`` subclasses are captured; KeyboardInterrupt,
    SystemExit and other BaseExceptions propagate.

    Args:
        block: Zero-argument callable to execute synchronously.

    Returns:
        Success(value) on normal return, Failure(ExceptionResultError(exc))
        if ``block`` raised, Failure(NullTransformationError()) if it
        returned None.
    """
    try:
        value = block()
    except Exception as e:
        return Failure(ExceptionResultError(e))
    return _classify(value)


async def run_catching_for_result_async[D](
    block: Callable[[], Awaitable[D | None]],
) -> Success[D] | Failure[ExceptionResultError, D] | Failure[NullTransformationError, D]:
    """Await ``block()`` and capture its outcome as a DataResult.

    Same contract as ``run_catching_for_result``. Cancellation
    (asyncio.CancelledError) is not an Exception and propagates.
    """
    try:
        value = await block()
    except Exception as e:
        return Failure(ExceptionResultError(e))
    return _classify(value)
