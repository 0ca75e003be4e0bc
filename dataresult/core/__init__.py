"""Core domain types and logic."""

from .constants import CODE_SUCCESS_OK
from .errors import ErrorCode, NullTransformationError, ResultError
from .result import (
    DataResult,
    Failure,
    Idle,
    Loading,
    Success,
    is_failure,
    is_idle,
    is_loading,
    is_success,
)
from .wrap import (
    run_catching_for_result,
    run_catching_for_result_async,
    wrap_as_failure,
    wrap_as_idle,
    wrap_as_loading,
    wrap_as_success,
)

__all__ = [
    # constants
    "CODE_SUCCESS_OK",
    # errors
    "ErrorCode",
    "NullTransformationError",
    "ResultError",
    # result
    "DataResult",
    "Failure",
    "Idle",
    "Loading",
    "Success",
    "is_failure",
    "is_idle",
    "is_loading",
    "is_success",
    # wrap
    "run_catching_for_result",
    "run_catching_for_result_async",
    "wrap_as_failure",
    "wrap_as_idle",
    "wrap_as_loading",
    "wrap_as_success",
]
