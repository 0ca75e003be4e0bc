"""Immutable result/state wrapper for operations that may be idle, loading,
successful or failed."""

from dataresult.core import (
    DataResult,
    Failure,
    Idle,
    Loading,
    NullTransformationError,
    ResultError,
    Success,
    is_failure,
    is_idle,
    is_loading,
    is_success,
    run_catching_for_result,
    run_catching_for_result_async,
    wrap_as_failure,
    wrap_as_idle,
    wrap_as_loading,
    wrap_as_success,
)
from dataresult.errors import (
    CustomFileResultError,
    CustomNetworkResultError,
    CustomPermissionResultError,
    ExceptionResultError,
    FileResultError,
    NetworkResultError,
    PermissionResultError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
    # lifting / catching
    "run_catching_for_result",
    "run_catching_for_result_async",
    "wrap_as_failure",
    "wrap_as_idle",
    "wrap_as_loading",
    "wrap_as_success",
    # errors
    "CustomFileResultError",
    "CustomNetworkResultError",
    "CustomPermissionResultError",
    "ExceptionResultError",
    "FileResultError",
    "NetworkResultError",
    "NullTransformationError",
    "PermissionResultError",
    "ResultError",
]
