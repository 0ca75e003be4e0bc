"""Error families satisfying the ResultError capability."""

from dataresult.core.errors import NullTransformationError

from .exception import ExceptionResultError
from .file import AnyFileResultError, CustomFileResultError, FileResultError
from .network import AnyNetworkResultError, CustomNetworkResultError, NetworkResultError
from .permission import (
    AnyPermissionResultError,
    CustomPermissionResultError,
    PermissionResultError,
)

type ResultErrorFamily = (
    AnyNetworkResultError
    | AnyFileResultError
    | AnyPermissionResultError
    | ExceptionResultError
    | NullTransformationError
)

__all__ = [
    # network
    "AnyNetworkResultError",
    "CustomNetworkResultError",
    "NetworkResultError",
    # file
    "AnyFileResultError",
    "CustomFileResultError",
    "FileResultError",
    # permission
    "AnyPermissionResultError",
    "CustomPermissionResultError",
    "PermissionResultError",
    # exception
    "ExceptionResultError",
    # all families
    "ResultErrorFamily",
]
