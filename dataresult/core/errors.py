"""Error contracts.

This module defines the minimal capability every failure reason must
satisfy to be carried by a ``Failure``, the error synthesized by
``Success.map`` when a transform yields nothing, and the exit codes used by
the command line interface.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, runtime_checkable

from .constants import ERROR_MSG_NULL_TRANSFORMATION

__all__ = ["ErrorCode", "NullTransformationError", "ResultError"]


@runtime_checkable
class ResultError(Protocol):
    """Capability required from any error carried by a ``Failure``.

    Implementations provide a human-readable message. Their ``str()`` is
    the stable textual identity used for display and branching.
    """

    def error_message(self) -> str:
        """Return a human-readable description of the failure."""
        ...


@dataclass(frozen=True, slots=True)
class NullTransformationError:
    """A Success transform produced ``None``.

    All instances are equal, so results holding it compare by variant only.
    """

    def error_message(self) -> str:
        return ERROR_MSG_NULL_TRANSFORMATION

    def __str__(self) -> str:
        return "NullTransformationError"


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad input, unknown lookup key)
    - 2: Config error (unreadable or invalid dataresult.toml)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        """Check if this code indicates success."""
        return self == ErrorCode.OK
