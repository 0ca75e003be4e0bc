"""File error family."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dataresult.core.constants import (
    ERROR_MSG_FILE_NOT_FOUND,
    ERROR_MSG_FILE_READ_FAILED,
    ERROR_MSG_FILE_WRITE_FAILED,
)

__all__ = ["AnyFileResultError", "CustomFileResultError", "FileResultError"]


class FileResultError(Enum):
    """Canonical file failures. The value is the rendered message."""

    NOT_FOUND = ERROR_MSG_FILE_NOT_FOUND
    READ_FAILED = ERROR_MSG_FILE_READ_FAILED
    WRITE_FAILED = ERROR_MSG_FILE_WRITE_FAILED

    @property
    def message(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Stable lookup key, e.g. ``"read_failed"``."""
        return self.name.lower()

    def error_message(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @classmethod
    def from_message(cls, message: str) -> AnyFileResultError:
        """Rebuild an error from its rendered message.

        Matching relies on exact message text, so any change to the
        canonical wording turns a known error into a custom one. Prefer
        ``from_key`` where a stable key is available.
        """
        for member in cls:
            if member.value == message:
                return member
        return CustomFileResultError(message)

    @classmethod
    def from_key(cls, key: str) -> FileResultError | None:
        """Look up a member by its stable key. Returns None if unknown."""
        return cls.__members__.get(key.strip().upper())


@dataclass(frozen=True, slots=True)
class CustomFileResultError:
    """File failure with a free-form message."""

    message: str

    def error_message(self) -> str:
        return self.message

    def __str__(self) -> str:
        return f"CustomFileResultError({self.message!r})"


type AnyFileResultError = FileResultError | CustomFileResultError
