"""Permission error family."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dataresult.core.constants import ERROR_MSG_PERMISSION_DENIED, ERROR_MSG_PERMISSION_REVOKED

__all__ = ["AnyPermissionResultError", "CustomPermissionResultError", "PermissionResultError"]


class PermissionResultError(Enum):
    DENIED = ERROR_MSG_PERMISSION_DENIED
    REVOKED = ERROR_MSG_PERMISSION_REVOKED

    @property
    def message(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        return self.name.lower()

    def error_message(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @classmethod
    def from_message(cls, message: str) -> AnyPermissionResultError:
        """Rebuild an error from its rendered message (exact text match)."""
        for member in cls:
            if member.value == message:
                return member
        return CustomPermissionResultError(message)

    @classmethod
    def from_key(cls, key: str) -> PermissionResultError | None:
        return cls.__members__.get(key.strip().upper())


@dataclass(frozen=True, slots=True)
class CustomPermissionResultError:
    message: str

    def error_message(self) -> str:
        return self.message

    def __str__(self) -> str:
        return f"CustomPermissionResultError({self.message!r})"


type AnyPermissionResultError = PermissionResultError | CustomPermissionResultError
