"""Network error family.

Canonical HTTP-style failures are members of ``NetworkResultError``; any
other status code is represented by ``CustomNetworkResultError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dataresult.core.constants import (
    CODE_BAD_REQUEST,
    CODE_FORBIDDEN,
    CODE_INTERNAL_SERVER_ERROR,
    CODE_NO_CONTENT,
    CODE_NOT_FOUND,
    CODE_REQUEST_TIMEOUT,
    CODE_SERVICE_UNAVAILABLE,
    CODE_TOO_MANY_REQUESTS,
    CODE_UNAUTHORIZED,
    CODE_UNSUPPORTED_MEDIA_TYPE,
    ERROR_MSG_BAD_REQUEST,
    ERROR_MSG_FORBIDDEN,
    ERROR_MSG_INTERNAL_SERVER_ERROR,
    ERROR_MSG_NO_CONTENT,
    ERROR_MSG_NOT_FOUND,
    ERROR_MSG_REQUEST_TIMEOUT,
    ERROR_MSG_SERVICE_UNAVAILABLE,
    ERROR_MSG_TOO_MANY_REQUESTS,
    ERROR_MSG_UNAUTHORIZED,
    ERROR_MSG_UNSUPPORTED_MEDIA_TYPE,
)

__all__ = ["AnyNetworkResultError", "CustomNetworkResultError", "NetworkResultError"]


def _format(code: int, message: str) -> str:
    return f"[{message}, ErrorCode={code}]"


class NetworkResultError(Enum):
    """Canonical network failures, keyed by status code."""

    BAD_REQUEST = (CODE_BAD_REQUEST, ERROR_MSG_BAD_REQUEST)
    UNAUTHORIZED = (CODE_UNAUTHORIZED, ERROR_MSG_UNAUTHORIZED)
    FORBIDDEN = (CODE_FORBIDDEN, ERROR_MSG_FORBIDDEN)
    NOT_FOUND = (CODE_NOT_FOUND, ERROR_MSG_NOT_FOUND)
    NO_CONTENT = (CODE_NO_CONTENT, ERROR_MSG_NO_CONTENT)
    REQUEST_TIMEOUT = (CODE_REQUEST_TIMEOUT, ERROR_MSG_REQUEST_TIMEOUT)
    TOO_MANY_REQUESTS = (CODE_TOO_MANY_REQUESTS, ERROR_MSG_TOO_MANY_REQUESTS)
    UNSUPPORTED_MEDIA_TYPE = (CODE_UNSUPPORTED_MEDIA_TYPE, ERROR_MSG_UNSUPPORTED_MEDIA_TYPE)
    INTERNAL_SERVER_ERROR = (CODE_INTERNAL_SERVER_ERROR, ERROR_MSG_INTERNAL_SERVER_ERROR)
    SERVICE_UNAVAILABLE = (CODE_SERVICE_UNAVAILABLE, ERROR_MSG_SERVICE_UNAVAILABLE)

    code: int
    message: str

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message

    def error_message(self) -> str:
        return _format(self.code, self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @classmethod
    def from_code(cls, code: int, message: str | None = None) -> AnyNetworkResultError:
        """Look up the canonical error for a status code.

        Args:
            code: Status code, e.g. 404.
            message: Message for the custom error when ``code`` is not a
                canonical one. Ignored for canonical codes.

        Returns:
            The matching member, or CustomNetworkResultError for unknown codes.
        """
        for member in cls:
            if member.code == code:
                return member
        return CustomNetworkResultError(code, message or f"Unknown Error ({code})")


@dataclass(frozen=True, slots=True)
class CustomNetworkResultError:
    """Network failure with a status code outside the canonical set."""

    code: int
    message: str

    def error_message(self) -> str:
        return _format(self.code, self.message)

    def __str__(self) -> str:
        return f"CustomNetworkResultError({self.code})"


type AnyNetworkResultError = NetworkResultError | CustomNetworkResultError
