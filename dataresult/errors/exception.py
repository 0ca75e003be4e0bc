"""Error wrapping a caught exception."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExceptionResultError"]


@dataclass(frozen=True, slots=True)
class ExceptionResultError:
    """Wraps an exception raised inside ``run_catching_for_result``.

    Equality follows the wrapped exception, which compares by identity.

    Attributes:
        exception: The caught exception.
    """

    exception: BaseException

    def error_message(self) -> str:
        """Return the exception text, or its type name when the text is empty."""
        return str(self.exception) or type(self.exception).__name__

    def __str__(self) -> str:
        return f"ExceptionResultError({self.exception!r})"
