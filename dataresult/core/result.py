"""DataResult type for representing the state of an operation.

A DataResult is exactly one of four immutable variants:

- ``Idle``: nothing has started yet, optional placeholder data.
- ``Loading``: work is in progress, optional stale or partial data.
- ``Success``: work completed, data is always present.
- ``Failure``: work failed, an error is always present, data is optional.

Usage:
    def fetch_user(cache: User | None) -> DataResult[User, NetworkResultError]:
        if cache is None:
            return Loading()
        return Success(cache)

    result = fetch_user(None)
    result.on_loading(lambda _: spinner.show()).on_success(render)

    # Or with pattern matching
    match result:
        case Success(user):
            print(f"Hello {user.name}")
        case Failure(error, stale):
            print(f"Error: {error.error_message()}")
        case Loading(_) | Idle(_):
            pass
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeGuard

from .constants import CODE_SUCCESS_OK
from .errors import NullTransformationError, ResultError

__all__ = [
    "DataResult",
    "Failure",
    "Idle",
    "Loading",
    "Success",
    "is_failure",
    "is_idle",
    "is_loading",
    "is_success",
]


@dataclass(frozen=True, slots=True)
class Idle[D]:
    """No operation has started.

    Attributes:
        data: Optional placeholder data.
    """

    data: D | None = None

    def is_idle(self) -> bool:
        return True

    def is_loading(self) -> bool:
        return False

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return False

    def get_data_or_none(self) -> D | None:
        return self.data

    def get_data_or(self, default: D) -> D:
        return default if self.data is None else self.data

    def get_error_or_none(self) -> None:
        return None

    def map[R](self, f: Callable[[D], R | None]) -> Idle[R]:
        """Apply ``f`` to the placeholder data, if any. Stays Idle."""
        if self.data is None:
            return Idle()
        return Idle(f(self.data))

    def flat_map[R, E: ResultError](
        self, f: Callable[[D | None], DataResult[R, E]]
    ) -> DataResult[R, E]:
        return f(self.data)

    def recover[E](self, f: Callable[[E], D]) -> Idle[D]:
        return self

    def recover_with[E: ResultError](self, f: Callable[[E], DataResult[D, E]]) -> Idle[D]:
        return self

    def map_error[E, F](self, f: Callable[[E], F]) -> Idle[D]:
        return self

    def on_idle(self, block: Callable[[D | None], object]) -> Idle[D]:
        block(self.data)
        return self

    def on_loading(self, block: Callable[[D | None], object]) -> Idle[D]:
        return self

    def on_success(self, block: Callable[[D], object]) -> Idle[D]:
        return self

    def on_failure[E](self, block: Callable[[E, D | None], object]) -> Idle[D]:
        return self

    def __repr__(self) -> str:
        return f"Idle({self.data!r})"


@dataclass(frozen=True, slots=True)
class Loading[D]:
    """An operation is in progress.

    Attributes:
        data: Optional stale or partial data.
    """

    data: D | None = None

    def is_idle(self) -> bool:
        return False

    def is_loading(self) -> bool:
        return True

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return False

    def get_data_or_none(self) -> D | None:
        return self.data

    def get_data_or(self, default: D) -> D:
        return default if self.data is None else self.data

    def get_error_or_none(self) -> None:
        return None

    def map[R](self, f: Callable[[D], R | None]) -> Loading[R]:
        """Apply ``f`` to the partial data, if any. Stays Loading."""
        if self.data is None:
            return Loading()
        return Loading(f(self.data))

    def flat_map[R, E: ResultError](
        self, f: Callable[[D | None], DataResult[R, E]]
    ) -> DataResult[R, E]:
        return f(self.data)

    def recover[E](self, f: Callable[[E], D]) -> Loading[D]:
        return self

    def recover_with[E: ResultError](self, f: Callable[[E], DataResult[D, E]]) -> Loading[D]:
        return self

    def map_error[E, F](self, f: Callable[[E], F]) -> Loading[D]:
        return self

    def on_idle(self, block: Callable[[D | None], object]) -> Loading[D]:
        return self

    def on_loading(self, block: Callable[[D | None], object]) -> Loading[D]:
        block(self.data)
        return self

    def on_success(self, block: Callable[[D], object]) -> Loading[D]:
        return self

    def on_failure[E](self, block: Callable[[E, D | None], object]) -> Loading[D]:
        return self

    def __repr__(self) -> str:
        return f"Loading({self.data!r})"


@dataclass(frozen=True, slots=True)
class Success[D]:
    """An operation completed with data.

    ``data`` is required: constructing a Success around ``None`` raises
    ``ValueError``. ``status_code`` is informational only and is ignored by
    equality and hashing.

    Attributes:
        data: The produced value.
        status_code: Optional status, defaults to 200.
    """

    data: D
    status_code: int = field(default=CODE_SUCCESS_OK, compare=False)

    def __post_init__(self) -> None:
        if self.data is None:
            raise ValueError("Success requires data, got None")

    def is_idle(self) -> bool:
        return False

    def is_loading(self) -> bool:
        return False

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get_data_or_none(self) -> D:
        """Returns the data, which is always present for Success."""
        return self.data

    def get_data_or(self, default: D) -> D:
        """Returns the data.

        Args:
            default: Ignored for Success.
        """
        return self.data

    def get_error_or_none(self) -> None:
        return None

    def map[R](
        self, f: Callable[[D], R | None]
    ) -> Success[R] | Failure[NullTransformationError, R]:
        """Applies a function to the contained data.

        A Success can never hold ``None``, so when ``f`` returns ``None``
        the outcome is a Failure carrying ``NullTransformationError``.

        Args:
            f: Function to apply to the data.

        Returns:
            Success with the transformed data (status code kept), or
            Failure(NullTransformationError()).
        """
        mapped = f(self.data)
        if mapped is None:
            return Failure(NullTransformationError())
        return Success(mapped, self.status_code)

    def flat_map[R, E: ResultError](self, f: Callable[[D], DataResult[R, E]]) -> DataResult[R, E]:
        """Applies a function that returns a DataResult.

        Args:
            f: Function that takes the data and returns a DataResult.

        Returns:
            The DataResult returned by f.
        """
        return f(self.data)

    def recover[E](self, f: Callable[[E], D]) -> Success[D]:
        """Returns self unchanged (nothing to recover from)."""
        return self

    def recover_with[E: ResultError](self, f: Callable[[E], DataResult[D, E]]) -> Success[D]:
        """Returns self unchanged (nothing to recover from)."""
        return self

    def map_error[E, F](self, f: Callable[[E], F]) -> Success[D]:
        """Returns self unchanged (no error to map)."""
        return self

    def on_idle(self, block: Callable[[D | None], object]) -> Success[D]:
        return self

    def on_loading(self, block: Callable[[D | None], object]) -> Success[D]:
        return self

    def on_success(self, block: Callable[[D], object]) -> Success[D]:
        """Calls ``block`` with the data and returns self unchanged."""
        block(self.data)
        return self

    def on_failure[E](self, block: Callable[[E, D | None], object]) -> Success[D]:
        return self

    def __repr__(self) -> str:
        return f"Success({self.data!r}, status_code={self.status_code})"


@dataclass(frozen=True, slots=True)
class Failure[E: ResultError, D]:
    """An operation failed.

    ``error`` is required: constructing a Failure around ``None`` raises
    ``ValueError``. ``data`` may carry stale data, e.g. a cached copy.

    Attributes:
        error: The failure reason, satisfying ``ResultError``.
        data: Optional stale or partial data.
    """

    error: E
    data: D | None = None

    def __post_init__(self) -> None:
        if self.error is None:
            raise ValueError("Failure requires an error, got None")
        if not isinstance(self.error, ResultError):
            raise TypeError(f"Failure error must provide error_message(): {self.error!r}")

    def is_idle(self) -> bool:
        return False

    def is_loading(self) -> bool:
        return False

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get_data_or_none(self) -> D | None:
        return self.data

    def get_data_or(self, default: D) -> D:
        return default if self.data is None else self.data

    def get_error_or_none(self) -> E:
        """Returns the contained error."""
        return self.error

    def map[R](self, f: Callable[[D], R | None]) -> Failure[E, R]:
        """Applies a function to the stale data, if any.

        The error is carried through unchanged.

        Args:
            f: Function to apply to the data.

        Returns:
            Failure with the same error and the transformed data.
        """
        if self.data is None:
            return Failure(self.error)
        return Failure(self.error, f(self.data))

    def flat_map[R, F: ResultError](
        self, f: Callable[[D | None], DataResult[R, F]]
    ) -> DataResult[R, F]:
        return f(self.data)

    def recover(self, f: Callable[[E], D]) -> Success[D]:
        """Converts the failure to a Success.

        Args:
            f: Function producing data from the error.

        Returns:
            Success wrapping ``f(error)``.
        """
        return Success(f(self.error))

    def recover_with[F: ResultError](self, f: Callable[[E], DataResult[D, F]]) -> DataResult[D, F]:
        """Replaces the failure with the DataResult returned by ``f``."""
        return f(self.error)

    def map_error[F: ResultError](self, f: Callable[[E], F]) -> Failure[F, D]:
        """Applies a function to the contained error, keeping the data."""
        return Failure(f(self.error), self.data)

    def on_idle(self, block: Callable[[D | None], object]) -> Failure[E, D]:
        return self

    def on_loading(self, block: Callable[[D | None], object]) -> Failure[E, D]:
        return self

    def on_success(self, block: Callable[[D], object]) -> Failure[E, D]:
        return self

    def on_failure(self, block: Callable[[E, D | None], object]) -> Failure[E, D]:
        """Calls ``block`` with the error and data and returns self unchanged."""
        block(self.error, self.data)
        return self

    def __repr__(self) -> str:
        return (
            f"Failure({self.error!r}, message={self.error.error_message()!r}, "
            f"data={self.data!r})"
        )


type DataResult[D, E: ResultError] = Idle[D] | Loading[D] | Success[D] | Failure[E, D]


def is_idle[D, E: ResultError](result: DataResult[D, E]) -> TypeGuard[Idle[D]]:
    """Type guard that checks if a DataResult is Idle."""
    return isinstance(result, Idle)


def is_loading[D, E: ResultError](result: DataResult[D, E]) -> TypeGuard[Loading[D]]:
    """Type guard that checks if a DataResult is Loading."""
    return isinstance(result, Loading)


def is_success[D, E: ResultError](result: DataResult[D, E]) -> TypeGuard[Success[D]]:
    """Type guard that checks if a DataResult is Success.

    Example:
        result: DataResult[int, FileResultError] = Success(42)
        if is_success(result):
            # Type checker knows result is Success[int] here
            print(result.data + 1)
    """
    return isinstance(result, Success)


def is_failure[D, E: ResultError](result: DataResult[D, E]) -> TypeGuard[Failure[E, D]]:
    """Type guard that checks if a DataResult is Failure."""
    return isinstance(result, Failure)
