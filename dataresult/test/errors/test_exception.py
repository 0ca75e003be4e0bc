"""Tests for dataresult.errors.exception module."""

from dataresult.core.errors import ResultError
from dataresult.errors.exception import ExceptionResultError


class TestExceptionResultError:
    def test_message_from_exception(self) -> None:
        assert ExceptionResultError(ValueError("bad input")).error_message() == "bad input"

    def test_message_falls_back_to_type_name(self) -> None:
        assert ExceptionResultError(KeyError()).error_message() == "KeyError"
        assert ExceptionResultError(RuntimeError("")).error_message() == "RuntimeError"

    def test_equality_follows_exception_identity(self) -> None:
        exc = ValueError("x")
        assert ExceptionResultError(exc) == ExceptionResultError(exc)
        assert ExceptionResultError(exc) != ExceptionResultError(ValueError("x"))

    def test_str(self) -> None:
        assert str(ExceptionResultError(ValueError("x"))) == "ExceptionResultError(ValueError('x'))"

    def test_satisfies_capability(self) -> None:
        assert isinstance(ExceptionResultError(ValueError()), ResultError)
