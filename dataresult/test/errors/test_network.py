"""Tests for dataresult.errors.network module."""

import pytest

from dataresult.core.errors import ResultError
from dataresult.core.result import Failure
from dataresult.errors.network import CustomNetworkResultError, NetworkResultError


class TestFromCode:
    """Tests for NetworkResultError.from_code()."""

    @pytest.mark.parametrize(
        ("code", "member"),
        [
            (400, NetworkResultError.BAD_REQUEST),
            (401, NetworkResultError.UNAUTHORIZED),
            (403, NetworkResultError.FORBIDDEN),
            (404, NetworkResultError.NOT_FOUND),
            (204, NetworkResultError.NO_CONTENT),
            (408, NetworkResultError.REQUEST_TIMEOUT),
            (415, NetworkResultError.UNSUPPORTED_MEDIA_TYPE),
            (429, NetworkResultError.TOO_MANY_REQUESTS),
            (500, NetworkResultError.INTERNAL_SERVER_ERROR),
            (503, NetworkResultError.SERVICE_UNAVAILABLE),
        ],
    )
    def test_canonical_codes(self, code: int, member: NetworkResultError) -> None:
        assert NetworkResultError.from_code(code) is member

    def test_not_found_message_contains_code(self) -> None:
        error = NetworkResultError.from_code(404)
        assert error is NetworkResultError.NOT_FOUND
        assert error.error_message() == "[Not Found, ErrorCode=404]"

    def test_unknown_code_is_custom(self) -> None:
        error = NetworkResultError.from_code(999)
        assert error == CustomNetworkResultError(999, "Unknown Error (999)")
        assert error.code == 999
        assert error.error_message() == "[Unknown Error (999), ErrorCode=999]"

    def test_custom_message(self) -> None:
        error = NetworkResultError.from_code(418, "I'm a teapot")
        assert error == CustomNetworkResultError(418, "I'm a teapot")

    def test_message_ignored_for_canonical(self) -> None:
        assert NetworkResultError.from_code(404, "Gone fishing") is NetworkResultError.NOT_FOUND


class TestMembers:
    def test_code_and_message(self) -> None:
        assert NetworkResultError.TOO_MANY_REQUESTS.code == 429
        assert NetworkResultError.TOO_MANY_REQUESTS.message == "Too Many Requests"

    def test_str_and_repr(self) -> None:
        assert str(NetworkResultError.FORBIDDEN) == "NetworkResultError.FORBIDDEN"
        assert repr(NetworkResultError.FORBIDDEN) == "NetworkResultError.FORBIDDEN"
        assert str(CustomNetworkResultError(599, "x")) == "CustomNetworkResultError(599)"

    def test_satisfies_capability(self) -> None:
        assert isinstance(NetworkResultError.NOT_FOUND, ResultError)
        assert isinstance(CustomNetworkResultError(599, "x"), ResultError)

    def test_usable_in_failure(self) -> None:
        failure = Failure(NetworkResultError.from_code(503))
        assert failure.recover(lambda e: e.code).get_data_or_none() == 503
