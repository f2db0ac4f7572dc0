"""Tests for classified query errors and QueryResult."""

import pytest

from soapbank_client.exceptions import (
    DecodeError,
    ErrorMessage,
    MalformedResponseError,
    NoDataError,
    NoTokenError,
    NotImplementedOperationError,
    QueryError,
    TransportError,
    TypeMismatchError,
)
from soapbank_client.result import QueryResult


class TestExceptionHierarchy:
    """Test the exception class hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [NoTokenError, TransportError, DecodeError, NotImplementedOperationError],
    )
    def test_kinds_share_base(self, error_type):
        assert issubclass(error_type, QueryError)

    @pytest.mark.parametrize("error_type", [MalformedResponseError, NoDataError, TypeMismatchError])
    def test_decode_kinds(self, error_type):
        assert issubclass(error_type, DecodeError)

    def test_error_codes_are_distinct(self):
        codes = {
            NoTokenError.error_code,
            TransportError.error_code,
            MalformedResponseError.error_code,
            NoDataError.error_code,
            TypeMismatchError.error_code,
            NotImplementedOperationError.error_code,
        }
        assert len(codes) == 6

    def test_transport_error_keeps_cause_and_status(self):
        cause = OSError("reset")
        error = TransportError("failed", cause=cause, status_code=503)

        assert error.cause is cause
        assert error.status_code == 503
        assert str(error) == "failed"

    def test_not_implemented_names_operation(self):
        error = NotImplementedOperationError("fetch_payments")

        assert error.operation == "fetch_payments"
        assert "fetch_payments" in str(error)


class TestQueryResult:
    def test_success(self):
        result = QueryResult.success(3)

        assert result.ok
        assert result.unwrap() == 3

    def test_failure_unwrap_raises_carried_error(self):
        error = NoTokenError()
        result = QueryResult.failure(error)

        assert not result.ok
        with pytest.raises(NoTokenError) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    def test_map(self):
        assert QueryResult.success(2).map(lambda value: value * 10).value == 20

        error = NoDataError()
        mapped = QueryResult.failure(error).map(lambda value: pytest.fail("must not be called"))
        assert mapped.error is error
        assert mapped.value is None

    def test_success_with_none_value_is_ok(self):
        assert QueryResult.success(None).ok


class TestErrorMessage:
    @pytest.mark.parametrize(
        "error,title",
        [
            (NoTokenError(), "You are not logged in."),
            (TransportError("x"), "Unable to reach the server."),
            (MalformedResponseError("x"), "The server sent an unreadable response."),
            (NoDataError(), "No data was returned."),
            (TypeMismatchError("x"), "The server sent unexpected data."),
            (NotImplementedOperationError("op"), "This feature is not available yet."),
        ],
    )
    def test_classified_errors(self, error, title):
        message = ErrorMessage.from_error(error)

        assert message.title == title
        assert message.message
        assert message.error is error

    def test_unknown_error_falls_back(self):
        error = KeyError("boom")
        message = ErrorMessage.from_error(error)

        assert message.title == ErrorMessage.FALLBACK_TITLE
        assert message.message == ErrorMessage.FALLBACK_MESSAGE
        assert message.error is error

    def test_no_error(self):
        message = ErrorMessage.from_error(None)

        assert message.title == ErrorMessage.FALLBACK_TITLE
        assert str(message) == f"{ErrorMessage.FALLBACK_TITLE}\n{ErrorMessage.FALLBACK_MESSAGE}"
