"""Classified errors for the soap bank GraphQL client.

This module defines the closed set of failure kinds a query can produce.
Errors are carried as values inside ``QueryResult`` rather than raised
through the presentation layer, so every kind keeps its underlying cause
for debugging and maps to a user-facing title/message pair.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


class ConfigurationError(Exception):
    """Raised when client configuration is missing or invalid."""

    pass


class QueryError(Exception):
    """Base exception for all classified query failures.

    Attributes:
        error_code: Stable machine-readable identifier for the failure kind
        cause: Underlying transport or decode error, when available
    """

    error_code = "query_error"

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class NoTokenError(QueryError):
    """A query was attempted before any credential was provided."""

    error_code = "no_token"

    def __init__(self, message: str = "No token provided; log in before querying.") -> None:
        super().__init__(message)


class TransportError(QueryError):
    """Network or connectivity failure while sending a request.

    Attributes:
        status_code: HTTP status of the reply when the server answered
                     with a non-2xx status, otherwise None.
    """

    error_code = "transport"

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code


class DecodeError(QueryError):
    """Base class for failures while unwrapping or decoding a response."""

    error_code = "decode"


class MalformedResponseError(DecodeError):
    """Response body is not valid JSON."""

    error_code = "decode.malformed"


class NoDataError(DecodeError):
    """Response JSON lacks the expected ``data`` -> operation nesting.

    Attributes:
        graphql_errors: Entries of the top-level GraphQL ``errors`` array,
                        if the server sent any.
    """

    error_code = "decode.no_data"

    def __init__(
        self,
        message: str = "Response contained no data.",
        *,
        graphql_errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.graphql_errors = graphql_errors or []


class TypeMismatchError(DecodeError):
    """Nested payload does not structurally match the requested type."""

    error_code = "decode.type_mismatch"


class NotImplementedOperationError(QueryError):
    """Operation has no backing query template yet."""

    error_code = "not_implemented"

    def __init__(self, operation: str) -> None:
        super().__init__(f"Operation '{operation}' is not implemented yet.")
        self.operation = operation


@dataclass(frozen=True)
class ErrorMessage:
    """Title/message pair suitable for showing a failure to a user."""

    title: str
    message: str
    error: Optional[BaseException] = None

    FALLBACK_TITLE = "An unknown error occurred."
    FALLBACK_MESSAGE = "Please contact the developer for more information."

    @classmethod
    def from_error(cls, error: Optional[BaseException]) -> "ErrorMessage":
        """Build a user-facing message for a classified (or unknown) error."""
        for error_type, title, message in _USER_MESSAGES:
            if isinstance(error, error_type):
                return cls(title=title, message=message, error=error)
        return cls(title=cls.FALLBACK_TITLE, message=cls.FALLBACK_MESSAGE, error=error)

    def __str__(self) -> str:
        lines = []
        if self.error is not None:
            lines.append(repr(self.error))
        lines.append(self.title)
        lines.append(self.message)
        return "\n".join(lines)


# Most specific first; subclasses must precede their bases.
_USER_MESSAGES = (
    (NoTokenError, "You are not logged in.", "Please log in and try again."),
    (
        TransportError,
        "Unable to reach the server.",
        "Check your internet connection and try again.",
    ),
    (
        MalformedResponseError,
        "The server sent an unreadable response.",
        "Please try again a little later, and contact us if it occurs repeatedly.",
    ),
    (
        NoDataError,
        "No data was returned.",
        "Please try again a little later, and contact us if it occurs repeatedly.",
    ),
    (
        TypeMismatchError,
        "The server sent unexpected data.",
        "Please update the app, and contact us if it occurs repeatedly.",
    ),
    (
        NotImplementedOperationError,
        "This feature is not available yet.",
        "It will be enabled in an upcoming release.",
    ),
)
