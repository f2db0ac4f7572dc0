"""Typed GraphQL client for the Eco-Soap Bank API."""

from .client import QueryClient
from .envelope import decode
from .exceptions import (
    ConfigurationError,
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
from .result import QueryResult
from .session import SessionFacade
from .transport import FixtureTransport, GraphQLRequest, HttpxTransport, Transport, TransportResponse

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "ErrorMessage",
    "FixtureTransport",
    "GraphQLRequest",
    "HttpxTransport",
    "MalformedResponseError",
    "NoDataError",
    "NoTokenError",
    "NotImplementedOperationError",
    "QueryClient",
    "QueryError",
    "QueryResult",
    "SessionFacade",
    "Transport",
    "TransportError",
    "TransportResponse",
    "TypeMismatchError",
    "decode",
]
