"""Typed outcome of a query: either a decoded value or a classified error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from soapbank_client.exceptions import QueryError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Result of a single query call.

    Exactly one of ``value`` / ``error`` is meaningful: a call never yields a
    partial value alongside an error.
    """

    value: Optional[T] = None
    error: Optional[QueryError] = None

    @classmethod
    def success(cls, value: T) -> "QueryResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: QueryError) -> "QueryResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U]) -> "QueryResult[U]":
        """Transform a successful value; failures pass through unchanged."""
        if self.error is not None:
            return QueryResult(error=self.error)
        return QueryResult(value=fn(self.value))  # type: ignore[arg-type]
