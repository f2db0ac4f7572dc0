"""Response envelope decoding.

Every reply from the server keys its payload one level under ``data`` and one
level under the operation name::

    {"data": {"<operationName>": <payload-object-or-array>}}

The decoder does not know or care which operation name is used; it takes the
value of the single entry under ``data`` and validates it against the
requested type. Each failure maps to exactly one ``DecodeError`` subclass.
"""

from __future__ import annotations

import functools
import json
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from soapbank_client.exceptions import DecodeError, MalformedResponseError, NoDataError, TypeMismatchError
from soapbank_client.result import QueryResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResponseEnvelope(BaseModel):
    """Typed view of the outer GraphQL reply."""

    model_config = ConfigDict(extra="ignore")

    data: Optional[Dict[str, Any]] = None
    errors: Any = None

    @property
    def graphql_errors(self) -> List[Any]:
        """GraphQL errors as a list; a lone non-list value becomes one entry."""
        if self.errors is None:
            return []
        if isinstance(self.errors, list):
            return self.errors
        return [self.errors]


@functools.lru_cache(maxsize=128)
def _adapter_for(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def parse_envelope(raw: bytes) -> ResponseEnvelope:
    """Parse raw bytes into a ResponseEnvelope.

    Raises:
        MalformedResponseError: If the body is not valid JSON
        NoDataError: If the JSON is not an object or ``data`` is not a mapping
    """
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise MalformedResponseError(f"Response body is not valid JSON: {exc}", cause=exc) from exc

    if not isinstance(parsed, dict):
        raise NoDataError(f"Response JSON was a {type(parsed).__name__}, not an object.")

    try:
        return ResponseEnvelope.model_validate(parsed)
    except PydanticValidationError as exc:
        raise NoDataError(
            "Response 'data' is not an object.",
            graphql_errors=ResponseEnvelope(errors=parsed.get("errors")).graphql_errors,
        ) from exc


def unwrap_payload(raw: bytes) -> Any:
    """Return the value of the single operation entry under ``data``.

    Raises:
        MalformedResponseError: If the body is not valid JSON
        NoDataError: If ``data`` is missing, empty or has more than one entry
    """
    envelope = parse_envelope(raw)
    if envelope.data is None:
        raise NoDataError("Response contained no 'data' key.", graphql_errors=envelope.graphql_errors)
    if len(envelope.data) != 1:
        raise NoDataError(
            f"Expected exactly one operation under 'data', found {len(envelope.data)}.",
            graphql_errors=envelope.graphql_errors,
        )
    (payload,) = envelope.data.values()
    return payload


def decode(raw: bytes, target_type: Type[T]) -> QueryResult[T]:
    """Decode a response body into ``target_type``.

    ``target_type`` may be a single model, a ``List[Model]`` or any other type
    pydantic can validate.
    """
    try:
        payload = unwrap_payload(raw)
    except DecodeError as exc:
        logger.warning("Could not unwrap response envelope: %s", exc)
        return QueryResult.failure(exc)

    try:
        value = _adapter_for(target_type).validate_python(payload)
    except PydanticValidationError as exc:
        logger.warning("Response payload did not match %s: %s", target_type, exc)
        return QueryResult.failure(
            TypeMismatchError(f"Payload does not match {_type_name(target_type)}.", cause=exc)
        )

    logger.debug("Decoded response into %s", _type_name(target_type))
    return QueryResult.success(value)


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", None) or repr(target_type)
