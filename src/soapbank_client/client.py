"""Authenticated GraphQL query client."""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from soapbank_client.config import client_config
from soapbank_client.envelope import decode
from soapbank_client.exceptions import NoTokenError, TransportError
from soapbank_client.result import QueryResult
from soapbank_client.transport import GraphQLRequest, HttpxTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

TOKEN_VARIABLE = "token"
RESERVED_VARIABLES = frozenset({TOKEN_VARIABLE})


def _fingerprint(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()[:8]


class QueryClient:
    """Turns a query template plus variables into a typed result.

    The client owns the credential: it is injected into the ``variables`` of
    every request, and no request is sent while it is absent. Each call is
    independent; there is no retry, caching or coalescing.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        token: Optional[str] = None,
        endpoint: Optional[str] = None,
    ) -> None:
        self._transport = transport or HttpxTransport()
        self._endpoint = client_config.endpoint_url(endpoint)
        self._token = token

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def logged_in(self) -> bool:
        return self._token is not None

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def provide_token(self, token: str) -> None:
        """Set (or replace) the credential used by subsequent calls."""
        if not token:
            raise ValueError("token must be a non-empty string")
        self._token = token
        logger.debug("Token provisioned (fingerprint %s)", _fingerprint(token))

    def clear_token(self) -> None:
        self._token = None

    def build_variables(self, token: str, extra: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Build the ``variables`` mapping: the token plus caller entries.

        Raises:
            ValueError: If a caller entry uses a reserved name
        """
        extra = extra or {}
        collisions = RESERVED_VARIABLES.intersection(extra)
        if collisions:
            raise ValueError(f"Variables use reserved names: {sorted(collisions)}")
        variables: Dict[str, Any] = {TOKEN_VARIABLE: token}
        variables.update(extra)
        return variables

    def build_request(
        self,
        token: str,
        template: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> GraphQLRequest:
        """Build the wire request for ``template``.

        Raises:
            TypeError: If a variable value is not JSON serializable
        """
        payload = {"query": template, "variables": self.build_variables(token, variables)}
        body = json.dumps(payload).encode("utf-8")
        return GraphQLRequest(endpoint=self._endpoint, body=body)

    async def query(
        self,
        target_type: Type[T],
        template: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> QueryResult[T]:
        """Send ``template`` with ``variables`` and decode the reply into ``target_type``."""
        # Capture before the first await so a concurrent provide_token() does
        # not affect a call already in progress.
        token = self._token
        if token is None:
            logger.debug("Query rejected: no token")
            return QueryResult.failure(NoTokenError())

        request = self.build_request(token, template, variables)

        try:
            response = await self._transport.send(request)
        except TransportError as exc:
            logger.warning("Transport failure for %s: %s", self._endpoint, exc)
            return QueryResult.failure(exc)

        if not response.is_success:
            logger.warning("GraphQL HTTP %d from %s", response.status_code, self._endpoint)
            return QueryResult.failure(
                TransportError(
                    f"Server returned HTTP {response.status_code}",
                    status_code=response.status_code,
                )
            )

        return decode(response.content, target_type)

    async def aclose(self) -> None:
        await self._transport.aclose()
