"""
Transport layer for GraphQL requests.

Moves request bytes to the endpoint and response bytes back. Knows nothing
about GraphQL: it never inspects the body or the status code, and it never
retries. ``FixtureTransport`` replays recorded bytes for tests without any
network access.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import httpx

from soapbank_client.config import client_config
from soapbank_client.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphQLRequest:
    """A fully formed HTTP request ready to be sent."""

    endpoint: str
    body: bytes
    method: str = "POST"
    headers: Dict[str, str] = field(default_factory=lambda: {"Content-Type": "application/json"})


@dataclass(frozen=True)
class TransportResponse:
    """Raw reply from the transport; status interpretation is left to callers."""

    status_code: int
    content: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(ABC):
    """Abstract base class for request transports."""

    @abstractmethod
    async def send(self, request: GraphQLRequest) -> TransportResponse:
        """Send one request. Raises TransportError on connectivity failure."""
        pass

    async def aclose(self) -> None:
        """Release any underlying resources."""
        return None


class HttpxTransport(Transport):
    """Transport backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                timeout=httpx.Timeout(
                    timeout if timeout is not None else client_config.HTTP_TIMEOUT,
                    connect=client_config.CONNECT_TIMEOUT,
                ),
                headers={"User-Agent": client_config.USER_AGENT},
            )
        self._client = client

    async def send(self, request: GraphQLRequest) -> TransportResponse:
        logger.debug("%s %s (%d bytes)", request.method, request.endpoint, len(request.body))
        try:
            response = await self._client.request(
                request.method,
                request.endpoint,
                content=request.body,
                headers=request.headers,
            )
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", request.endpoint, exc)
            raise TransportError(f"Request to {request.endpoint} failed: {exc}", cause=exc) from exc
        return TransportResponse(status_code=response.status_code, content=response.content)

    async def aclose(self) -> None:
        """Close the underlying HTTP session if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class FixtureTransport(Transport):
    """Deterministic transport that replays fixed bytes and/or a fixed error.

    Every request is recorded in ``requests`` so tests can inspect the wire
    body or assert that nothing was sent.
    """

    def __init__(
        self,
        content: bytes = b"",
        *,
        error: Optional[BaseException] = None,
        status_code: int = 200,
    ) -> None:
        self.content = content
        self.error = error
        self.status_code = status_code
        self.requests: List[GraphQLRequest] = []

    async def send(self, request: GraphQLRequest) -> TransportResponse:
        self.requests.append(request)
        if self.error is not None:
            if isinstance(self.error, TransportError):
                raise self.error
            raise TransportError(str(self.error), cause=self.error) from self.error
        return TransportResponse(status_code=self.status_code, content=self.content)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def assert_not_called(self) -> None:
        if self.requests:
            raise AssertionError(f"Expected no requests, got {len(self.requests)}")
