"""Test configuration for pytest."""

from pathlib import Path
from typing import Callable, Optional

import pytest

from soapbank_client.client import QueryClient
from soapbank_client.transport import FixtureTransport

RESPONSES_DIR = Path(__file__).parent / "fixtures" / "responses"


@pytest.fixture
def load_response() -> Callable[[str], bytes]:
    """Return a loader for recorded response bodies under fixtures/responses."""

    def _load(name: str) -> bytes:
        return (RESPONSES_DIR / f"{name}.json").read_bytes()

    return _load


@pytest.fixture
def make_client() -> Callable[..., QueryClient]:
    """Build a QueryClient over a FixtureTransport.

    The transport is reachable as ``client.transport_fixture`` for assertions.
    """

    def _make(
        content: bytes = b"",
        *,
        error: Optional[BaseException] = None,
        status_code: int = 200,
        token: Optional[str] = "test-token",
    ) -> QueryClient:
        transport = FixtureTransport(content, error=error, status_code=status_code)
        client = QueryClient(transport, token=token, endpoint="https://example.invalid/graphql")
        client.transport_fixture = transport
        return client

    return _make
