"""Unit tests for client configuration."""

import pytest

from soapbank_client.config import DEFAULT_GRAPHQL_ENDPOINT, ClientConfig, client_config
from soapbank_client.exceptions import ConfigurationError


def test_explicit_endpoint_wins():
    assert client_config.endpoint_url("  https://example.invalid/graphql ") == "https://example.invalid/graphql"


def test_empty_endpoint_rejected():
    with pytest.raises(ConfigurationError):
        client_config.endpoint_url("   ")


def test_endpoint_falls_back_to_configured_value(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(ClientConfig, "GRAPHQL_ENDPOINT", "https://configured.invalid/")

    assert ClientConfig().endpoint_url() == "https://configured.invalid/"


def test_defaults_are_sane():
    assert DEFAULT_GRAPHQL_ENDPOINT.startswith("http")
    assert client_config.HTTP_TIMEOUT > 0
    assert client_config.CONNECT_TIMEOUT > 0
    assert client_config.USER_AGENT.startswith("soapbank-client/")
