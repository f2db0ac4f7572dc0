"""Configuration for the soap bank GraphQL client."""

import os
from importlib import metadata

from soapbank_client.exceptions import ConfigurationError

try:
    _PACKAGE_VERSION = metadata.version("soapbank-client")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback when running from source tree
    _PACKAGE_VERSION = "0.0.0"

DEFAULT_GRAPHQL_ENDPOINT = "http://35.208.9.187:9094/ios-api-1/"


class ClientConfig:
    """Configuration for GraphQL requests."""

    # GraphQL endpoint every query is POSTed to
    GRAPHQL_ENDPOINT: str = os.getenv("SOAPBANK_GRAPHQL_ENDPOINT", DEFAULT_GRAPHQL_ENDPOINT)

    # Total request timeout (seconds)
    HTTP_TIMEOUT: float = float(os.getenv("SOAPBANK_HTTP_TIMEOUT", "30"))

    # Connection setup timeout (seconds)
    CONNECT_TIMEOUT: float = float(os.getenv("SOAPBANK_CONNECT_TIMEOUT", "10"))

    USER_AGENT: str = os.getenv("SOAPBANK_USER_AGENT", f"soapbank-client/{_PACKAGE_VERSION}")

    def endpoint_url(self, endpoint: str | None = None) -> str:
        """Return the endpoint to use, preferring an explicit override."""
        url = (endpoint if endpoint is not None else self.GRAPHQL_ENDPOINT).strip()
        if not url:
            raise ConfigurationError("SOAPBANK_GRAPHQL_ENDPOINT must not be empty.")
        return url


# Global config instance
client_config = ClientConfig()
