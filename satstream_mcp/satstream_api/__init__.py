"""HTTP proxy client for the Satstream API."""

from satstream_mcp.errors import (
    MissingPathParamError,
    SatstreamMcpError,
    TransportError,
    UpstreamHttpError,
)

from .client import (
    API_KEY_HEADER,
    ProxyFailure,
    ProxyResult,
    ProxySuccess,
    SatstreamApiClient,
    default_client,
)

__all__ = [
    "API_KEY_HEADER",
    "SatstreamApiClient",
    "ProxyResult",
    "ProxySuccess",
    "ProxyFailure",
    "SatstreamMcpError",
    "MissingPathParamError",
    "UpstreamHttpError",
    "TransportError",
    "default_client",
]
