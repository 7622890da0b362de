"""Fluent HTTP request client.

This package provides a single configurable client that executes one HTTP
request per call:

- Chained setters for URL, data, method, headers, cookie and transport flags
- Query string (GET) or form body (POST) encoding compatible with PHP's
  http_build_query
- Cookies received through Set-Cookie are carried to the next request
- JSON responses decoded automatically, other bodies returned as text
- libcurl transport via curl_cffi, with httpx as fallback

Basic usage:

    from request_client import RequestClient

    client = RequestClient()
    data = client.send("https://example.com/api/items", {"page": 2})

    # Chained configuration
    result = (
        RequestClient()
        .set_url("https://example.com/form")
        .set_method("POST")
        .set_data({"name": "value"})
        .set_header("Accept", "application/json")
        .set_ssl_verify_peer(True)
        .set_ssl_verify_host(True)
        .send()
    )
"""

from .client import RequestClient
from .config import ClientConfig
from .cookies import SetCookieCollector
from .encoding import build_query
from .models import (
    Request,
    Response,
    RequestClientError,
    ConfigurationError,
    TransportError,
    DecodeError,
    NoResponseError,
)
from ._debug import DebugInfo
from .transport import (
    Transport,
    CurlTransport,
    HttpxTransport,
    create_transport,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "RequestClient",
    # Configuration
    "ClientConfig",
    # Models
    "Request",
    "Response",
    # Exceptions
    "RequestClientError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "NoResponseError",
    # Helpers
    "SetCookieCollector",
    "build_query",
    "DebugInfo",
    # Transports
    "Transport",
    "CurlTransport",
    "HttpxTransport",
    "create_transport",
    # Version
    "__version__",
]
