"""Transport layer implementations."""

from __future__ import annotations

from typing import Literal

from ..models import ConfigurationError
from . import curl_transport, httpx_transport
from .base import BaseTransport, HeaderCallback, Transport
from .curl_transport import CurlTransport
from .httpx_transport import HttpxTransport

Backend = Literal["auto", "curl", "httpx"]


def create_transport(backend: Backend = "auto") -> Transport:
    """Create a transport for the requested backend.

    Args:
        backend: "curl" for curl_cffi, "httpx" for httpx, or "auto" to
                 prefer curl_cffi and fall back to httpx.

    Returns:
        A transport instance.

    Raises:
        ConfigurationError: If the backend name is unknown.
        ImportError: If no suitable HTTP library is installed.
    """
    if backend == "curl":
        return CurlTransport()
    if backend == "httpx":
        return HttpxTransport()
    if backend != "auto":
        raise ConfigurationError(f"Unknown transport backend: {backend!r}")

    if curl_transport.CURL_AVAILABLE:
        return CurlTransport()
    if httpx_transport.HTTPX_AVAILABLE:
        return HttpxTransport()

    raise ImportError(
        "Neither curl_cffi nor httpx is available. "
        "Install one of them: pip install curl_cffi or pip install httpx"
    )


__all__ = [
    "Backend",
    "BaseTransport",
    "CurlTransport",
    "HeaderCallback",
    "HttpxTransport",
    "Transport",
    "create_transport",
]
