"""Shared test fixtures and configuration."""

from typing import Callable
from unittest.mock import MagicMock

import pytest

from request_client import ClientConfig, Request, RequestClient, Response
from request_client.transport import CurlTransport


def make_mock_transport(
    content: bytes = b"<html>OK</html>",
    content_type: str = "text/html",
    header_lines: tuple[str, ...] = (),
    status_code: int = 200,
) -> MagicMock:
    """Build a transport double that replays header lines and returns a response."""
    transport = MagicMock(spec=CurlTransport)
    transport.backend_name = "mock"

    def perform(request: Request, header_callback=None) -> Response:
        if header_callback is not None:
            for line in header_lines:
                header_callback(line)
        return Response(
            status_code=status_code,
            content=content,
            content_type=content_type,
            url=request.url,
            elapsed=0.1,
            request=request,
        )

    transport.perform.side_effect = perform
    return transport


# ============== Configuration Fixtures ==============

@pytest.fixture
def default_config() -> ClientConfig:
    """Default client configuration."""
    return ClientConfig()


# ============== Transport Fixtures ==============

@pytest.fixture
def mock_transport() -> MagicMock:
    """Transport returning a plain HTML page without cookies."""
    return make_mock_transport()


@pytest.fixture
def json_transport() -> MagicMock:
    """Transport returning a JSON document."""
    return make_mock_transport(
        content=b'{"x": 1, "items": [1, 2]}',
        content_type="application/json; charset=utf-8",
    )


@pytest.fixture
def cookie_transport() -> MagicMock:
    """Transport whose response sets two cookies."""
    return make_mock_transport(
        header_lines=(
            "HTTP/1.1 200 OK\r\n",
            "Content-Type: text/html\r\n",
            "Set-Cookie: a=1; Path=/\r\n",
            "Set-Cookie: b=2; Path=/\r\n",
            "\r\n",
        ),
    )


@pytest.fixture
def transport_factory() -> Callable[..., MagicMock]:
    """Factory for transports with custom responses."""
    return make_mock_transport


# ============== Client Fixtures ==============

@pytest.fixture
def client(mock_transport: MagicMock) -> RequestClient:
    """Client wired to the plain mock transport."""
    return RequestClient(transport=mock_transport)
