"""Request and Response dataclasses."""

from dataclasses import dataclass, field
from typing import BinaryIO


@dataclass
class Request:
    """Prepared HTTP request handed to a transport.

    Attributes:
        method: HTTP method (GET or POST are acted upon).
        url: The final request URL, query string included.
        header_lines: Request headers as ``Name: Value`` lines.
        body: URL-encoded form body for POST requests.
        cookie: Value of the Cookie header, sent verbatim.
        ssl_verify_peer: Whether to verify the server certificate chain.
        ssl_verify_host: Whether to verify the certificate host name.
        include_header: Whether the captured content starts with the header block.
        return_transfer: Whether to capture the body instead of emitting it.
        follow_location: Whether to follow redirects.
        timeout: Total exchange timeout in seconds.
        connect_timeout: Connection timeout in seconds.
        output: Sink for the body when return_transfer is off.
    """

    method: str
    url: str
    header_lines: list[str] = field(default_factory=list)
    body: str | None = None
    cookie: str = ""
    ssl_verify_peer: bool = False
    ssl_verify_host: bool = False
    include_header: bool = False
    return_transfer: bool = True
    follow_location: bool = True
    timeout: float = 30.0
    connect_timeout: float = 10.0
    output: BinaryIO | None = None

    def __post_init__(self) -> None:
        """Normalize method to uppercase."""
        self.method = self.method.upper()

    @property
    def is_post(self) -> bool:
        """Check if the request carries a form body."""
        return self.method == "POST"


@dataclass
class Response:
    """HTTP response representation.

    Attributes:
        status_code: HTTP status code of the final response.
        content: Captured bytes (header block included if requested,
                 empty when the body was emitted to the output sink).
        content_type: Content-Type reported by the transport, "" if none.
        url: Effective URL after redirects.
        elapsed: Request duration in seconds.
        request: The request that produced this response.
    """

    status_code: int
    content: bytes
    content_type: str = ""
    url: str = ""
    elapsed: float = 0.0
    request: Request | None = None

    @property
    def text(self) -> str:
        """Decode content as UTF-8 text."""
        return self.content.decode("utf-8", errors="replace")

    @property
    def is_json(self) -> bool:
        """Check if the content type declares a JSON body."""
        return self.content_type.startswith("application/json")


class RequestClientError(Exception):
    """Base exception for request client errors."""
    pass


class ConfigurationError(RequestClientError):
    """Invalid client or transport configuration."""
    pass


class TransportError(RequestClientError):
    """Error during HTTP transport (connection, DNS, TLS, timeout)."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class DecodeError(RequestClientError, ValueError):
    """Response declared JSON but the body could not be parsed."""

    def __init__(
        self,
        message: str,
        content: bytes = b"",
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.content = content
        self.original_error = original_error


class NoResponseError(RequestClientError):
    """Raised when accessing response data before making a request."""

    def __init__(self) -> None:
        super().__init__("No response available. Make a request first.")
