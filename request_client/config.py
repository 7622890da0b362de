"""Configuration dataclass for the request client."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ClientConfig:
    """Mutable configuration held by RequestClient.

    Attributes:
        url: Target URL. May stay empty until set or passed to send().
        data: Query parameters for GET, form fields for POST.
        method: HTTP method, "GET" or "POST".
        headers: Request headers, one line per entry.
        cookie: Cookie header value. Replaced with the received cookies
                after every send.
        ssl_verify_peer: Whether to verify the server certificate chain.
        ssl_verify_host: Whether to verify the certificate host name.
        include_header: Whether the raw result includes the header block.
        return_transfer: Whether to return the body instead of writing it
                         to the output stream.
        follow_location: Whether to follow redirects automatically.
        timeout: Total request timeout in seconds.
        connect_timeout: Connection establishment timeout in seconds.
    """

    # Request target
    url: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    method: str = "GET"

    # Outbound headers and cookie
    headers: dict[str, str] = field(default_factory=dict)
    cookie: str = ""

    # SSL (verification disabled by default)
    ssl_verify_peer: bool = False
    ssl_verify_host: bool = False

    # Response shaping
    include_header: bool = False
    return_transfer: bool = True
    follow_location: bool = True

    # Timeouts
    timeout: float = 30.0
    connect_timeout: float = 10.0

    def __post_init__(self) -> None:
        """Validate configuration values."""
        self.validate()

    def validate(self) -> None:
        """Check timeout values.

        Raises:
            ValueError: If a timeout is not positive.
        """
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be > 0")
