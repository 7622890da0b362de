"""httpx transport, used when curl_cffi is not installed."""

from __future__ import annotations

import ssl
import time
from typing import Any

from ..models import Request, Response, TransportError
from .base import BaseTransport, HeaderCallback

try:
    import httpx

    HTTPX_AVAILABLE = True
except ImportError:
    HTTPX_AVAILABLE = False
    httpx = None

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpxTransport(BaseTransport):
    """Transport using a short-lived httpx.Client per exchange.

    httpx has no per-line header hook, so the header callback is replayed
    from the raw headers of every response in the redirect chain once the
    exchange completes.

    TLS verification differs from libcurl in one case: ssl.SSLContext
    cannot check host names without verifying the peer, so
    ssl_verify_host=True with ssl_verify_peer=False disables both checks
    here, while the curl transport still checks the host name.
    """

    name = "httpx"

    def __init__(self) -> None:
        """Initialize httpx transport.

        Raises:
            ImportError: If httpx is not installed.
        """
        if not HTTPX_AVAILABLE:
            raise ImportError(
                "httpx is required for the httpx transport. "
                "Install with: pip install httpx"
            )

    def perform(
        self,
        request: Request,
        header_callback: HeaderCallback | None = None,
    ) -> Response:
        """Execute one HTTP exchange.

        Args:
            request: The prepared request.
            header_callback: Called once per raw response header line.

        Returns:
            Response object.

        Raises:
            TransportError: On connection, DNS, TLS, timeout or URL errors.
        """
        start_time = time.monotonic()

        try:
            with httpx.Client(
                verify=self._verify_option(request),
                follow_redirects=request.follow_location,
                timeout=httpx.Timeout(request.timeout, connect=request.connect_timeout),
            ) as client:
                # libcurl only distinguishes POST; every other method goes out as GET
                raw_response = client.request(
                    "POST" if request.is_post else "GET",
                    request.url,
                    headers=self._build_headers(request),
                    content=(request.body or "").encode() if request.is_post else None,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            error_name = type(e).__name__
            raise TransportError(
                f"Request failed: {error_name}: {str(e)}",
                original_error=e,
            ) from e

        elapsed = time.monotonic() - start_time

        header_lines: list[str] = []
        for hop in (*raw_response.history, raw_response):
            header_lines.extend(self._header_block(hop))

        if header_callback is not None:
            for line in header_lines:
                header_callback(line)

        content = raw_response.content
        if request.include_header:
            content = "".join(header_lines).encode("latin-1") + content

        if not request.return_transfer and request.output is not None:
            request.output.write(content)
            content = b""

        return Response(
            status_code=raw_response.status_code,
            content=content,
            content_type=raw_response.headers.get("content-type", ""),
            url=str(raw_response.url),
            elapsed=elapsed,
            request=request,
        )

    def _build_headers(self, request: Request) -> list[tuple[str, str]]:
        """Build the outbound header list from the request lines."""
        headers = [self._split_header_line(line) for line in request.header_lines]
        names = {name.lower() for name, _ in headers}

        if request.cookie:
            headers.append(("Cookie", request.cookie))
        if request.is_post and "content-type" not in names:
            headers.append(("Content-Type", FORM_CONTENT_TYPE))

        return headers

    @staticmethod
    def _verify_option(request: Request) -> Any:
        """Map peer/host verification flags to an httpx verify value."""
        if not request.ssl_verify_peer:
            return False
        if request.ssl_verify_host:
            return True
        context = ssl.create_default_context()
        context.check_hostname = False
        return context

    @staticmethod
    def _header_block(response: Any) -> list[str]:
        """Render one response's status line and headers as raw lines."""
        lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}\r\n"]
        for name, value in response.headers.raw:
            lines.append(f"{name.decode('latin-1')}: {value.decode('latin-1')}\r\n")
        lines.append("\r\n")
        return lines
