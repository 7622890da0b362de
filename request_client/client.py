"""Fluent single-request HTTP client.

RequestClient accumulates request settings through chained setters and
executes one exchange per send() call. JSON responses are decoded, anything
else is returned as text, and cookies set by the server replace the stored
cookie so the next send carries them.

Basic usage:

    from request_client import RequestClient

    client = (
        RequestClient()
        .set_url("https://example.com/login")
        .set_method("POST")
        .set_data({"user": "alice", "password": "secret"})
        .set_header("User-Agent", "MyApp/1.0")
    )
    result = client.send()

    # The session cookie received above is sent with the next request
    profile = client.send("https://example.com/api/profile", method="GET")
"""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from datetime import datetime
from typing import Any, BinaryIO, Callable, TextIO

from ._debug import DebugInfo, DebugOutput
from .config import ClientConfig
from .cookies import SetCookieCollector
from .encoding import build_query
from .models import DecodeError, NoResponseError, Request, Response, TransportError
from .transport import Backend, Transport, create_transport


class RequestClient:
    """Configurable HTTP client executing one request per send().

    Every setter changes exactly one setting and returns the client, so
    calls can be chained. The client may be reused for several sends but
    must not be shared between threads.

    Args:
        config: Initial configuration. A default ClientConfig is created
                when omitted.
        transport: Transport to execute requests with. Built from
                   ``backend`` when omitted.
        backend: "auto", "curl" or "httpx".
        output: Binary stream receiving the body when return_transfer is
                off. Defaults to stdout.
        verbose: Print a request/response trace for every send.
        debug_callback: Receives a DebugInfo for every send.
        debug_output: Text stream for the verbose trace (defaults to stderr).
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        backend: Backend = "auto",
        output: BinaryIO | None = None,
        verbose: bool = False,
        debug_callback: Callable[[DebugInfo], None] | None = None,
        debug_output: TextIO | None = None,
    ) -> None:
        self._config = config if config is not None else ClientConfig()
        self._transport = transport if transport is not None else create_transport(backend)
        self._output = output
        self._debug = DebugOutput(
            enabled=verbose,
            output=debug_output,
            callback=debug_callback,
        )

        # Last response for helper methods
        self._last_response: Response | None = None

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_url(self, url: str) -> "RequestClient":
        """Set the request URL."""
        self._config.url = url
        return self

    def set_data(self, data: Mapping[str, Any]) -> "RequestClient":
        """Set the query parameters (GET) or form fields (POST)."""
        self._config.data = dict(data)
        return self

    def set_method(self, method: str) -> "RequestClient":
        """Set the request method, "GET" or "POST"."""
        self._config.method = method
        return self

    def set_header(self, name: str, value: str) -> "RequestClient":
        """Add or overwrite one request header.

        Args:
            name: Header name, e.g. "User-Agent".
            value: Header value.
        """
        self._config.headers[name] = value
        return self

    def set_cookie(self, cookie: str) -> "RequestClient":
        """Set the Cookie header value, e.g. "name1=value1; name2=value2"."""
        self._config.cookie = cookie
        return self

    def set_ssl_verify_peer(self, verify: bool) -> "RequestClient":
        """Enable or disable verification of the server certificate."""
        self._config.ssl_verify_peer = verify
        return self

    def set_ssl_verify_host(self, verify: bool) -> "RequestClient":
        """Enable or disable verification of the certificate host name."""
        self._config.ssl_verify_host = verify
        return self

    def set_include_header(self, include: bool) -> "RequestClient":
        """Include the response header block in the returned text."""
        self._config.include_header = include
        return self

    def set_return_transfer(self, return_transfer: bool) -> "RequestClient":
        """Return the body (True) or write it to the output stream (False)."""
        self._config.return_transfer = return_transfer
        return self

    def set_follow_location(self, follow: bool) -> "RequestClient":
        """Enable or disable automatic redirect following."""
        self._config.follow_location = follow
        return self

    def set_timeout(
        self,
        timeout: float,
        connect_timeout: float | None = None,
    ) -> "RequestClient":
        """Set the total and, optionally, the connect timeout in seconds.

        Raises:
            ValueError: If a timeout is not positive.
        """
        self._config.timeout = timeout
        if connect_timeout is not None:
            self._config.connect_timeout = connect_timeout
        self._config.validate()
        return self

    @property
    def config(self) -> ClientConfig:
        """The live configuration object."""
        return self._config

    @property
    def cookie(self) -> str:
        """Cookie string sent with the next request."""
        return self._config.cookie

    @property
    def backend_name(self) -> str:
        """Name of the HTTP library executing requests."""
        return self._transport.backend_name

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def send(
        self,
        url: str = "",
        data: Mapping[str, Any] | None = None,
        method: str = "",
    ) -> Any:
        """Execute the configured request.

        Non-empty arguments replace the stored url, data and method before
        the request is built. Empty arguments leave them untouched, so an
        empty value cannot be used to clear a setting.

        Args:
            url: URL override.
            data: Data override.
            method: Method override.

        Returns:
            The decoded JSON value when the response content type is
            application/json, the response text otherwise, or None when
            return_transfer is off.

        Raises:
            TransportError: If the exchange could not be completed.
            DecodeError: If a JSON response carries an invalid body.
        """
        if url:
            self._config.url = url
        if data:
            self._config.data = dict(data)
        if method:
            self._config.method = method

        request = self._prepare_request()
        collector = SetCookieCollector()
        debug_info = self._start_debug(request) if self._debug.active else None

        try:
            response = self._transport.perform(request, header_callback=collector)
        except TransportError as e:
            if debug_info is not None:
                debug_info.error = str(e)
                self._debug.log_request(debug_info)
            raise

        self._config.cookie = collector.header_value()
        self._last_response = response

        if debug_info is not None:
            self._finish_debug(debug_info, response)
            self._debug.log_request(debug_info)

        return self._decode(response, request)

    # -------------------------------------------------------------------------
    # Response Helper Methods
    # -------------------------------------------------------------------------

    def get_status_code(self) -> int:
        """Get the status code from the last response.

        Raises:
            NoResponseError: If no request has completed yet.
        """
        return self.get_response().status_code

    def get_content_type(self) -> str:
        """Get the content type reported for the last response.

        Raises:
            NoResponseError: If no request has completed yet.
        """
        return self.get_response().content_type

    def get_effective_url(self) -> str:
        """Get the final URL of the last response, after redirects.

        Raises:
            NoResponseError: If no request has completed yet.
        """
        return self.get_response().url

    def get_elapsed(self) -> float:
        """Get elapsed time of the last request in seconds.

        Raises:
            NoResponseError: If no request has completed yet.
        """
        return self.get_response().elapsed

    def get_response(self) -> Response:
        """Get the full last response object.

        Raises:
            NoResponseError: If no request has completed yet.
        """
        if self._last_response is None:
            raise NoResponseError()
        return self._last_response

    # -------------------------------------------------------------------------
    # Internal Methods
    # -------------------------------------------------------------------------

    def _prepare_request(self) -> Request:
        """Build the outbound request from the stored configuration."""
        config = self._config
        method = config.method.upper()
        url = config.url
        body = None

        # No merging with a query string already present in the URL
        if method == "GET" and config.data:
            url = f"{url}?{build_query(config.data)}"
        elif method == "POST":
            body = build_query(config.data)

        return Request(
            method=method,
            url=url,
            header_lines=[f"{name}: {value}" for name, value in config.headers.items()],
            body=body,
            cookie=config.cookie,
            ssl_verify_peer=config.ssl_verify_peer,
            ssl_verify_host=config.ssl_verify_host,
            include_header=config.include_header,
            return_transfer=config.return_transfer,
            follow_location=config.follow_location,
            timeout=config.timeout,
            connect_timeout=config.connect_timeout,
            output=None if config.return_transfer else self._resolve_output(),
        )

    def _resolve_output(self) -> BinaryIO:
        if self._output is not None:
            return self._output
        return sys.stdout.buffer

    def _decode(self, response: Response, request: Request) -> Any:
        """Turn the captured content into the value returned by send()."""
        if not request.return_transfer:
            return None

        # A header block in front of the body is never valid JSON
        if request.include_header or not response.is_json:
            return response.text

        try:
            return json.loads(response.content)
        except ValueError as e:
            raise DecodeError(
                f"Invalid JSON in response from {response.url or request.url}: {e}",
                content=response.content,
                original_error=e,
            ) from e

    def _start_debug(self, request: Request) -> DebugInfo:
        return DebugInfo(
            timestamp=datetime.now(),
            method=request.method,
            url=request.url,
            backend=self._transport.backend_name,
            header_lines=list(request.header_lines),
            cookie_sent=request.cookie,
            body=request.body,
        )

    def _finish_debug(self, info: DebugInfo, response: Response) -> None:
        info.final_url = response.url
        info.status_code = response.status_code
        info.content_type = response.content_type
        info.cookie_received = self._config.cookie
        info.content_length = len(response.content)
        info.elapsed = response.elapsed
        if response.content:
            info.content_preview = response.text[:500]
