"""curl_cffi transport built on the libcurl easy interface."""

from __future__ import annotations

import time
from io import BytesIO
from typing import Any, BinaryIO

from ..models import Request, Response, TransportError
from .base import BaseTransport, HeaderCallback

try:
    from curl_cffi import Curl, CurlError, CurlInfo, CurlOpt

    CURL_AVAILABLE = True
except ImportError:
    CURL_AVAILABLE = False
    Curl = None
    CurlError = None
    CurlInfo = None
    CurlOpt = None

# libcurl wants 2 to check the host name; 1 is treated the same on modern curl
VERIFY_HOST_ON = 2
VERIFY_HOST_OFF = 0


class CurlTransport(BaseTransport):
    """Transport driving a libcurl handle through curl_cffi.

    A new handle is created for every exchange and closed before
    perform() returns.
    """

    name = "curl_cffi"

    def __init__(self) -> None:
        """Initialize curl transport.

        Raises:
            ImportError: If curl_cffi is not installed.
        """
        if not CURL_AVAILABLE:
            raise ImportError(
                "curl_cffi is required for the curl transport. "
                "Install with: pip install curl_cffi"
            )

    def perform(
        self,
        request: Request,
        header_callback: HeaderCallback | None = None,
    ) -> Response:
        """Execute one HTTP exchange on a fresh curl handle.

        Args:
            request: The prepared request.
            header_callback: Called once per raw response header line.

        Returns:
            Response object.

        Raises:
            TransportError: If libcurl reports a failure.
        """
        buffer = BytesIO()
        sink: BinaryIO = buffer
        if not request.return_transfer and request.output is not None:
            sink = request.output

        curl = Curl()
        start_time = time.monotonic()

        try:
            self._apply_options(curl, request, sink, header_callback)
            curl.perform()
            elapsed = time.monotonic() - start_time

            return Response(
                status_code=int(curl.getinfo(CurlInfo.RESPONSE_CODE) or 0),
                content=buffer.getvalue(),
                content_type=self._to_str(curl.getinfo(CurlInfo.CONTENT_TYPE)),
                url=self._to_str(curl.getinfo(CurlInfo.EFFECTIVE_URL)) or request.url,
                elapsed=elapsed,
                request=request,
            )

        except CurlError as e:
            error_name = type(e).__name__
            raise TransportError(
                f"Request failed: {error_name}: {str(e)}",
                original_error=e,
            ) from e

        finally:
            curl.close()

    def _apply_options(
        self,
        curl: Any,
        request: Request,
        sink: BinaryIO,
        header_callback: HeaderCallback | None,
    ) -> None:
        """Translate a Request into curl options."""
        curl.setopt(CurlOpt.URL, request.url.encode())

        if request.is_post:
            body = (request.body or "").encode()
            curl.setopt(CurlOpt.POST, 1)
            curl.setopt(CurlOpt.POSTFIELDS, body)
            curl.setopt(CurlOpt.POSTFIELDSIZE, len(body))

        if request.header_lines:
            curl.setopt(
                CurlOpt.HTTPHEADER,
                [line.encode() for line in request.header_lines],
            )

        curl.setopt(CurlOpt.COOKIE, request.cookie.encode())
        curl.setopt(CurlOpt.SSL_VERIFYPEER, int(request.ssl_verify_peer))
        curl.setopt(
            CurlOpt.SSL_VERIFYHOST,
            VERIFY_HOST_ON if request.ssl_verify_host else VERIFY_HOST_OFF,
        )
        curl.setopt(CurlOpt.HEADER, int(request.include_header))
        curl.setopt(CurlOpt.FOLLOWLOCATION, int(request.follow_location))
        curl.setopt(CurlOpt.TIMEOUT_MS, int(request.timeout * 1000))
        curl.setopt(CurlOpt.CONNECTTIMEOUT_MS, int(request.connect_timeout * 1000))
        curl.setopt(CurlOpt.WRITEDATA, sink)

        if header_callback is not None:
            def on_header(chunk: bytes) -> int:
                header_callback(chunk.decode("latin-1"))
                return len(chunk)

            curl.setopt(CurlOpt.HEADERFUNCTION, on_header)
