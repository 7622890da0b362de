"""Debug/verbose mode for RequestClient."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, TextIO


@dataclass
class DebugInfo:
    """Debug information for a request/response cycle."""

    # Request info
    timestamp: datetime
    method: str
    url: str
    backend: str

    # Request details
    header_lines: list[str] = field(default_factory=list)
    cookie_sent: str = ""
    body: str | None = None

    # Response details (populated after request)
    final_url: str | None = None
    status_code: int | None = None
    content_type: str = ""
    cookie_received: str = ""
    content_length: int = 0
    content_preview: str | None = None
    elapsed: float = 0.0

    # Error info
    error: str | None = None


class DebugOutput:
    """Handles verbose output formatting and dispatch."""

    def __init__(
        self,
        enabled: bool = False,
        output: TextIO | None = None,
        callback: Callable[[DebugInfo], None] | None = None,
    ):
        """Initialize debug output handler.

        Args:
            enabled: Whether verbose output is printed.
            output: Output stream (defaults to stderr).
            callback: Optional callback for programmatic capture. Invoked
                      even when printing is disabled.
        """
        self.enabled = enabled
        self.output = output or sys.stderr
        self.callback = callback

    @property
    def active(self) -> bool:
        """Whether any consumer wants debug info."""
        return self.enabled or self.callback is not None

    def log_request(self, info: DebugInfo) -> None:
        """Log debug info for a request/response cycle.

        Args:
            info: Debug information to log.
        """
        if self.callback:
            self.callback(info)

        if self.enabled:
            self._print_formatted(info)

    def _print_formatted(self, info: DebugInfo) -> None:
        """Print formatted debug output to stream."""
        out = self.output
        sep = "=" * 80

        out.write(f"\n{sep}\n")
        out.write(f"[{info.timestamp.strftime('%Y-%m-%d %H:%M:%S')}] ")
        out.write(f"{info.method} {info.url}\n")
        out.write(f"{sep}\n")
        out.write(f"Backend: {info.backend}\n")

        if info.header_lines:
            out.write("\n> Request Headers:\n")
            for line in info.header_lines:
                # Truncate long values
                if len(line) > 100:
                    line = line[:97] + "..."
                out.write(f"  {line}\n")

        if info.cookie_sent:
            out.write(f"\n> Cookie Sent: {self._truncate(info.cookie_sent, 100)}\n")

        if info.body:
            out.write(f"> Body: {self._truncate(info.body, 200)}\n")

        out.write("\n" + "-" * 80 + "\n")

        if info.error:
            out.write(f"< ERROR: {info.error}\n")
        elif info.status_code is not None:
            out.write(f"< HTTP {info.status_code}")
            if info.elapsed:
                out.write(f"  [{info.elapsed:.3f}s]")
            out.write("\n")

            if info.final_url and info.final_url != info.url:
                out.write(f"< Redirected to: {info.final_url}\n")

            if info.content_type:
                out.write(f"< Content-Type: {info.content_type}\n")

            if info.cookie_received:
                out.write(
                    f"\n< Cookie Received: {self._truncate(info.cookie_received, 100)}\n"
                )

            if info.content_length:
                out.write(f"\n< Content Length: {info.content_length:,} bytes\n")

            if info.content_preview:
                preview = self._truncate(info.content_preview, 200)
                # Escape newlines for cleaner output
                preview = preview.replace("\n", "\\n").replace("\r", "\\r")
                out.write(f"< Body Preview: {preview}\n")

        out.write(f"{sep}\n")
        out.flush()

    @staticmethod
    def _truncate(value: str, limit: int) -> str:
        if len(value) > limit:
            return value[:limit - 3] + "..."
        return value
