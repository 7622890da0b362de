"""Set-Cookie harvesting from response header lines."""

from __future__ import annotations

SET_COOKIE_PREFIX = "set-cookie:"
COOKIE_SEPARATOR = ";"


class SetCookieCollector:
    """Accumulates cookies announced by the server during one exchange.

    Instances are passed to a transport as the response header callback.
    Every header line is offered; lines starting with ``Set-Cookie:``
    contribute their first ``name=value`` pair, attributes such as Path
    or Expires are dropped.

    Example:
        collector = SetCookieCollector()
        collector("Set-Cookie: a=1; Path=/\\r\\n")
        collector("Set-Cookie: b=2; HttpOnly\\r\\n")
        collector.header_value()  # "a=1;b=2"
    """

    def __init__(self) -> None:
        self.cookies: list[str] = []

    def __call__(self, line: str) -> None:
        """Inspect one raw response header line."""
        if line[:len(SET_COOKIE_PREFIX)].lower() != SET_COOKIE_PREFIX:
            return
        value = line[len(SET_COOKIE_PREFIX):]
        self.cookies.append(value.split(";", 1)[0].strip())

    def __len__(self) -> int:
        return len(self.cookies)

    def header_value(self) -> str:
        """Join collected cookies into a Cookie header value.

        Returns:
            Cookies joined with ";" (no space), or "" if none were seen.
        """
        return COOKIE_SEPARATOR.join(self.cookies)
