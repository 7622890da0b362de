"""Abstract transport protocol for HTTP requests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Protocol, runtime_checkable

from ..models import Request, Response

HeaderCallback = Callable[[str], None]


@runtime_checkable
class Transport(Protocol):
    """Protocol defining the transport interface.

    Transports handle the actual HTTP communication. A transport opens a
    session for each call to perform() and releases it before returning,
    whether the exchange succeeded or not.
    """

    @property
    def backend_name(self) -> str:
        """Name of the underlying HTTP library."""
        ...

    def perform(
        self,
        request: Request,
        header_callback: HeaderCallback | None = None,
    ) -> Response:
        """Execute one HTTP exchange.

        Args:
            request: The prepared request.
            header_callback: Called once per raw response header line,
                             status lines and redirect hops included.

        Returns:
            Response object.

        Raises:
            TransportError: On connection, DNS, TLS or timeout errors.
        """
        ...


class BaseTransport(ABC):
    """Abstract base class for transport implementations."""

    name: str = ""

    @property
    def backend_name(self) -> str:
        """Name of the underlying HTTP library."""
        return self.name

    @abstractmethod
    def perform(
        self,
        request: Request,
        header_callback: HeaderCallback | None = None,
    ) -> Response:
        """Execute one HTTP exchange."""
        raise NotImplementedError

    @staticmethod
    def _split_header_line(line: str) -> tuple[str, str]:
        """Split ``Name: Value`` into its parts."""
        name, _, value = line.partition(":")
        return name.strip(), value.strip()

    @staticmethod
    def _to_str(value: bytes | str | None) -> str:
        """Coerce a libcurl info value to str."""
        if value is None:
            return ""
        if isinstance(value, bytes):
            return value.decode("latin-1")
        return value
