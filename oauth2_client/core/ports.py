"""
Port definitions (interfaces) for the core domain.

Ports define the contracts between the token exchange and the HTTP stack.
httpx.Client satisfies HttpTransport out of the box; anything else exposing
the same post/status/body shape can be injected instead.
"""

from collections.abc import MutableMapping
from typing import Protocol


class TransportResponse(Protocol):
    """The parts of an HTTP response the exchange reads."""

    @property
    def status_code(self) -> int:
        ...

    @property
    def content(self) -> bytes:
        ...


class HttpTransport(Protocol):
    """
    Port (interface) for executing the token request.

    The call is synchronous: it returns once the full response body has
    been read. Timeouts are configured on the transport, not here.
    """

    def post(
        self,
        url: str,
        *,
        content: bytes,
        headers: dict[str, str],
    ) -> TransportResponse:
        """
        Send a POST request.

        Args:
            url: Absolute URL of the token endpoint
            content: Encoded request body
            headers: Request headers

        Returns:
            The provider's response
        """
        ...


class SupportsHeaders(Protocol):
    """Any outbound request object with a mutable header mapping."""

    headers: MutableMapping[str, str]
