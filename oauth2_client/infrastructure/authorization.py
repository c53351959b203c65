"""
Attach issued tokens to outbound HTTP requests.

The request types belong to the HTTP library, so instead of wrapping them we
set a single header on whatever request object the caller already has.
"""

from collections.abc import Generator
from typing import TypeVar

import httpx

from oauth2_client.core.domain import Token
from oauth2_client.core.ports import SupportsHeaders

DEFAULT_AUTH_SCHEME = "token"

RequestT = TypeVar("RequestT", bound=SupportsHeaders)


def auth_with(request: RequestT, token: Token, scheme: str = DEFAULT_AUTH_SCHEME) -> RequestT:
    """
    Set the Authorization header for a token on an outbound request.

    The default ``token`` scheme matches GitHub's OAuth header format; pass
    ``scheme="Bearer"`` for providers that follow RFC 6750.

    Args:
        request: Any request object with a mutable ``headers`` mapping
        token: Token returned by the exchange
        scheme: Authorization scheme prefix

    Returns:
        The same request object, for chaining
    """
    request.headers["Authorization"] = f"{scheme} {token.access_token}"
    return request


class TokenAuth(httpx.Auth):
    """httpx auth hook that signs every request with an issued token."""

    def __init__(self, token: Token, scheme: str = DEFAULT_AUTH_SCHEME):
        self.token = token
        self.scheme = scheme

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield auth_with(request, self.token, self.scheme)
