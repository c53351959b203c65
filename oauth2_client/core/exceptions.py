"""
Exceptions raised by the authorization code exchange.

All of them derive from OAuth2Error so callers can catch the whole family.
Nothing here is retried; retry policy belongs to the caller.
"""


class OAuth2Error(Exception):
    """Base exception for token exchange errors."""

    pass


class TransportError(OAuth2Error):
    """
    Raised when the HTTP call to the token endpoint could not complete.

    Connection failures, timeouts and TLS errors all end up here. The
    message is the transport's own description of the failure.
    """

    pass


class UnexpectedStatusError(OAuth2Error):
    """Raised when the token endpoint answers with anything but 200."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"expected `200`, found `{status_code}`")


class MissingAccessTokenError(OAuth2Error):
    """Raised when the token response carries no usable access_token."""

    def __init__(self, message: str = "could not find access_token in the response"):
        super().__init__(message)
