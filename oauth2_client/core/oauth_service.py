"""
Core service for the authorization code to access token exchange.
"""

import logging
from urllib.parse import parse_qs, urlencode

import httpx

from oauth2_client.core.domain import Token
from oauth2_client.core.exceptions import (
    MissingAccessTokenError,
    TransportError,
    UnexpectedStatusError,
)
from oauth2_client.core.ports import HttpTransport


logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def encode_form(fields: dict[str, str]) -> bytes:
    """Serialize single-valued fields as an x-www-form-urlencoded body."""
    return urlencode(fields).encode("utf-8")


def parse_token_response(body: bytes) -> Token:
    """
    Parse a form-encoded token response body.

    Only access_token, token_type and scope are read; any other field the
    provider sends is ignored. The first value wins when a key repeats.

    Args:
        body: Raw response body

    Returns:
        Token with the parsed fields

    Raises:
        MissingAccessTokenError: If no non-empty access_token is present
    """
    access_token = ""
    token_type = ""
    scopes: tuple[str, ...] = ()

    fields = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
    for key, values in fields.items():
        if not values:
            continue
        value = values[0]
        if key == "access_token":
            access_token = value
        elif key == "token_type":
            token_type = value
        elif key == "scope":
            scopes = tuple(value.split(","))

    if not access_token:
        raise MissingAccessTokenError()

    return Token(access_token=access_token, scopes=scopes, token_type=token_type)


class TokenExchangeService:
    """
    Exchanges authorization codes for tokens over an injected transport.

    The service holds no state besides the transport, so one instance can
    serve concurrent exchanges if the transport allows it.
    """

    def __init__(self, transport: HttpTransport):
        self.transport = transport

    def exchange(self, token_url: httpx.URL | str, form: dict[str, str]) -> Token:
        """
        POST the token request form and parse the provider's answer.

        Performs exactly one round trip. Nothing is retried.

        Args:
            token_url: The provider's token endpoint
            form: Token request fields (client_id, client_secret, code, ...)

        Returns:
            The issued Token

        Raises:
            TransportError: If the request could not complete
            UnexpectedStatusError: If the status code is not 200
            MissingAccessTokenError: If the body has no access_token
        """
        url = str(token_url)
        logger.info(f"Exchanging authorization code at {url}")

        try:
            response = self.transport.post(
                url,
                content=encode_form(form),
                headers={"Content-Type": FORM_CONTENT_TYPE},
            )
        except httpx.RequestError as e:
            logger.error(f"Token request to {url} failed: {e}")
            raise TransportError(str(e)) from e

        if response.status_code != 200:
            logger.warning(
                f"Token endpoint {url} returned unexpected status {response.status_code}"
            )
            raise UnexpectedStatusError(response.status_code)

        token = parse_token_response(response.content)
        logger.info(
            f"Token exchange succeeded: type={token.token_type or 'unspecified'}, "
            f"scopes={len(token.scopes)}"
        )
        return token
