"""
OAuth2 client configuration.

Holds the provider-issued credentials and endpoints, and derives the
artifacts of the authorization code grant from them: the authorization
redirect URL and the token request.
"""

import os
import logging
from functools import lru_cache
from urllib.parse import parse_qsl, urlencode

import httpx
from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from oauth2_client.core.domain import Token
from oauth2_client.core.oauth_service import TokenExchangeService
from oauth2_client.core.ports import HttpTransport
from oauth2_client.infrastructure.authorization import DEFAULT_AUTH_SCHEME, TokenAuth


logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)


class OAuth2Config(BaseModel):
    """
    Configuration of an OAuth2 application.

    Endpoints are validated eagerly: a malformed auth_url or token_url fails
    construction with a pydantic ValidationError, so a misconfigured client
    never reaches the network. Scopes and redirect_url may be adjusted by the
    caller before first use.
    """

    client_id: str = Field(description="Provider-issued client ID")
    client_secret: str = Field(description="Provider-issued client secret", repr=False)
    auth_url: httpx.URL = Field(description="Provider authorization endpoint")
    token_url: httpx.URL = Field(description="Provider token endpoint")
    scopes: list[str] = Field(default_factory=list, description="Requested scopes")
    redirect_url: str = Field(
        default="", description="Redirect URI; empty means omitted from requests"
    )
    auth_scheme: str = Field(
        default=DEFAULT_AUTH_SCHEME,
        description="Scheme used in the Authorization header of signed requests",
    )

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("auth_url", "token_url", mode="before")
    @classmethod
    def parse_endpoint(cls, v):
        """Ensure endpoints are absolute URLs."""
        raw = str(v) if isinstance(v, httpx.URL) else v
        try:
            _URL_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise ValueError(f"invalid endpoint URL {raw!r}: {e.errors()[0]['msg']}") from e
        return httpx.URL(raw)

    @classmethod
    def new(
        cls, client_id: str, client_secret: str, auth_url: str, token_url: str
    ) -> "OAuth2Config":
        """Create a config with no scopes and no redirect URL."""
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            auth_url=auth_url,
            token_url=token_url,
        )

    @classmethod
    def from_env(cls) -> "OAuth2Config":
        """Load configuration from environment variables."""
        scopes = os.getenv("OAUTH2_SCOPES", "")
        return cls(
            client_id=os.getenv("OAUTH2_CLIENT_ID", ""),
            client_secret=os.getenv("OAUTH2_CLIENT_SECRET", ""),
            auth_url=os.getenv("OAUTH2_AUTH_URL", ""),
            token_url=os.getenv("OAUTH2_TOKEN_URL", ""),
            scopes=[s.strip() for s in scopes.split(",") if s.strip()],
            redirect_url=os.getenv("OAUTH2_REDIRECT_URL", ""),
            auth_scheme=os.getenv("OAUTH2_AUTH_SCHEME", DEFAULT_AUTH_SCHEME),
        )

    def authorize_url(self, state: str) -> httpx.URL:
        """
        Build the URL to send the user's browser to.

        Query parameters are appended in a fixed order (client_id, state,
        scope, then redirect_uri when configured) so the result is
        reproducible.

        Args:
            state: Opaque anti-CSRF value; the caller checks it on callback

        Returns:
            The authorization URL, as a URL object the caller can still modify
        """
        # Existing query pairs stay first, in their original order
        pairs = parse_qsl(self.auth_url.query.decode("ascii"), keep_blank_values=True)
        pairs += [
            ("client_id", self.client_id),
            ("state", state),
            ("scope", ",".join(self.scopes)),
        ]
        if self.redirect_url:
            pairs.append(("redirect_uri", self.redirect_url))
        return self.auth_url.copy_with(query=urlencode(pairs).encode("ascii"))

    def token_request_form(self, code: str) -> dict[str, str]:
        """Fields of the token request body for an authorization code."""
        form = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
        }
        if self.redirect_url:
            form["redirect_uri"] = self.redirect_url
        return form

    def exchange(self, code: str, transport: HttpTransport | None = None) -> Token:
        """
        Exchange an authorization code for an access token.

        Args:
            code: Authorization code received on the redirect callback
            transport: HTTP client to use; a short-lived httpx.Client is
                opened when omitted

        Returns:
            The issued Token

        Raises:
            OAuth2Error: On transport failure, non-200 status, or a response
                without an access token
        """
        form = self.token_request_form(code)
        if transport is not None:
            return TokenExchangeService(transport).exchange(self.token_url, form)

        with httpx.Client() as client:
            return TokenExchangeService(client).exchange(self.token_url, form)

    def authorization(self, token: Token) -> TokenAuth:
        """httpx auth hook signing requests with this provider's header scheme."""
        return TokenAuth(token, scheme=self.auth_scheme)


@lru_cache()
def get_oauth2_config() -> OAuth2Config:
    """Get OAuth2 configuration singleton."""
    config = OAuth2Config.from_env()
    logger.info(f"Loaded OAuth2 configuration for client {config.client_id}")
    return config


def reset_oauth2_config() -> None:
    """
    Reset the cached configuration.

    Useful for testing with different environments.
    """
    get_oauth2_config.cache_clear()
