"""
Core domain model for issued OAuth2 tokens.

The token is a plain value: it carries no expiry, refresh or storage
behaviour. Callers own it once the exchange returns.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Token:
    """
    Access token issued by a successful authorization code exchange.

    Comparable and orderable so callers can sort, dedupe or cache tokens
    deterministically.
    """

    access_token: str
    scopes: tuple[str, ...] = ()
    token_type: str = ""
