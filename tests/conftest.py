"""
Shared test configuration and fixtures.
"""

import pytest

from oauth2_client.oauth.config import OAuth2Config, reset_oauth2_config

AUTH_URL = "https://provider.example.com/oauth/authorize"
TOKEN_URL = "https://provider.example.com/oauth/token"


@pytest.fixture(autouse=True)
def reset_cached_config():
    """Clear the cached env config around every test."""
    reset_oauth2_config()
    yield
    reset_oauth2_config()


@pytest.fixture
def oauth2_config() -> OAuth2Config:
    """Config with no scopes and no redirect URL."""
    return OAuth2Config.new("test-client-id", "test-client-secret", AUTH_URL, TOKEN_URL)


@pytest.fixture
def oauth2_config_with_redirect(oauth2_config: OAuth2Config) -> OAuth2Config:
    """Config with scopes and a redirect URL set by the caller."""
    oauth2_config.scopes.extend(["repo", "user:email"])
    oauth2_config.redirect_url = "https://app.example.com/callback"
    return oauth2_config
