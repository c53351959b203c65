"""
Tests for the Token domain model.
"""

from dataclasses import FrozenInstanceError

import pytest

from oauth2_client.core.domain import Token


class TestToken:
    """Tests for Token value semantics."""

    def test_defaults(self):
        """Test a token with only an access token."""
        token = Token(access_token="abc123")

        assert token.access_token == "abc123"
        assert token.scopes == ()
        assert token.token_type == ""

    def test_equality_by_value(self):
        """Test tokens with the same fields compare equal and hash equal."""
        a = Token(access_token="abc123", scopes=("a", "b"), token_type="bearer")
        b = Token(access_token="abc123", scopes=("a", "b"), token_type="bearer")

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_ordering(self):
        """Test tokens sort by access token, then scopes, then type."""
        tokens = [
            Token(access_token="b"),
            Token(access_token="a", scopes=("z",)),
            Token(access_token="a", scopes=("y",)),
        ]

        assert sorted(tokens) == [
            Token(access_token="a", scopes=("y",)),
            Token(access_token="a", scopes=("z",)),
            Token(access_token="b"),
        ]

    def test_is_immutable(self):
        """Test fields cannot be reassigned."""
        token = Token(access_token="abc123")

        with pytest.raises(FrozenInstanceError):
            token.access_token = "other"
