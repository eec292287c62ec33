"""
Unit tests for security utilities.

Tests session and OAuth state JWT encoding/decoding.
"""

from datetime import timedelta

import jwt


class TestSessionTokens:
    """Tests for session token functions."""

    def test_create_and_decode_session_token(self):
        """Test session token creation and decoding."""
        from hostelhub.core.security import create_session_token, decode_token

        token = create_session_token({"sub": "google-uid", "email": "test@example.com"})

        assert isinstance(token, str)
        payload = decode_token(token, expected_type="session")
        assert payload is not None
        assert payload["sub"] == "google-uid"
        assert payload["email"] == "test@example.com"
        assert payload["type"] == "session"
        assert payload["iss"] == "hostelhub-api"
        assert payload["aud"] == "hostelhub-client"

    def test_expired_token_is_rejected(self):
        """Test that expired tokens decode to None."""
        from hostelhub.core.security import create_session_token, decode_token

        token = create_session_token({"sub": "google-uid"}, expires_delta=timedelta(seconds=-1))

        assert decode_token(token) is None

    def test_wrong_type_is_rejected(self):
        """Test that a token of another type is not accepted as a session."""
        from hostelhub.core.security import create_oauth_state_token, decode_token

        token = create_oauth_state_token("state", "verifier")

        assert decode_token(token, expected_type="session") is None
        assert decode_token(token, expected_type="oauth_state") is not None

    def test_foreign_signature_is_rejected(self):
        """Test that tokens signed with another key are rejected."""
        from hostelhub.core.security import decode_token

        token = jwt.encode(
            {"sub": "google-uid", "type": "session", "iss": "hostelhub-api", "aud": "hostelhub-client"},
            "another-secret-key-that-is-long-enough",
            algorithm="HS256",
        )

        assert decode_token(token) is None

    def test_garbage_is_rejected(self):
        """Test that malformed tokens decode to None."""
        from hostelhub.core.security import decode_token

        assert decode_token("not-a-jwt") is None


class TestOAuthStateToken:
    """Tests for the OAuth round-trip token."""

    def test_carries_state_and_verifier(self):
        from hostelhub.core.security import create_oauth_state_token, decode_token

        token = create_oauth_state_token("abc123", "verifier-xyz")
        payload = decode_token(token, expected_type="oauth_state")

        assert payload["state"] == "abc123"
        assert payload["code_verifier"] == "verifier-xyz"
