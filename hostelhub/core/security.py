"""
Security Utilities

Signed JWT tokens for the browser session and for the OAuth round-trip.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from hostelhub.config import get_settings

SESSION_TOKEN_TYPE = "session"
OAUTH_STATE_TOKEN_TYPE = "oauth_state"
OAUTH_STATE_TTL = timedelta(minutes=10)


def _encode(data: dict[str, Any], token_type: str, expires_delta: timedelta) -> str:
    settings = get_settings()

    to_encode = data.copy()
    to_encode.update(
        {
            "exp": datetime.now(UTC) + expires_delta,
            "type": token_type,
            "iss": settings.jwt_issuer,
            "aud": settings.jwt_audience,
        }
    )
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def create_session_token(data: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """
    Create a JWT for the session cookie.

    Args:
        data: Claims to encode (sub is the user's Google uid)
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=get_settings().session_expire_minutes)
    return _encode(data, SESSION_TOKEN_TYPE, expires_delta)


def create_oauth_state_token(state: str, code_verifier: str) -> str:
    """
    Bind an OAuth state value to its PKCE verifier.

    The token is stored in a short-lived HttpOnly cookie so the verifier
    never reaches the browser's JavaScript or the identity provider.
    """
    return _encode(
        {"state": state, "code_verifier": code_verifier},
        OAUTH_STATE_TOKEN_TYPE,
        OAUTH_STATE_TTL,
    )


def decode_token(token: str, expected_type: str | None = None) -> dict[str, Any] | None:
    """
    Decode and validate a JWT token.

    Args:
        token: JWT token string to decode
        expected_type: If provided, the token's type claim must match

    Returns:
        Decoded token payload or None if invalid/expired/wrong type
    """
    settings = get_settings()

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )
    except jwt.InvalidTokenError:
        return None

    if expected_type is not None and payload.get("type") != expected_type:
        return None

    return payload
