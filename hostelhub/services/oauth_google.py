"""
Google Sign-In Service

Authorization-code flow with PKCE against Google's OAuth 2.0 endpoints.
Client credentials come from settings.
"""

import base64
import hashlib
import logging
import secrets
from dataclasses import dataclass
from typing import Annotated
from urllib.parse import urlencode

import httpx
from fastapi import Depends

from hostelhub.config import Settings, get_settings

logger = logging.getLogger(__name__)

GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"
GOOGLE_SCOPES = ["openid", "email", "profile"]


@dataclass
class OAuthUserInfo:
    """User profile returned by Google."""

    provider_user_id: str
    email: str
    name: str | None = None
    picture: str | None = None
    email_verified: bool = False


@dataclass
class OAuthTokens:
    """OAuth tokens from Google."""

    access_token: str
    expires_in: int | None = None
    token_type: str = "Bearer"
    id_token: str | None = None
    scope: str | None = None


class OAuthError(Exception):
    """OAuth-related error."""

    pass


class GoogleOAuthService:
    """Service for Google sign-in."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    # ========================================================================
    # PKCE Utilities
    # ========================================================================

    @staticmethod
    def generate_code_verifier() -> str:
        """Generate a cryptographically random code verifier for PKCE."""
        return secrets.token_urlsafe(64)[:128]

    @staticmethod
    def generate_code_challenge(verifier: str) -> str:
        """Generate S256 code challenge from verifier."""
        digest = hashlib.sha256(verifier.encode()).digest()
        return base64.urlsafe_b64encode(digest).decode().rstrip("=")

    @staticmethod
    def generate_state() -> str:
        """Generate a random state value for CSRF protection."""
        return secrets.token_urlsafe(32)

    # ========================================================================
    # OAuth Flow
    # ========================================================================

    def _require_configured(self) -> None:
        if not self.settings.google_configured:
            raise OAuthError("Google OAuth is not configured")

    def get_authorization_url(self, state: str, code_verifier: str) -> str:
        """
        Build the Google consent screen URL.

        Args:
            state: CSRF state value
            code_verifier: PKCE code verifier

        Returns:
            Authorization URL to redirect the browser to

        Raises:
            OAuthError: If Google credentials are not configured
        """
        self._require_configured()

        params = {
            "client_id": self.settings.google_client_id,
            "response_type": "code",
            "redirect_uri": self.settings.google_callback_url,
            "scope": " ".join(GOOGLE_SCOPES),
            "state": state,
            "code_challenge": self.generate_code_challenge(code_verifier),
            "code_challenge_method": "S256",
            "prompt": "select_account",
        }
        return f"{GOOGLE_AUTHORIZE_URL}?{urlencode(params)}"

    async def exchange_code_for_tokens(self, code: str, code_verifier: str) -> OAuthTokens:
        """
        Exchange the authorization code for tokens.

        Args:
            code: Authorization code from the callback
            code_verifier: PKCE code verifier bound to the state

        Returns:
            OAuthTokens with the access token

        Raises:
            OAuthError: If Google rejects the exchange
        """
        self._require_configured()

        data = {
            "client_id": self.settings.google_client_id,
            "client_secret": self.settings.google_client_secret,
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.settings.google_callback_url,
            "code_verifier": code_verifier,
        }

        async with httpx.AsyncClient(timeout=10.0, transport=self._transport) as client:
            response = await client.post(
                GOOGLE_TOKEN_URL,
                data=data,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )

        if response.status_code != 200:
            error_data = (
                response.json()
                if response.headers.get("content-type", "").startswith("application/json")
                else {}
            )
            error_msg = error_data.get("error_description", error_data.get("error", response.text))
            logger.error(f"Token exchange failed: {error_msg}")
            raise OAuthError(f"Token exchange failed: {error_msg}")

        token_data = response.json()
        return OAuthTokens(
            access_token=token_data["access_token"],
            expires_in=token_data.get("expires_in"),
            token_type=token_data.get("token_type", "Bearer"),
            id_token=token_data.get("id_token"),
            scope=token_data.get("scope"),
        )

    async def get_user_info(self, tokens: OAuthTokens) -> OAuthUserInfo:
        """
        Fetch the signed-in user's Google profile.

        Raises:
            OAuthError: If the userinfo request fails or has no subject
        """
        async with httpx.AsyncClient(timeout=10.0, transport=self._transport) as client:
            response = await client.get(
                GOOGLE_USERINFO_URL,
                headers={"Authorization": f"{tokens.token_type} {tokens.access_token}"},
            )

        if response.status_code != 200:
            raise OAuthError(f"Failed to get user info: {response.text}")

        data = response.json()
        if not data.get("sub"):
            raise OAuthError("Google profile has no subject identifier")

        return OAuthUserInfo(
            provider_user_id=data["sub"],
            email=data.get("email", ""),
            name=data.get("name"),
            picture=data.get("picture"),
            email_verified=data.get("email_verified", False),
        )


def get_google_oauth_service() -> GoogleOAuthService:
    """Dependency for getting the Google sign-in service."""
    return GoogleOAuthService()


# Type alias for dependency injection
GoogleOAuthDep = Annotated[GoogleOAuthService, Depends(get_google_oauth_service)]
