"""
Auth Router

Google sign-in and sign-out:
- /auth/google redirects to Google's consent screen
- /auth/google/dashboard is the OAuth callback
- /logout clears the session
"""

import logging
import secrets

import httpx
from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from hostelhub.config import get_settings
from hostelhub.core.auth import SESSION_COOKIE
from hostelhub.core.database import DbSession
from hostelhub.core.security import (
    OAUTH_STATE_TOKEN_TYPE,
    OAUTH_STATE_TTL,
    create_oauth_state_token,
    create_session_token,
    decode_token,
)
from hostelhub.repositories.user import UserRepository
from hostelhub.services.oauth_google import GoogleOAuthDep, GoogleOAuthService, OAuthError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

OAUTH_STATE_COOKIE = "oauth_state"
OAUTH_COOKIE_PATH = "/auth/google"


def _redirect_home() -> RedirectResponse:
    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(OAUTH_STATE_COOKIE, path=OAUTH_COOKIE_PATH)
    return response


@router.get("/auth/google")
async def google_login(oauth: GoogleOAuthDep) -> RedirectResponse:
    """
    Start Google sign-in.

    The state and PKCE verifier are kept in a signed, HttpOnly cookie scoped
    to the callback path and valid for 10 minutes.
    """
    code_verifier = GoogleOAuthService.generate_code_verifier()
    state = GoogleOAuthService.generate_state()

    try:
        authorization_url = oauth.get_authorization_url(state=state, code_verifier=code_verifier)
    except OAuthError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        ) from e

    response = RedirectResponse(authorization_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    response.set_cookie(
        key=OAUTH_STATE_COOKIE,
        value=create_oauth_state_token(state, code_verifier),
        httponly=True,
        secure=get_settings().is_production,
        samesite="lax",
        max_age=int(OAUTH_STATE_TTL.total_seconds()),
        path=OAUTH_COOKIE_PATH,
    )
    logger.info("Google sign-in initiated", extra={"state": state[:8] + "..."})
    return response


@router.get("/auth/google/dashboard")
async def google_callback(
    request: Request,
    db: DbSession,
    oauth: GoogleOAuthDep,
    code: str | None = Query(None),
    state: str | None = Query(None),
    error: str | None = Query(None),
) -> RedirectResponse:
    """
    Complete Google sign-in.

    Validates the state cookie, exchanges the code, creates the user on first
    sign-in and sets the session cookie. Every failure lands back on the home
    page.
    """
    if error or not code or not state:
        logger.warning(f"Google sign-in aborted: {error or 'missing code or state'}")
        return _redirect_home()

    state_token = request.cookies.get(OAUTH_STATE_COOKIE)
    state_data = decode_token(state_token, expected_type=OAUTH_STATE_TOKEN_TYPE) if state_token else None

    if state_data is None or not secrets.compare_digest(str(state_data.get("state", "")), state):
        logger.warning("Google callback with invalid or expired state")
        return _redirect_home()

    try:
        tokens = await oauth.exchange_code_for_tokens(
            code=code, code_verifier=state_data["code_verifier"]
        )
        user_info = await oauth.get_user_info(tokens)
    except (OAuthError, httpx.HTTPError, KeyError) as e:
        logger.error(f"Google callback error: {e}")
        return _redirect_home()

    try:
        user = await UserRepository(db).upsert_from_google(
            uid=user_info.provider_user_id,
            name=user_info.name,
            email=user_info.email,
            profile_picture=user_info.picture,
        )
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to save Google user: {e}", extra={"uid": user_info.provider_user_id})
        return _redirect_home()

    session_token = create_session_token(
        {
            "sub": user.uid,
            "name": user.name or "",
            "email": user.email or "",
            "picture": user.profile_picture,
        }
    )

    settings = get_settings()
    response = RedirectResponse("/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(OAUTH_STATE_COOKIE, path=OAUTH_COOKIE_PATH)
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        max_age=settings.session_expire_minutes * 60,
        path="/",
    )

    logger.info(f"Google sign-in successful: {user.email}", extra={"uid": user.uid})
    return response


@router.get("/logout")
async def logout() -> RedirectResponse:
    """Clear the session and go home."""
    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(SESSION_COOKIE, path="/")
    return response
