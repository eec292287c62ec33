"""
Authentication

FastAPI dependencies that read the signed-in user from the session cookie.
"""

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from hostelhub.core.security import SESSION_TOKEN_TYPE, decode_token

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session"


@dataclass
class SessionUser:
    """
    Signed-in user.

    Built from session token claims; no database lookup required.
    """

    uid: str
    name: str = ""
    email: str = ""
    picture: str | None = None


async def get_current_user_optional(request: Request) -> SessionUser | None:
    """
    Get the signed-in user, or None for anonymous requests.

    Invalid or expired session cookies count as anonymous.
    """
    token = request.cookies.get(SESSION_COOKIE)
    if not token:
        return None

    payload = decode_token(token, expected_type=SESSION_TOKEN_TYPE)
    if payload is None:
        return None

    uid = payload.get("sub")
    if not uid:
        logger.warning("Session token missing sub claim")
        return None

    return SessionUser(
        uid=uid,
        name=payload.get("name", ""),
        email=payload.get("email", ""),
        picture=payload.get("picture"),
    )


async def get_current_user(
    user: Annotated[SessionUser | None, Depends(get_current_user_optional)],
) -> SessionUser:
    """
    Get the signed-in user (required).

    Raises:
        HTTPException: 401 if not signed in
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


# Type aliases for dependency injection
OptionalUser = Annotated[SessionUser | None, Depends(get_current_user_optional)]
CurrentUser = Annotated[SessionUser, Depends(get_current_user)]
