"""
Dashboard Router

The signed-in user's page: profile plus the reviews they have submitted.
"""

from fastapi import APIRouter, Query, status
from fastapi.responses import RedirectResponse

from hostelhub.core.auth import OptionalUser
from hostelhub.core.database import DbSession
from hostelhub.models.contracts.auth import UserPublic
from hostelhub.models.contracts.pages import DashboardPage
from hostelhub.models.contracts.review import ReviewPublic
from hostelhub.repositories.review import ReviewRepository

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardPage)
async def dashboard(
    user: OptionalUser,
    db: DbSession,
    message: str | None = Query(None, description="Flash message shown once"),
) -> DashboardPage | RedirectResponse:
    """
    Signed-in user's dashboard.

    Anonymous visitors are sent back to the home page.
    """
    if user is None:
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    rooms = await ReviewRepository(db).get_by_submitter(user.uid)

    return DashboardPage(
        user=UserPublic(
            uid=user.uid,
            name=user.name or None,
            email=user.email or None,
            profile_picture=user.picture,
        ),
        message=message,
        rooms=[ReviewPublic.model_validate(room) for room in rooms],
    )
