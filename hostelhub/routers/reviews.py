"""
Reviews Router

Room review submission from the review form.
"""

import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Form, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import IntegrityError

from hostelhub.core.auth import OptionalUser
from hostelhub.core.database import DbSession
from hostelhub.models.contracts.review import ReviewCreate
from hostelhub.models.orm.review import UNIQUE_ROOM_CONSTRAINT, Review
from hostelhub.repositories.review import ReviewRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])

REVIEW_ADDED_MESSAGE = "Room Details have been added successfully!"


def _is_duplicate_room(exc: IntegrityError) -> bool:
    return UNIQUE_ROOM_CONSTRAINT in str(exc.orig if exc.orig is not None else exc)


def _duplicate_room_message(room_number: str) -> str:
    return (
        f"A review already exists for room {room_number} in this hostel. "
        "Only one review per room is allowed."
    )


def _floor_redirect(floor_id: int, **params: str) -> RedirectResponse:
    return RedirectResponse(
        f"/floor/{floor_id}?{urlencode(params)}",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.post("/submit-room-details")
async def submit_room_details(
    db: DbSession,
    user: OptionalUser,
    hostelid: int = Form(...),
    floorid: int = Form(...),
    roomnumber: str = Form(...),
    remarks: str | None = Form(None),
    jio: str | None = Form(None),
    airtel: str | None = Form(None),
    vit: str | None = Form(None),
    cleanliness: int | None = Form(None),
) -> RedirectResponse:
    """
    Save a room review and return to the floor page.

    Only one review per room number is allowed in a hostel; a second one
    redirects back with an error message instead.
    """
    data = ReviewCreate(
        hostel_id=hostelid,
        floor_id=floorid,
        room_number=roomnumber.strip(),
        remarks=remarks,
        jio_speed=jio,
        airtel_speed=airtel,
        vit_wifi_speed=vit,
        cleanliness_score=cleanliness,
    )

    repo = ReviewRepository(db)
    existing = await repo.get_by_hostel_and_room(data.hostel_id, data.room_number)
    if existing:
        logger.info(
            f"Duplicate review rejected for room {data.room_number}",
            extra={"hostel_id": data.hostel_id},
        )
        return _floor_redirect(data.floor_id, error=_duplicate_room_message(data.room_number))

    review = Review(**data.model_dump(), submitted_by=user.uid if user else None)
    try:
        await repo.create(review)
    except IntegrityError as e:
        await db.rollback()
        if not _is_duplicate_room(e):
            raise
        # Lost a race with another submission for the same room
        return _floor_redirect(data.floor_id, error=_duplicate_room_message(data.room_number))

    logger.info(
        f"Review saved for room {data.room_number}",
        extra={"hostel_id": data.hostel_id, "floor_id": data.floor_id},
    )
    return _floor_redirect(data.floor_id, message=REVIEW_ADDED_MESSAGE)
