"""
Hostels Router

Public hostel pages: listing, hostel detail, floor plans and the review form.
Every page carries its trending flag from view telemetry.
"""

from fastapi import APIRouter, HTTPException, Request, status

from hostelhub.core.database import DbSession
from hostelhub.models.contracts.hostel import (
    FloorOption,
    FloorPlanPublic,
    HostelPublic,
    RoomDetailPublic,
)
from hostelhub.models.contracts.pages import FloorPage, HomePage, HostelPage, ReviewFormPage
from hostelhub.models.contracts.review import ReviewPublic
from hostelhub.repositories.floor_plan import FloorPlanRepository
from hostelhub.repositories.hostel import HostelRepository
from hostelhub.repositories.review import ReviewRepository
from hostelhub.repositories.room_detail import RoomDetailRepository
from hostelhub.services.view_telemetry import ViewTelemetryDep, is_entity_leader

router = APIRouter(tags=["hostels"])


@router.get("/", response_model=HomePage)
async def home(request: Request, db: DbSession, telemetry: ViewTelemetryDep) -> HomePage:
    """List all hostels."""
    hostels = await HostelRepository(db).get_all(limit=500)
    return HomePage(
        hostels=[HostelPublic.model_validate(h) for h in hostels],
        is_trending=await telemetry.is_trending(request.url.path),
    )


@router.get("/hostel/{hostel_id}", response_model=HostelPage)
async def hostel_detail(hostel_id: int, db: DbSession, telemetry: ViewTelemetryDep) -> HostelPage:
    """
    Hostel detail page.

    Counts the view before asking for the leader, so a hostel that just
    took the lead shows as trending on this very request.

    Raises:
        HTTPException: 404 if the hostel does not exist
    """
    hostel_repo = HostelRepository(db)
    hostel = await hostel_repo.get_by_id(hostel_id)
    if not hostel:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Hostel not found",
        )

    await telemetry.record_entity_view(hostel_id)
    leader = await telemetry.most_viewed_entity()
    is_trending = is_entity_leader(leader, hostel_id)

    floor_plans = await FloorPlanRepository(db).get_by_hostel(hostel_id)
    reviews = await ReviewRepository(db).get_by_hostel(hostel_id)
    room_details = await RoomDetailRepository(db).get_by_hostel(hostel_id)
    similar = await hostel_repo.get_similar(hostel)

    return HostelPage(
        hostel=HostelPublic.model_validate(hostel),
        floor_plans=[FloorPlanPublic.model_validate(f) for f in floor_plans],
        reviews=[ReviewPublic.model_validate(r) for r in reviews],
        room_details=[RoomDetailPublic.model_validate(r) for r in room_details],
        similar_hostels=[HostelPublic.model_validate(h) for h in similar],
        is_trending=is_trending,
        trending_views=leader.score if leader else 0,
    )


@router.get("/floor/{floor_id}", response_model=FloorPage)
async def floor_detail(
    floor_id: int,
    request: Request,
    db: DbSession,
    telemetry: ViewTelemetryDep,
) -> FloorPage:
    """
    Floor plan page with the reviews of its rooms.

    Raises:
        HTTPException: 404 if the floor plan does not exist
    """
    floor_plan = await FloorPlanRepository(db).get_by_id(floor_id)
    if not floor_plan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Floor plan not found",
        )

    hostel = await HostelRepository(db).get_by_id(floor_plan.hostel_id)
    reviews = await ReviewRepository(db).get_by_floor(floor_id)

    return FloorPage(
        floor_plan=FloorPlanPublic.model_validate(floor_plan),
        hostel=HostelPublic.model_validate(hostel) if hostel else None,
        reviews=[ReviewPublic.model_validate(r) for r in reviews],
        is_trending=await telemetry.is_trending(request.url.path),
    )


@router.get("/review/{floor_id}", response_model=ReviewFormPage)
async def review_form(
    floor_id: int,
    request: Request,
    db: DbSession,
    telemetry: ViewTelemetryDep,
) -> ReviewFormPage:
    """
    Review form for a floor.

    Raises:
        HTTPException: 404 if the floor plan or its hostel does not exist
    """
    floor_plan = await FloorPlanRepository(db).get_by_id(floor_id)
    if not floor_plan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Floor plan not found",
        )

    hostel = await HostelRepository(db).get_by_id(floor_plan.hostel_id)
    if not hostel:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Hostel not found",
        )

    return ReviewFormPage(
        hostel=HostelPublic.model_validate(hostel),
        floor_plan=FloorPlanPublic.model_validate(floor_plan),
        is_trending=await telemetry.is_trending(request.url.path),
    )


@router.get("/floors/{hostel_id}", response_model=list[FloorOption])
async def list_floors(hostel_id: int, db: DbSession) -> list[FloorOption]:
    """Floors of a hostel, for the review form's dropdown."""
    floors = await FloorPlanRepository(db).get_by_hostel(hostel_id)
    return [FloorOption.model_validate(f) for f in floors]
