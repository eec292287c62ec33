"""
Page view models.

Each page of the site is served as one JSON document carrying everything
the page needs, including its trending flag.
"""

from pydantic import BaseModel, Field

from hostelhub.models.contracts.auth import UserPublic
from hostelhub.models.contracts.hostel import FloorPlanPublic, HostelPublic, RoomDetailPublic
from hostelhub.models.contracts.review import ReviewPublic


class HomePage(BaseModel):
    """Hostel listing page."""

    hostels: list[HostelPublic] = Field(default_factory=list)
    is_trending: bool = False


class HostelPage(BaseModel):
    """Hostel detail page."""

    hostel: HostelPublic
    floor_plans: list[FloorPlanPublic] = Field(default_factory=list)
    reviews: list[ReviewPublic] = Field(default_factory=list)
    room_details: list[RoomDetailPublic] = Field(default_factory=list)
    similar_hostels: list[HostelPublic] = Field(default_factory=list)
    is_trending: bool = False
    trending_views: int = 0


class FloorPage(BaseModel):
    """Floor plan page with the reviews of its rooms."""

    floor_plan: FloorPlanPublic
    hostel: HostelPublic | None = None
    reviews: list[ReviewPublic] = Field(default_factory=list)
    is_trending: bool = False


class ReviewFormPage(BaseModel):
    """Review submission form for a floor."""

    hostel: HostelPublic
    floor_plan: FloorPlanPublic
    is_trending: bool = False


class DashboardPage(BaseModel):
    """Signed-in user's dashboard."""

    user: UserPublic
    message: str | None = None
    rooms: list[ReviewPublic] = Field(default_factory=list)
