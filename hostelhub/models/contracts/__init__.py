"""Pydantic contracts (API request/response schemas)."""

from hostelhub.models.contracts.auth import UserPublic
from hostelhub.models.contracts.common import ErrorResponse, HealthResponse
from hostelhub.models.contracts.hostel import (
    FloorOption,
    FloorPlanPublic,
    HostelPublic,
    RoomDetailPublic,
)
from hostelhub.models.contracts.pages import (
    DashboardPage,
    FloorPage,
    HomePage,
    HostelPage,
    ReviewFormPage,
)
from hostelhub.models.contracts.review import ReviewCreate, ReviewPublic
from hostelhub.models.contracts.speedtest import SpeedTestErrorResponse, SpeedTestResponse
from hostelhub.models.contracts.telemetry import EntityViewLeader, PageViewLeader
from hostelhub.models.contracts.upload import FloorPlanImageResponse

__all__ = [
    "DashboardPage",
    "EntityViewLeader",
    "ErrorResponse",
    "FloorOption",
    "FloorPage",
    "FloorPlanImageResponse",
    "FloorPlanPublic",
    "HealthResponse",
    "HomePage",
    "HostelPage",
    "HostelPublic",
    "PageViewLeader",
    "ReviewCreate",
    "ReviewFormPage",
    "ReviewPublic",
    "RoomDetailPublic",
    "SpeedTestErrorResponse",
    "SpeedTestResponse",
    "UserPublic",
]
