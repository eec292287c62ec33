"""Data access repositories."""

from hostelhub.repositories.floor_plan import FloorPlanRepository
from hostelhub.repositories.hostel import HostelRepository
from hostelhub.repositories.review import ReviewRepository
from hostelhub.repositories.room_detail import RoomDetailRepository
from hostelhub.repositories.user import UserRepository

__all__ = [
    "FloorPlanRepository",
    "HostelRepository",
    "ReviewRepository",
    "RoomDetailRepository",
    "UserRepository",
]
