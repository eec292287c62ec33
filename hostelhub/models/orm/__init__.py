"""SQLAlchemy ORM Models for HostelHub.

Pure database models using SQLAlchemy 2.0 declarative style.
These models define the database schema and relationships.
"""

from hostelhub.models.orm.base import Base
from hostelhub.models.orm.floor_plan import FloorPlan
from hostelhub.models.orm.hostel import Hostel
from hostelhub.models.orm.review import Review
from hostelhub.models.orm.room_detail import RoomDetail
from hostelhub.models.orm.user import User

__all__ = [
    # Base
    "Base",
    # Hostels
    "Hostel",
    "FloorPlan",
    "RoomDetail",
    # Reviews
    "Review",
    # Users
    "User",
]
