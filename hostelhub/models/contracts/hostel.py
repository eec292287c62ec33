"""
Hostel contracts (API response schemas).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class HostelPublic(BaseModel):
    """Hostel listing response model."""

    model_config = ConfigDict(from_attributes=True)

    hostel_id: int
    name: str
    hostel_type: str | None = None
    bed_type: str | None = None
    chota_dhobi_facility: bool = False
    address: str | None = None
    description: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None


class FloorPlanPublic(BaseModel):
    """Floor plan response model."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    hostel_id: int
    floor: str
    image_url: str | None = None


class FloorOption(BaseModel):
    """Floor entry for the review form's floor dropdown."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    floor: str


class RoomDetailPublic(BaseModel):
    """Room type offered by a hostel."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    hostel_id: int
    room_type: str
    occupancy: int | None = None
    price: float | None = None
    amenities: str | None = None
