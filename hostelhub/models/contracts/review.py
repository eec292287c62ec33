"""
Review contracts (API request/response schemas).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreate(BaseModel):
    """Room review submission (posted as a form by the review page)."""

    hostel_id: int = Field(..., description="Hostel being reviewed")
    floor_id: int = Field(..., description="Floor plan the room is on")
    room_number: str = Field(..., min_length=1, max_length=50)
    remarks: str | None = Field(default=None, description="Free-text remarks")
    jio_speed: str | None = Field(default=None, max_length=50)
    airtel_speed: str | None = Field(default=None, max_length=50)
    vit_wifi_speed: str | None = Field(default=None, max_length=50)
    cleanliness_score: int | None = Field(default=None, ge=0, le=10)


class ReviewPublic(BaseModel):
    """Room review response model."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    hostel_id: int
    floor_id: int
    room_number: str
    airtel_speed: str | None = None
    jio_speed: str | None = None
    vit_wifi_speed: str | None = None
    cleanliness_score: int | None = None
    remarks: str | None = None
    created_at: datetime | None = None
