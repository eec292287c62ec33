"""
Upload contracts (API response schemas).
"""

from pydantic import BaseModel


class FloorPlanImageResponse(BaseModel):
    """Result of a floor plan image upload."""

    floor_id: int
    image_url: str
    size_bytes: int
