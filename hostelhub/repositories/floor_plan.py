"""
Floor Plan Repository

Provides database operations for FloorPlan model.
"""

from sqlalchemy import select

from hostelhub.models.orm.floor_plan import FloorPlan
from hostelhub.repositories.base import BaseRepository


class FloorPlanRepository(BaseRepository[FloorPlan]):
    """Repository for FloorPlan model operations."""

    model = FloorPlan

    async def get_by_hostel(self, hostel_id: int) -> list[FloorPlan]:
        """Get all floors of a hostel, in id order."""
        result = await self.session.execute(
            select(FloorPlan).where(FloorPlan.hostel_id == hostel_id).order_by(FloorPlan.id)
        )
        return list(result.scalars().all())
