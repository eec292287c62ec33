"""
Room Detail Repository

Provides database operations for RoomDetail model.
"""

from sqlalchemy import select

from hostelhub.models.orm.room_detail import RoomDetail
from hostelhub.repositories.base import BaseRepository


class RoomDetailRepository(BaseRepository[RoomDetail]):
    """Repository for RoomDetail model operations."""

    model = RoomDetail

    async def get_by_hostel(self, hostel_id: int) -> list[RoomDetail]:
        """Get the room types offered by a hostel."""
        result = await self.session.execute(
            select(RoomDetail).where(RoomDetail.hostel_id == hostel_id).order_by(RoomDetail.id)
        )
        return list(result.scalars().all())
