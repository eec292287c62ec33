"""
Review Repository

Provides database operations for Review model.
"""

from sqlalchemy import select

from hostelhub.models.orm.floor_plan import FloorPlan
from hostelhub.models.orm.review import Review
from hostelhub.repositories.base import BaseRepository


class ReviewRepository(BaseRepository[Review]):
    """Repository for Review model operations."""

    model = Review

    async def get_by_floor(self, floor_id: int) -> list[Review]:
        """Get reviews for rooms on one floor, newest first."""
        result = await self.session.execute(
            select(Review).where(Review.floor_id == floor_id).order_by(Review.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_hostel(self, hostel_id: int) -> list[Review]:
        """
        Get reviews for every floor of a hostel, newest first.

        Joins through floor_plans so reviews follow the floor they belong to.
        """
        result = await self.session.execute(
            select(Review)
            .join(FloorPlan, Review.floor_id == FloorPlan.id)
            .where(FloorPlan.hostel_id == hostel_id)
            .order_by(Review.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_submitter(self, uid: str) -> list[Review]:
        """Get the reviews a user has submitted."""
        result = await self.session.execute(
            select(Review).where(Review.submitted_by == uid).order_by(Review.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_hostel_and_room(self, hostel_id: int, room_number: str) -> Review | None:
        """
        Get the review for a room number in a hostel.

        Returns:
            Review or None if the room has not been reviewed yet
        """
        result = await self.session.execute(
            select(Review).where(
                Review.hostel_id == hostel_id,
                Review.room_number == room_number,
            )
        )
        return result.scalar_one_or_none()
