"""
Hostel Repository

Provides database operations for Hostel model.
"""

from sqlalchemy import select

from hostelhub.models.orm.hostel import Hostel
from hostelhub.repositories.base import BaseRepository


class HostelRepository(BaseRepository[Hostel]):
    """Repository for Hostel model operations."""

    model = Hostel
    id_column = "hostel_id"

    async def get_similar(self, hostel: Hostel, limit: int = 6) -> list[Hostel]:
        """
        Get hostels with the same type, bed type and laundry facility.

        Args:
            hostel: Hostel to compare against (excluded from the result)
            limit: Maximum number of results

        Returns:
            List of similar hostels ordered by id
        """
        result = await self.session.execute(
            select(Hostel)
            .where(
                Hostel.hostel_type == hostel.hostel_type,
                Hostel.bed_type == hostel.bed_type,
                Hostel.chota_dhobi_facility == hostel.chota_dhobi_facility,
                Hostel.hostel_id != hostel.hostel_id,
            )
            .order_by(Hostel.hostel_id)
            .limit(limit)
        )
        return list(result.scalars().all())
