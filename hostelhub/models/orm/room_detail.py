"""
Room detail ORM model.

Room types offered by a hostel (occupancy, price, amenities).
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelhub.models.orm.base import Base

if TYPE_CHECKING:
    from hostelhub.models.orm.hostel import Hostel


class RoomDetail(Base):
    """Room detail database table."""

    __tablename__ = "room_details"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hostel_id: Mapped[int] = mapped_column(
        ForeignKey("hostels.hostel_id", ondelete="CASCADE"),
        nullable=False,
    )
    room_type: Mapped[str] = mapped_column(String(100), nullable=False)
    occupancy: Mapped[int | None] = mapped_column(Integer, default=None)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), default=None)
    amenities: Mapped[str | None] = mapped_column(Text, default=None)

    # Relationships
    hostel: Mapped["Hostel"] = relationship(back_populates="room_details")

    __table_args__ = (Index("ix_room_details_hostel_id", "hostel_id"),)
