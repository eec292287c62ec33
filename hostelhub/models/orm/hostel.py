"""
Hostel ORM model.

Represents a hostel listing. The integer hostel_id is also the id used in
view telemetry keys (hostel:<id>).
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelhub.models.orm.base import Base

if TYPE_CHECKING:
    from hostelhub.models.orm.floor_plan import FloorPlan
    from hostelhub.models.orm.room_detail import RoomDetail


class Hostel(Base):
    """Hostel database table."""

    __tablename__ = "hostels"

    hostel_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    hostel_type: Mapped[str | None] = mapped_column(
        String(50), default=None, comment="e.g. boys, girls"
    )
    bed_type: Mapped[str | None] = mapped_column(
        String(50), default=None, comment="e.g. single, bunk"
    )
    chota_dhobi_facility: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )
    address: Mapped[str | None] = mapped_column(String(512), default=None)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    image_url: Mapped[str | None] = mapped_column(String(1024), default=None)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=text("NOW()"),
    )

    # Relationships
    floor_plans: Mapped[list["FloorPlan"]] = relationship(back_populates="hostel")
    room_details: Mapped[list["RoomDetail"]] = relationship(back_populates="hostel")

    __table_args__ = (
        Index("ix_hostels_similarity", "hostel_type", "bed_type", "chota_dhobi_facility"),
    )
