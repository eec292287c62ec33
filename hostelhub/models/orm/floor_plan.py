"""
Floor plan ORM model.

One floor of a hostel, with an optional uploaded plan image.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelhub.models.orm.base import Base

if TYPE_CHECKING:
    from hostelhub.models.orm.hostel import Hostel


class FloorPlan(Base):
    """Floor plan database table."""

    __tablename__ = "floor_plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hostel_id: Mapped[int] = mapped_column(
        ForeignKey("hostels.hostel_id", ondelete="CASCADE"),
        nullable=False,
    )
    floor: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1024), default=None)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=text("NOW()"),
    )

    # Relationships
    hostel: Mapped["Hostel"] = relationship(back_populates="floor_plans")

    __table_args__ = (Index("ix_floor_plans_hostel_id", "hostel_id"),)
