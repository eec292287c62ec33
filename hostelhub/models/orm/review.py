"""
Review ORM model.

A student's review of a single room. Only one review is allowed per room
number within a hostel.
"""

from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from hostelhub.models.orm.base import Base

UNIQUE_ROOM_CONSTRAINT = "uq_reviews_hostel_room"


class Review(Base):
    """Room review database table."""

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hostel_id: Mapped[int] = mapped_column(
        ForeignKey("hostels.hostel_id", ondelete="CASCADE"),
        nullable=False,
    )
    floor_id: Mapped[int] = mapped_column(
        ForeignKey("floor_plans.id", ondelete="CASCADE"),
        nullable=False,
    )
    room_number: Mapped[str] = mapped_column(String(50), nullable=False)
    airtel_speed: Mapped[str | None] = mapped_column(String(50), default=None)
    jio_speed: Mapped[str | None] = mapped_column(String(50), default=None)
    vit_wifi_speed: Mapped[str | None] = mapped_column(String(50), default=None)
    cleanliness_score: Mapped[int | None] = mapped_column(Integer, default=None)
    remarks: Mapped[str | None] = mapped_column(Text, default=None)
    submitted_by: Mapped[str | None] = mapped_column(
        String(255), default=None, comment="Google uid of the reviewer"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=text("NOW()"),
    )

    __table_args__ = (
        UniqueConstraint("hostel_id", "room_number", name=UNIQUE_ROOM_CONSTRAINT),
        Index("ix_reviews_floor_id", "floor_id"),
        Index("ix_reviews_submitted_by", "submitted_by"),
    )
