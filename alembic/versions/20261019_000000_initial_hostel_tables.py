"""Initial hostel tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "hostels",
        sa.Column("hostel_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("hostel_type", sa.String(length=50), nullable=True, comment="e.g. boys, girls"),
        sa.Column("bed_type", sa.String(length=50), nullable=True, comment="e.g. single, bunk"),
        sa.Column(
            "chota_dhobi_facility",
            sa.Boolean(),
            server_default="false",
            nullable=False,
        ),
        sa.Column("address", sa.String(length=512), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(length=1024), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("hostel_id"),
    )
    op.create_index(
        "ix_hostels_similarity",
        "hostels",
        ["hostel_type", "bed_type", "chota_dhobi_facility"],
        unique=False,
    )

    op.create_table(
        "floor_plans",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("hostel_id", sa.Integer(), nullable=False),
        sa.Column("floor", sa.String(length=100), nullable=False),
        sa.Column("image_url", sa.String(length=1024), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["hostel_id"], ["hostels.hostel_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_floor_plans_hostel_id", "floor_plans", ["hostel_id"], unique=False)

    op.create_table(
        "room_details",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("hostel_id", sa.Integer(), nullable=False),
        sa.Column("room_type", sa.String(length=100), nullable=False),
        sa.Column("occupancy", sa.Integer(), nullable=True),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("amenities", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["hostel_id"], ["hostels.hostel_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_room_details_hostel_id", "room_details", ["hostel_id"], unique=False)

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("hostel_id", sa.Integer(), nullable=False),
        sa.Column("floor_id", sa.Integer(), nullable=False),
        sa.Column("room_number", sa.String(length=50), nullable=False),
        sa.Column("airtel_speed", sa.String(length=50), nullable=True),
        sa.Column("jio_speed", sa.String(length=50), nullable=True),
        sa.Column("vit_wifi_speed", sa.String(length=50), nullable=True),
        sa.Column("cleanliness_score", sa.Integer(), nullable=True),
        sa.Column("remarks", sa.Text(), nullable=True),
        sa.Column(
            "submitted_by",
            sa.String(length=255),
            nullable=True,
            comment="Google uid of the reviewer",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["hostel_id"], ["hostels.hostel_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["floor_id"], ["floor_plans.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("hostel_id", "room_number", name="uq_reviews_hostel_room"),
    )
    op.create_index("ix_reviews_floor_id", "reviews", ["floor_id"], unique=False)
    op.create_index("ix_reviews_submitted_by", "reviews", ["submitted_by"], unique=False)

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uid", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("profile_picture", sa.String(length=1024), nullable=True),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("uid"),
    )


def downgrade() -> None:
    op.drop_table("users")
    op.drop_index("ix_reviews_submitted_by", table_name="reviews")
    op.drop_index("ix_reviews_floor_id", table_name="reviews")
    op.drop_table("reviews")
    op.drop_index("ix_room_details_hostel_id", table_name="room_details")
    op.drop_table("room_details")
    op.drop_index("ix_floor_plans_hostel_id", table_name="floor_plans")
    op.drop_table("floor_plans")
    op.drop_index("ix_hostels_similarity", table_name="hostels")
    op.drop_table("hostels")
