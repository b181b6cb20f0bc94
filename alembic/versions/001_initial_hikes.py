"""initial tables: users, trailheads, hikes, hike_users

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("uuid", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("license_plate", sa.String(length=20), nullable=True),
        sa.Column("emergency_contact", sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint("uuid"),
    )

    op.create_table(
        "trailheads",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "hikes",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("trailhead_name", sa.String(length=200), nullable=True),
        sa.Column("leader_uuid", sa.String(length=64), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(length=20), server_default="open", nullable=False),
        sa.Column("join_code", sa.String(length=64), nullable=False),
        sa.Column("leader_code", sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(["leader_uuid"], ["users.uuid"]),
        sa.PrimaryKeyConstraint("join_code"),
        sa.UniqueConstraint("leader_code"),
    )
    op.create_index(op.f("ix_hikes_leader_uuid"), "hikes", ["leader_uuid"], unique=False)

    op.create_table(
        "hike_users",
        sa.Column("hike_join_code", sa.String(length=64), nullable=False),
        sa.Column("user_uuid", sa.String(length=64), nullable=False),
        sa.Column("status", sa.String(length=50), server_default="active", nullable=False),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["hike_join_code"], ["hikes.join_code"]),
        sa.ForeignKeyConstraint(["user_uuid"], ["users.uuid"]),
        sa.PrimaryKeyConstraint("hike_join_code", "user_uuid"),
    )


def downgrade() -> None:
    op.drop_table("hike_users")
    op.drop_index(op.f("ix_hikes_leader_uuid"), table_name="hikes")
    op.drop_table("hikes")
    op.drop_table("trailheads")
    op.drop_table("users")
