"""add waiver_signatures

Revision ID: 003
Revises: 002
Create Date: 2026-10-18 00:00:02.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "waiver_signatures",
        sa.Column("user_uuid", sa.String(length=64), nullable=False),
        sa.Column("hike_join_code", sa.String(length=64), nullable=False),
        sa.Column("signed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("user_agent", sa.Text(), nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=False),
        sa.Column("waiver_text", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["user_uuid"], ["users.uuid"]),
        sa.ForeignKeyConstraint(["hike_join_code"], ["hikes.join_code"]),
        sa.PrimaryKeyConstraint("user_uuid", "hike_join_code"),
    )


def downgrade() -> None:
    op.drop_table("waiver_signatures")
