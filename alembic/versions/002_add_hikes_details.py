"""add hikes.organization, hikes.photo_release, hikes.description

Revision ID: 002
Revises: 001
Create Date: 2026-10-18 00:00:01.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column("hikes", sa.Column("organization", sa.String(length=200), nullable=True))
    op.add_column(
        "hikes",
        sa.Column("photo_release", sa.Boolean(), server_default=sa.false(), nullable=False),
    )
    op.add_column("hikes", sa.Column("description", sa.Text(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("hikes") as batch_op:
        batch_op.drop_column("description")
        batch_op.drop_column("photo_release")
        batch_op.drop_column("organization")
