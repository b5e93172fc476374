"""Create campsites and campers tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Initial schema. campers.campsite_id references campsites.id, so
       campsites is created first and dropped last.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp_columns():
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this row was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this row was last modified (UTC)",
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "campsites",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False, comment="Display name of the campsite"),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "campers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False, comment="Camper's display name"),
        sa.Column(
            "campsite_id",
            sa.Integer(),
            nullable=False,
            comment="Campsite this camper belongs to",
        ),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(["campsite_id"], ["campsites.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_campers_campsite_id", "campers", ["campsite_id"])


def downgrade() -> None:
    """Destructive: drops both tables and all their rows."""
    op.drop_index("ix_campers_campsite_id", table_name="campers")
    op.drop_table("campers")
    op.drop_table("campsites")
