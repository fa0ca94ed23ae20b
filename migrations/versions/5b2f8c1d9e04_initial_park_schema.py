"""initial park schema

Revision ID: 5b2f8c1d9e04
Revises:
Create Date: 2026-10-16 10:12:41.318240

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5b2f8c1d9e04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

park_status = sa.Enum("pending", "approved", "rejected", name="park_status")


def upgrade() -> None:
    """Create parks and their dependent collections."""
    op.create_table(
        "park",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("status", park_status, nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by", sa.Text(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint("upvotes >= 0", name="ck_park_upvotes_non_negative"),
        sa.CheckConstraint("downvotes >= 0", name="ck_park_downvotes_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_park_status", "park", ["status"])
    op.create_index("ix_park_created_by", "park", ["created_by"])

    op.create_table(
        "park_vote",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("park_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.Column("vote_type", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["park_id"], ["park.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("park_id", "user_id", name="uq_park_vote_park_user"),
    )
    op.create_index("ix_park_vote_park_id", "park_vote", ["park_id"])

    op.create_table(
        "park_photo",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("park_id", sa.Uuid(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("uploaded_by", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_approved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(["park_id"], ["park.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_park_photo_park_id", "park_photo", ["park_id"])

    op.create_table(
        "park_comment",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("park_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_reported", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(["park_id"], ["park.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_park_comment_park_id", "park_comment", ["park_id"])

    op.create_table(
        "park_tag",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("park_id", sa.Uuid(), nullable=False),
        sa.Column("tag", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["park_id"], ["park.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_park_tag_park_id", "park_tag", ["park_id"])


def downgrade() -> None:
    """Drop all park tables."""
    op.drop_index("ix_park_tag_park_id", table_name="park_tag")
    op.drop_table("park_tag")
    op.drop_index("ix_park_comment_park_id", table_name="park_comment")
    op.drop_table("park_comment")
    op.drop_index("ix_park_photo_park_id", table_name="park_photo")
    op.drop_table("park_photo")
    op.drop_index("ix_park_vote_park_id", table_name="park_vote")
    op.drop_table("park_vote")
    op.drop_index("ix_park_created_by", table_name="park")
    op.drop_index("ix_park_status", table_name="park")
    op.drop_table("park")
    park_status.drop(op.get_bind(), checkfirst=True)
