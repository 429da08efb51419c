"""artist video tags

Revision ID: a3f7c2d91b6e
Revises: 5c1e9a2f7d40
Create Date: 2026-10-20 09:14:37.205114

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "a3f7c2d91b6e"
down_revision: Union[str, Sequence[str], None] = "5c1e9a2f7d40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Record @mentions of verified artists and the artist's answer."""
    op.create_table(
        "artist_video_tags",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("post_id", sa.String(length=36), nullable=False),
        sa.Column("artist_id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("comment_id", sa.String(length=36), nullable=False),
        sa.Column("status", sa.Text(), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["artist_id"], ["profiles.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"]),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_artist_video_tags_post_id", "artist_video_tags", ["post_id"])
    op.create_index("ix_artist_video_tags_artist_id", "artist_video_tags", ["artist_id"])


def downgrade() -> None:
    """Drop the artist tag table."""
    op.drop_index("ix_artist_video_tags_artist_id", table_name="artist_video_tags")
    op.drop_index("ix_artist_video_tags_post_id", table_name="artist_video_tags")
    op.drop_table("artist_video_tags")
