"""Artist mentions detected in identification comments."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dubhub.db.session import Base
from dubhub.db.time import new_id, utcnow

TAG_PENDING = "pending"
TAG_CONFIRMED = "confirmed"
TAG_DENIED = "denied"

TAG_STATUSES = (TAG_PENDING, TAG_CONFIRMED, TAG_DENIED)


class ArtistVideoTag(Base):
    """A verified artist @mentioned on a post, awaiting the artist's answer."""

    __tablename__ = "artist_video_tags"
    __table_args__ = (
        Index("ix_artist_video_tags_post_id", "post_id"),
        Index("ix_artist_video_tags_artist_id", "artist_id"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    post_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    )
    artist_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("profiles.id"),
        nullable=False,
    )
    # Author of the comment containing the mention
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("profiles.id"),
        nullable=False,
    )
    comment_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    )
    status: Mapped[str] = mapped_column(Text, nullable=False, default=TAG_PENDING)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
