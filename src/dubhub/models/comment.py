"""SQLAlchemy models for comments carrying candidate track IDs."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dubhub.db.session import Base
from dubhub.db.time import new_id, utcnow


class Comment(Base):
    """A user's claim about which track is playing in a post.

    Comments are immutable once created.
    """

    __tablename__ = "comments"
    __table_args__ = (Index("ix_comments_post_id", "post_id"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    post_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("profiles.id"),
        nullable=False,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    # First artist tag raised by an @mention in the body; no FK, tags reference comments.
    artist_tag: Mapped[str | None] = mapped_column(String(36), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    author = relationship("Profile", foreign_keys=[user_id], lazy="joined")
