"""SQLAlchemy models for submitted videos and their identifications."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dubhub.db.session import Base
from dubhub.db.time import new_id, utcnow

STATUS_UNVERIFIED = "unverified"
STATUS_COMMUNITY = "community"
STATUS_IDENTIFIED = "identified"

VERIFICATION_STATUSES = (STATUS_UNVERIFIED, STATUS_COMMUNITY, STATUS_IDENTIFIED)

# Columns a verification transition is allowed to touch.
VERIFICATION_FIELDS = frozenset(
    {
        "verification_status",
        "is_verified_community",
        "verified_by_moderator",
        "verified_comment_id",
        "verified_by",
    }
)


class Post(Base):
    """A user-submitted clip awaiting or holding a track identification.

    Verification state machine:
    unverified -> community (owner accepts a comment) -> identified (moderator
    confirms). A moderator reopen resets any state back to unverified.
    """

    __tablename__ = "posts"
    __table_args__ = (Index("ix_posts_verification_status", "verification_status"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("profiles.id"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    video_url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    genre: Mapped[str | None] = mapped_column(Text, nullable=True)
    dj_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)

    verification_status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=STATUS_UNVERIFIED,
    )
    is_verified_community: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    verified_by_moderator: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # No foreign key: comments already reference posts.
    verified_comment_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    # Author of the accepted comment, i.e. the user credited with the ID.
    verified_by: Mapped[str | None] = mapped_column(String(36), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    owner = relationship("Profile", foreign_keys=[user_id], lazy="joined")
