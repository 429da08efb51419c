"""Notifications raised as side effects of workflow transitions."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dubhub.db.session import Base
from dubhub.db.time import new_id, utcnow

TYPE_REVIEW_SUBMITTED = "moderator_review_submitted"
TYPE_CONFIRMED = "moderator_confirmed"
TYPE_REJECTED = "moderator_rejected"


class Notification(Base):
    """Best-effort message shown to a user in their notification feed."""

    __tablename__ = "notifications"
    __table_args__ = (Index("ix_notifications_user_id_read", "user_id", "read"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # Recipient
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    triggered_by_user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    post_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    )
    comment_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
