"""Append-only audit log of moderator decisions."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dubhub.db.session import Base
from dubhub.db.time import new_id, utcnow

ACTION_CONFIRMED_ID = "confirmed_id"
ACTION_REOPENED = "reopened"


class ModeratorAction(Base):
    """Audit record of a moderator confirming or reopening a post."""

    __tablename__ = "moderator_actions"
    __table_args__ = (Index("ix_moderator_actions_post_id", "post_id"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    post_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    )
    moderator_id: Mapped[str] = mapped_column(String(36), nullable=False)
    # "confirmed_id" | "reopened"
    action: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
