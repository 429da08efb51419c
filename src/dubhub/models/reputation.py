"""Per-user karma accumulated from confirmed identifications."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dubhub.db.session import Base
from dubhub.db.time import utcnow


class UserKarma(Base):
    """Karma ledger row, created lazily on the first credit."""

    __tablename__ = "user_karma"

    # Unique key for ON CONFLICT upserts; no FK so moderator credits never fail on it.
    user_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    correct_ids: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
