"""SQLAlchemy models for Supabase-backed user profiles."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dubhub.db.session import Base
from dubhub.db.time import utcnow

ROLE_USER = "user"
ROLE_ARTIST = "artist"
ROLE_MODERATOR = "moderator"


class Profile(Base):
    """Public profile linked one-to-one with a Supabase auth user."""

    __tablename__ = "profiles"

    # Supabase auth user id; profiles are created by the signup trigger.
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    # "user" | "artist"
    account_type: Mapped[str] = mapped_column(Text, nullable=False, default=ROLE_USER)
    moderator: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    verified_artist: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    @property
    def role(self) -> str:
        """Return the effective role; the moderator flag outranks account type."""
        if self.moderator:
            return ROLE_MODERATOR
        return self.account_type
