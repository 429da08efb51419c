"""Karma ledger credited when identifications are confirmed."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from dubhub.db.time import utcnow
from dubhub.models import Profile, UserKarma
from dubhub.models.profile import ROLE_ARTIST, ROLE_USER

logger = logging.getLogger(__name__)

IDENTIFICATION_SCORE = 10
MODERATION_SCORE = 1

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class ReputationLedger:
    """Monotonic per-user score and confirmed-ID counter.

    No decrement exists: reopening a post leaves karma granted by an earlier
    confirmation in place.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def credit_identification(self, user_id: str) -> UserKarma:
        """Credit a confirmed track ID: +10 score, +1 correct ID."""
        logger.info("Crediting identification to %s", user_id)
        return self._upsert(user_id, score=IDENTIFICATION_SCORE, correct_ids=1)

    def credit_moderation(self, user_id: str) -> UserKarma:
        """Credit a moderator for ratifying an identification: +1 score."""
        logger.info("Crediting moderation to %s", user_id)
        return self._upsert(user_id, score=MODERATION_SCORE, correct_ids=0)

    def _upsert(self, user_id: str, *, score: int, correct_ids: int) -> UserKarma:
        """Create the row with the given deltas or add them in one statement.

        ``INSERT ... ON CONFLICT DO UPDATE``: concurrent first credits for one
        user converge on a single row.
        """
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Karma upsert is not supported on {dialect!r}")

        now = utcnow()
        stmt = insert(UserKarma).values(
            user_id=user_id,
            score=score,
            correct_ids=correct_ids,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[UserKarma.user_id],
            set_={
                "score": UserKarma.score + score,
                "correct_ids": UserKarma.correct_ids + correct_ids,
                "updated_at": now,
            },
        )
        self.session.execute(stmt)
        self.session.commit()

        return self.session.execute(
            select(UserKarma)
            .where(UserKarma.user_id == user_id)
            .execution_options(populate_existing=True)
        ).scalar_one()

    def get(self, user_id: str) -> UserKarma | None:
        """Return the ledger row for a user, if any credit was ever granted."""
        return self.session.get(UserKarma, user_id)

    def karma(self, user_id: str) -> int:
        """Return the user's score, 0 when they have never been credited."""
        karma = self.get(user_id)
        return karma.score if karma else 0

    def leaderboard(self, account_type: str = ROLE_USER, limit: int = 50) -> list[dict[str, object]]:
        """Rank profiles of one account type by score, then by confirmed IDs.

        Profiles without a ledger row are listed with zero karma.
        """
        if account_type not in (ROLE_USER, ROLE_ARTIST):
            raise ValueError(f"Unknown account type: {account_type}")

        score = func.coalesce(UserKarma.score, 0)
        correct_ids = func.coalesce(UserKarma.correct_ids, 0)
        rows = self.session.execute(
            select(
                Profile.id,
                Profile.username,
                Profile.avatar_url,
                Profile.account_type,
                Profile.moderator,
                score.label("score"),
                correct_ids.label("correct_ids"),
            )
            .outerjoin(UserKarma, UserKarma.user_id == Profile.id)
            .where(Profile.account_type == account_type)
            .order_by(score.desc(), correct_ids.desc(), Profile.username)
            .limit(limit)
        ).all()
        return [
            {
                "user_id": row.id,
                "username": row.username,
                "avatar_url": row.avatar_url,
                "account_type": row.account_type,
                "moderator": bool(row.moderator),
                "score": int(row.score),
                "correct_ids": int(row.correct_ids),
            }
            for row in rows
        ]
