"""
Notification service.

Records notifications raised by verification transitions and serves the
read side of a user's notification feed.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from dubhub.models import Notification, Profile
from dubhub.models.notification import TYPE_REVIEW_SUBMITTED

logger = logging.getLogger(__name__)

MESSAGE_REVIEW_SUBMITTED_AUTHOR = "submitted your track ID for moderator review"
MESSAGE_REVIEW_SUBMITTED_MODERATOR = "submitted a track ID for moderator review"
MESSAGE_CONFIRMED = "confirmed your track ID"
MESSAGE_REJECTED = "rejected your track ID"


class NotificationService:
    """Writes and reads notification rows for a session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def emit(
        self,
        *,
        recipient_id: str,
        triggered_by_user_id: str,
        post_id: str,
        notification_type: str,
        message: str,
        comment_id: str | None = None,
    ) -> Notification | None:
        """
        Create a notification for one recipient.

        Args:
            recipient_id: User who sees the notification
            triggered_by_user_id: User whose action caused it
            post_id: Post the notification refers to
            notification_type: Machine-readable kind, see ``models.notification``
            message: Human-readable text shown after the actor's name
            comment_id: Related comment, if any

        Returns:
            Created notification, or None if skipped (self-action)
        """
        if recipient_id == triggered_by_user_id:
            logger.debug("Skipping self-notification for user %s", recipient_id)
            return None

        notification = Notification(
            user_id=recipient_id,
            triggered_by_user_id=triggered_by_user_id,
            post_id=post_id,
            comment_id=comment_id,
            type=notification_type,
            message=message,
        )
        self.session.add(notification)
        self.session.commit()

        logger.info(
            "Created %s notification %s for user %s",
            notification_type,
            notification.id,
            recipient_id,
        )
        return notification

    def notify_moderators(
        self,
        *,
        triggered_by_user_id: str,
        post_id: str,
        comment_id: str | None = None,
    ) -> list[Notification]:
        """Tell every moderator that a post entered the review queue."""
        moderator_ids = self.session.execute(
            select(Profile.id).where(Profile.moderator.is_(True))
        ).scalars()

        created: list[Notification] = []
        for moderator_id in moderator_ids.all():
            notification = self.emit(
                recipient_id=moderator_id,
                triggered_by_user_id=triggered_by_user_id,
                post_id=post_id,
                notification_type=TYPE_REVIEW_SUBMITTED,
                message=MESSAGE_REVIEW_SUBMITTED_MODERATOR,
                comment_id=comment_id,
            )
            if notification is not None:
                created.append(notification)
        return created

    def list_for_user(self, user_id: str, limit: int = 100) -> list[Notification]:
        """Return a user's notifications, newest first."""
        result = self.session.execute(
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars())

    def unread_count(self, user_id: str) -> int:
        """Return how many notifications the user has not read."""
        return self._count_unread(user_id)

    def moderator_unread_count(self, user_id: str) -> int:
        """Return unread review-queue notifications only."""
        return self._count_unread(user_id, Notification.type == TYPE_REVIEW_SUBMITTED)

    def _count_unread(self, user_id: str, *criteria) -> int:
        return int(
            self.session.execute(
                select(func.count())
                .select_from(Notification)
                .where(
                    Notification.user_id == user_id,
                    Notification.read.is_(False),
                    *criteria,
                )
            ).scalar()
            or 0
        )

    def mark_read(self, notification_id: str, user_id: str) -> bool:
        """Mark one of the user's notifications as read.

        Returns:
            False if no such notification belongs to the user.
        """
        notification = self.session.get(Notification, notification_id)
        if notification is None or notification.user_id != user_id:
            return False
        notification.read = True
        self.session.commit()
        return True

    def mark_all_read(self, user_id: str) -> int:
        """Mark every unread notification of the user as read; return how many."""
        result = self.session.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.read.is_(False))
            .values(read=True)
        )
        self.session.commit()
        return result.rowcount or 0
