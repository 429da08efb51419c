# src/dubhub/services/verification.py
"""Track verification workflow for DubHub posts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from dubhub.models import Comment, ModeratorAction, Post
from dubhub.models.moderation import ACTION_CONFIRMED_ID, ACTION_REOPENED
from dubhub.models.notification import (
    TYPE_CONFIRMED,
    TYPE_REJECTED,
    TYPE_REVIEW_SUBMITTED,
)
from dubhub.models.post import STATUS_COMMUNITY, STATUS_IDENTIFIED, STATUS_UNVERIFIED
from dubhub.repositories.post_repo import PostRepository
from dubhub.services.errors import BadRequest, InvalidState, NotFound
from dubhub.services.notifications import (
    MESSAGE_CONFIRMED,
    MESSAGE_REJECTED,
    MESSAGE_REVIEW_SUBMITTED_AUTHOR,
    NotificationService,
)
from dubhub.services.policy import Actor, require_moderator, require_owner
from dubhub.services.reputation import ReputationLedger

logger = logging.getLogger(__name__)


@dataclass
class PendingVerification:
    """A post in the review queue together with its candidate comment."""

    post: Post
    comment: Comment | None


class VerificationWorkflow:
    """Service handling the verification state machine and its side effects.

    States: unverified -> community -> identified, plus a moderator reopen back
    to unverified from anywhere. Moderators may also confirm straight from
    unverified.

    Authorization and state checks run before any write. The status change is
    committed first; reputation credits, the audit row and notifications are
    then applied one at a time, and a failing one is rolled back, logged and
    ignored without undoing the status change.
    """

    def __init__(
        self,
        session: Session,
        notifier: NotificationService | None = None,
        ledger: ReputationLedger | None = None,
    ) -> None:
        self.session = session
        self.posts = PostRepository(session)
        self.notifier = notifier or NotificationService(session)
        self.ledger = ledger or ReputationLedger(session)

    def submit_for_community_verification(
        self,
        post_id: str,
        comment_id: str,
        actor: Actor,
    ) -> Post:
        """Escalate the owner's accepted comment for moderator review.

        Args:
            post_id: Post being verified
            comment_id: Comment the owner accepts as the identification
            actor: Calling user; must own the post

        Returns:
            The updated post in ``community`` status

        Raises:
            NotFound: If the post or comment does not exist
            Forbidden: If the actor does not own the post
            InvalidState: If the post is already identified
        """
        post = self._get_post_or_raise(post_id)
        require_owner(actor, post)

        if not comment_id:
            raise BadRequest("Comment ID is required")
        comment = self._get_comment_or_raise(comment_id, post_id)

        if post.verification_status == STATUS_IDENTIFIED:
            raise InvalidState("Post has already been identified")

        post = self.posts.update_post_verification(
            post_id,
            verification_status=STATUS_COMMUNITY,
            is_verified_community=True,
            verified_comment_id=comment.id,
            verified_by=comment.user_id,
        )
        logger.info(
            "Post %s submitted for review by %s with comment %s",
            post_id,
            actor.user_id,
            comment.id,
        )

        self._best_effort(
            "author notification",
            post_id,
            self.notifier.emit,
            recipient_id=comment.user_id,
            triggered_by_user_id=actor.user_id,
            post_id=post_id,
            notification_type=TYPE_REVIEW_SUBMITTED,
            message=MESSAGE_REVIEW_SUBMITTED_AUTHOR,
            comment_id=comment.id,
        )
        self._best_effort(
            "moderator notification",
            post_id,
            self.notifier.notify_moderators,
            triggered_by_user_id=comment.user_id,
            post_id=post_id,
            comment_id=comment.id,
        )
        return post

    def moderator_confirm(
        self,
        post_id: str,
        actor: Actor,
        comment_id: str | None = None,
    ) -> dict[str, bool]:
        """Ratify an identification and credit the people involved.

        Args:
            post_id: Post being confirmed
            actor: Calling user; must be a moderator
            comment_id: Optional override of the owner's selected comment

        Raises:
            Forbidden: If the actor is not a moderator
            NotFound: If the post or the selected comment does not exist
            BadRequest: If no comment is given and none was selected before
        """
        require_moderator(actor)
        post = self._get_post_or_raise(post_id)

        selected_id = comment_id or post.verified_comment_id
        if not selected_id:
            raise BadRequest("No comment selected for verification")
        comment = self._get_comment_or_raise(selected_id, post_id)
        identifier_id = comment.user_id

        self.posts.update_post_verification(
            post_id,
            verification_status=STATUS_IDENTIFIED,
            verified_by_moderator=True,
            verified_comment_id=comment.id,
            verified_by=identifier_id,
        )
        logger.info(
            "Moderator %s confirmed comment %s on post %s",
            actor.user_id,
            comment.id,
            post_id,
        )

        self._best_effort(
            "identification credit",
            post_id,
            self.ledger.credit_identification,
            identifier_id,
        )
        self._best_effort(
            "moderation credit",
            post_id,
            self.ledger.credit_moderation,
            actor.user_id,
        )
        self._best_effort(
            "audit record",
            post_id,
            self._record_action,
            post_id,
            actor.user_id,
            ACTION_CONFIRMED_ID,
        )
        self._best_effort(
            "confirmation notification",
            post_id,
            self.notifier.emit,
            recipient_id=identifier_id,
            triggered_by_user_id=actor.user_id,
            post_id=post_id,
            notification_type=TYPE_CONFIRMED,
            message=MESSAGE_CONFIRMED,
            comment_id=comment.id,
        )
        return {"success": True}

    def moderator_reopen(self, post_id: str, actor: Actor) -> dict[str, bool]:
        """Discard the current identification and return the post to unverified.

        Karma granted by an earlier confirmation is kept.

        Raises:
            Forbidden: If the actor is not a moderator
            NotFound: If the post does not exist
        """
        require_moderator(actor)
        post = self._get_post_or_raise(post_id)

        previous_identifier = post.verified_by
        previous_comment_id = post.verified_comment_id

        self.posts.update_post_verification(
            post_id,
            verification_status=STATUS_UNVERIFIED,
            is_verified_community=False,
            verified_by_moderator=False,
            verified_comment_id=None,
            verified_by=None,
        )
        logger.info("Moderator %s reopened post %s", actor.user_id, post_id)

        self._best_effort(
            "audit record",
            post_id,
            self._record_action,
            post_id,
            actor.user_id,
            ACTION_REOPENED,
        )
        if previous_identifier:
            self._best_effort(
                "rejection notification",
                post_id,
                self.notifier.emit,
                recipient_id=previous_identifier,
                triggered_by_user_id=actor.user_id,
                post_id=post_id,
                notification_type=TYPE_REJECTED,
                message=MESSAGE_REJECTED,
                comment_id=previous_comment_id,
            )
        return {"success": True}

    def list_pending_verifications(self) -> list[PendingVerification]:
        """Return the moderator review queue with each candidate comment."""
        posts = self.posts.list_pending()
        comments = self.posts.get_comments(
            [post.verified_comment_id for post in posts if post.verified_comment_id]
        )
        return [
            PendingVerification(post=post, comment=comments.get(post.verified_comment_id))
            for post in posts
        ]

    def _get_post_or_raise(self, post_id: str) -> Post:
        post = self.posts.get_post(post_id)
        if post is None:
            raise NotFound("Post not found")
        return post

    def _get_comment_or_raise(self, comment_id: str, post_id: str) -> Comment:
        comment = self.posts.get_comment(comment_id)
        if comment is None or comment.post_id != post_id:
            raise NotFound("Comment not found")
        return comment

    def _record_action(self, post_id: str, moderator_id: str, action: str) -> ModeratorAction:
        record = ModeratorAction(post_id=post_id, moderator_id=moderator_id, action=action)
        self.session.add(record)
        self.session.commit()
        return record

    def _best_effort(
        self,
        label: str,
        post_id: str,
        func: Callable[..., Any],
        /,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        """Run a post-transition side effect; log and discard any failure."""
        try:
            func(*args, **kwargs)
        except Exception:
            self.session.rollback()
            logger.exception("Verification side effect %r failed for post %s", label, post_id)
