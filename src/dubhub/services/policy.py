"""Authorization checks composed in front of each workflow transition."""

from __future__ import annotations

from dataclasses import dataclass

from dubhub.models import Post
from dubhub.models.profile import ROLE_MODERATOR
from dubhub.services.errors import Forbidden


@dataclass(frozen=True)
class Actor:
    """Caller identity as resolved by the auth provider; the role is trusted."""

    user_id: str
    role: str

    @property
    def is_moderator(self) -> bool:
        return self.role == ROLE_MODERATOR


def require_owner(actor: Actor, post: Post) -> None:
    """Raise Forbidden unless the actor submitted the post."""
    if actor.user_id != post.user_id:
        raise Forbidden("Only the post owner can verify")


def require_moderator(actor: Actor) -> None:
    """Raise Forbidden unless the actor holds the moderator role."""
    if not actor.is_moderator:
        raise Forbidden("Moderator role required")
