"""Data access helpers for posts and their identification comments."""
from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from dubhub.models import Comment, Post
from dubhub.models.post import STATUS_COMMUNITY, STATUS_IDENTIFIED, VERIFICATION_FIELDS
from dubhub.services.errors import NotFound

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post and comment entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_post(self, post_id: str) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def get_comment(self, comment_id: str) -> Comment | None:
        """Return a comment by identifier."""
        return self.session.get(Comment, comment_id)

    def get_comments(self, comment_ids: list[str]) -> dict[str, Comment]:
        """Return the given comments keyed by id, in one query."""
        if not comment_ids:
            return {}
        result = self.session.execute(select(Comment).where(Comment.id.in_(comment_ids)))
        return {comment.id: comment for comment in result.scalars().unique()}

    def update_post_verification(self, post_id: str, **fields: Any) -> Post:
        """Apply a partial update to a post's verification columns and commit.

        Only the columns in ``VERIFICATION_FIELDS`` may be written; every other
        column is left untouched. There is no version check, so concurrent
        writers to the same post resolve last-write-wins per column.

        Raises:
            ValueError: If a non-verification field is supplied.
            NotFound: If the post does not exist.
        """
        unknown = set(fields) - VERIFICATION_FIELDS
        if unknown:
            raise ValueError(f"Not a verification field: {', '.join(sorted(unknown))}")

        post = self.get_post(post_id)
        if post is None:
            raise NotFound("Post not found")

        for name, value in fields.items():
            setattr(post, name, value)
        self.session.commit()
        self.session.refresh(post)
        return post

    def list_pending(self) -> list[Post]:
        """Return posts awaiting moderator review, newest first."""
        result = self.session.execute(
            select(Post)
            .where(Post.verification_status == STATUS_COMMUNITY)
            .order_by(Post.created_at.desc())
        )
        return list(result.scalars().unique())

    def list_posts(self, limit: int, offset: int = 0, genre: str | None = None) -> list[Post]:
        """Return the feed, newest first, optionally filtered by genre."""
        stmt = select(Post)
        if genre and genre.lower() != "all":
            stmt = stmt.where(func.lower(Post.genre) == genre.lower())
        stmt = stmt.order_by(Post.created_at.desc()).limit(limit).offset(offset)
        return list(self.session.execute(stmt).scalars().unique())

    def list_user_posts(self, user_id: str) -> list[Post]:
        """Return posts submitted by one user, newest first."""
        result = self.session.execute(
            select(Post).where(Post.user_id == user_id).order_by(Post.created_at.desc())
        )
        return list(result.scalars().unique())

    def create_post(
        self,
        *,
        user_id: str,
        title: str,
        video_url: str,
        genre: str | None = None,
        description: str | None = None,
        location: str | None = None,
        dj_name: str | None = None,
    ) -> Post:
        """Insert a new unverified post and return the persisted ORM instance."""
        post = Post(
            user_id=user_id,
            title=title,
            video_url=video_url,
            genre=genre,
            description=description,
            location=location,
            dj_name=dj_name,
        )
        self.session.add(post)
        self.session.commit()
        self.session.refresh(post)
        return post

    def list_comments(self, post_id: str) -> list[Comment]:
        """Return the comments on a post in submission order."""
        result = self.session.execute(
            select(Comment).where(Comment.post_id == post_id).order_by(Comment.created_at)
        )
        return list(result.scalars().unique())

    def create_comment(self, *, post_id: str, user_id: str, body: str) -> Comment:
        """Insert a comment on an existing post.

        Raises:
            NotFound: If the post does not exist.
        """
        if self.get_post(post_id) is None:
            raise NotFound("Post not found")
        comment = Comment(post_id=post_id, user_id=user_id, body=body)
        self.session.add(comment)
        self.session.commit()
        self.session.refresh(comment)
        return comment

    def count_user_posts(self, user_id: str) -> tuple[int, int]:
        """Return how many posts a user submitted and how many are identified."""
        total, identified = self.session.execute(
            select(
                func.count(Post.id),
                func.count(Post.id).filter(Post.verification_status == STATUS_IDENTIFIED),
            ).where(Post.user_id == user_id)
        ).one()
        return int(total or 0), int(identified or 0)
