"""Artist tagging from @mentions in identification comments."""

from __future__ import annotations

import logging
import re

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from dubhub.models import ArtistVideoTag, Comment, Post, Profile
from dubhub.models.artist_tag import TAG_CONFIRMED, TAG_DENIED
from dubhub.models.profile import ROLE_ARTIST
from dubhub.services.errors import BadRequest, NotFound

logger = logging.getLogger(__name__)

MENTION_PATTERN = re.compile(r"@([A-Za-z0-9_]+)")


def detect_mentions(text: str) -> list[str]:
    """Return the distinct @names in ``text`` in order of appearance."""
    names: list[str] = []
    seen: set[str] = set()
    for name in MENTION_PATTERN.findall(text):
        if name.lower() not in seen:
            seen.add(name.lower())
            names.append(name)
    return names


class ArtistTagService:
    """Creates artist tags for comments and lets the artist answer them."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def tag_mentions(self, comment: Comment) -> list[ArtistVideoTag]:
        """Tag every verified artist @mentioned in the comment body.

        Mentions of unknown users or of artists that are not verified are
        ignored. The first tag created is stored on ``comment.artist_tag``.

        Returns:
            Tags created, possibly empty.
        """
        tags: list[ArtistVideoTag] = []
        for name in detect_mentions(comment.body):
            artist = self.find_verified_artist(name)
            if artist is None:
                continue
            tag = ArtistVideoTag(
                post_id=comment.post_id,
                artist_id=artist.id,
                user_id=comment.user_id,
                comment_id=comment.id,
            )
            self.session.add(tag)
            tags.append(tag)

        if not tags:
            return tags

        self.session.flush()
        comment.artist_tag = tags[0].id
        self.session.commit()
        logger.info(
            "Comment %s tagged %d artist(s) on post %s",
            comment.id,
            len(tags),
            comment.post_id,
        )
        return tags

    def find_verified_artist(self, username: str) -> Profile | None:
        """Look up a verified artist by username, ignoring case."""
        return self.session.execute(
            select(Profile).where(
                func.lower(Profile.username) == username.lower(),
                Profile.account_type == ROLE_ARTIST,
                Profile.verified_artist.is_(True),
            )
        ).scalar_one_or_none()

    def list_for_post(self, post_id: str) -> list[ArtistVideoTag]:
        """Return a post's artist tags, newest first."""
        result = self.session.execute(
            select(ArtistVideoTag)
            .where(ArtistVideoTag.post_id == post_id)
            .order_by(ArtistVideoTag.created_at.desc())
        )
        return list(result.scalars())

    def set_status(self, tag_id: str, status: str, artist_id: str) -> ArtistVideoTag:
        """Record the tagged artist's answer to a tag.

        Raises:
            BadRequest: If ``status`` is not ``confirmed`` or ``denied``
            NotFound: If the tag does not exist or names another artist
        """
        if status not in (TAG_CONFIRMED, TAG_DENIED):
            raise BadRequest("Status must be 'confirmed' or 'denied'")

        tag = self.session.get(ArtistVideoTag, tag_id)
        if tag is None or tag.artist_id != artist_id:
            raise NotFound("Tag not found or you don't have permission to update it")

        tag.status = status
        self.session.commit()
        logger.info("Artist %s marked tag %s as %s", artist_id, tag_id, status)
        return tag

    def list_verified_artists(self) -> list[Profile]:
        """Return verified artist profiles ordered by username."""
        result = self.session.execute(
            select(Profile)
            .where(Profile.account_type == ROLE_ARTIST, Profile.verified_artist.is_(True))
            .order_by(Profile.username)
        )
        return list(result.scalars())

    def list_artist_posts(self, artist_id: str) -> list[Post]:
        """Return posts the artist is tagged on, excluding denied tags, newest first."""
        result = self.session.execute(
            select(Post)
            .where(
                Post.id.in_(
                    select(ArtistVideoTag.post_id).where(
                        ArtistVideoTag.artist_id == artist_id,
                        ArtistVideoTag.status != TAG_DENIED,
                    )
                )
            )
            .order_by(Post.created_at.desc())
        )
        return list(result.scalars().unique())
