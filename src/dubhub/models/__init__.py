# src/dubhub/models/__init__.py
"""SQLAlchemy models for the DubHub application."""

from .artist_tag import ArtistVideoTag
from .comment import Comment
from .moderation import ModeratorAction
from .notification import Notification
from .post import Post
from .profile import Profile
from .reputation import UserKarma

__all__ = [
    "ArtistVideoTag",
    "Comment",
    "ModeratorAction",
    "Notification",
    "Post",
    "Profile",
    "UserKarma",
]
