"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .artist_tag import ArtistTagResponse, ArtistTagStatusUpdate
from .comment import CommentCreate, CommentResponse
from .moderation import (
    CommunityVerifyRequest,
    ModeratorActionResponse,
    ModeratorConfirmRequest,
    WorkflowResult,
)
from .notification import NotificationResponse, UnreadCount
from .post import PendingVerificationResponse, PostCreate, PostResponse
from .user import KarmaResponse, LeaderboardEntry, ProfileResponse, UserStats

__all__ = [
    "ArtistTagResponse", "ArtistTagStatusUpdate",
    "CommentCreate", "CommentResponse",
    "CommunityVerifyRequest", "ModeratorActionResponse",
    "ModeratorConfirmRequest", "WorkflowResult",
    "NotificationResponse", "UnreadCount",
    "PendingVerificationResponse", "PostCreate", "PostResponse",
    "KarmaResponse", "LeaderboardEntry", "ProfileResponse", "UserStats",
]
