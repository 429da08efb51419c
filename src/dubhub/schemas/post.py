"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .comment import CommentResponse
from .user import ProfileResponse


class PostCreate(BaseModel):
    """Schema for submitting a new clip."""

    title: str = Field(..., min_length=1, max_length=200)
    video_url: str = Field(..., min_length=1, description="URL of the uploaded clip")
    genre: str | None = None
    description: str | None = None
    location: str | None = None
    dj_name: str | None = None


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: str
    user_id: str
    title: str
    video_url: str
    description: str | None
    genre: str | None
    dj_name: str | None
    location: str | None
    verification_status: str
    is_verified_community: bool
    verified_by_moderator: bool
    verified_comment_id: str | None
    verified_by: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PendingVerificationResponse(PostResponse):
    """A review-queue entry: the post, its owner and the candidate comment."""

    owner: ProfileResponse | None = None
    verified_comment: CommentResponse | None = None
