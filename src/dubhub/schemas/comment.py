"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .user import ProfileResponse


class CommentCreate(BaseModel):
    """Schema for posting a candidate track identification.

    Verified artists are tagged by @username in the body.
    """

    body: str = Field(..., min_length=1, max_length=2000, description="Comment text")

    @field_validator("body")
    @classmethod
    def _strip_body(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Comment body is required")
        return value


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: str
    post_id: str
    user_id: str
    body: str
    artist_tag: str | None
    created_at: datetime
    author: ProfileResponse | None = None

    model_config = ConfigDict(from_attributes=True)
