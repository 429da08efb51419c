"""Verification and moderation Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommunityVerifyRequest(BaseModel):
    """Owner's choice of the comment that identifies the track."""

    comment_id: str = Field(..., min_length=1, description="Accepted comment ID")


class ModeratorConfirmRequest(BaseModel):
    """Optional moderator override of the owner's selected comment."""

    comment_id: str | None = Field(None, description="Comment to confirm instead")


class WorkflowResult(BaseModel):
    """Outcome of a moderator transition."""

    success: bool


class ModeratorActionResponse(BaseModel):
    """Audit log entry."""

    id: str
    post_id: str
    moderator_id: str
    action: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
