"""Notification Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NotificationResponse(BaseModel):
    """Schema for a notification in the user's feed."""

    id: str
    user_id: str
    triggered_by_user_id: str
    post_id: str
    comment_id: str | None
    type: str
    message: str
    read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UnreadCount(BaseModel):
    """Number of unread notifications."""

    count: int
