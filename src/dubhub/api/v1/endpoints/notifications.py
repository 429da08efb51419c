"""Notification feed endpoints for the authenticated user."""

from fastapi import APIRouter, HTTPException, Query, status

from dubhub.api.v1.dependencies import CurrentActorDep, NotificationServiceDep
from dubhub.models import Notification
from dubhub.schemas.notification import NotificationResponse, UnreadCount

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=list[NotificationResponse])
async def list_notifications(
    actor: CurrentActorDep,
    notifier: NotificationServiceDep,
    limit: int = Query(100, ge=1, le=200),
) -> list[Notification]:
    """Return the caller's notifications, newest first."""
    return notifier.list_for_user(actor.user_id, limit=limit)


@router.get("/unread-count", response_model=UnreadCount)
async def unread_count(actor: CurrentActorDep, notifier: NotificationServiceDep) -> UnreadCount:
    """Count the caller's unread notifications."""
    return UnreadCount(count=notifier.unread_count(actor.user_id))


@router.get("/moderator-unread-count", response_model=UnreadCount)
async def moderator_unread_count(
    actor: CurrentActorDep,
    notifier: NotificationServiceDep,
) -> UnreadCount:
    """Count unread review-queue notifications for a moderator."""
    return UnreadCount(count=notifier.moderator_unread_count(actor.user_id))


@router.patch("/mark-all-read", response_model=UnreadCount)
async def mark_all_read(actor: CurrentActorDep, notifier: NotificationServiceDep) -> UnreadCount:
    """Mark every notification read; returns how many changed."""
    return UnreadCount(count=notifier.mark_all_read(actor.user_id))


@router.patch("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_read(
    notification_id: str,
    actor: CurrentActorDep,
    notifier: NotificationServiceDep,
) -> None:
    """Mark one of the caller's notifications as read."""
    if not notifier.mark_read(notification_id, actor.user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found",
        )
