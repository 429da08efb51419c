"""Moderator review-queue endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query

from dubhub.api.v1.dependencies import CurrentActorDep, SessionDep, WorkflowDep
from dubhub.models import ModeratorAction
from dubhub.schemas.comment import CommentResponse
from dubhub.schemas.moderation import (
    ModeratorActionResponse,
    ModeratorConfirmRequest,
    WorkflowResult,
)
from dubhub.schemas.post import PendingVerificationResponse, PostResponse
from dubhub.schemas.user import ProfileResponse
from dubhub.services.policy import require_moderator

router = APIRouter(prefix="/moderator", tags=["moderator"])


@router.get("/pending-verifications", response_model=list[PendingVerificationResponse])
async def get_pending_verifications(
    actor: CurrentActorDep,
    workflow: WorkflowDep,
) -> list[PendingVerificationResponse]:
    """Posts awaiting moderator review, with owner and candidate comment."""
    require_moderator(actor)
    results: list[PendingVerificationResponse] = []
    for entry in workflow.list_pending_verifications():
        post = entry.post
        results.append(
            PendingVerificationResponse(
                **PostResponse.model_validate(post).model_dump(),
                owner=ProfileResponse.model_validate(post.owner) if post.owner else None,
                verified_comment=(
                    CommentResponse.model_validate(entry.comment) if entry.comment else None
                ),
            )
        )
    return results


@router.post("/confirm-verification/{post_id}", response_model=WorkflowResult)
async def confirm_verification(
    post_id: str,
    actor: CurrentActorDep,
    workflow: WorkflowDep,
    payload: ModeratorConfirmRequest | None = None,
) -> dict[str, bool]:
    """Confirm the owner's pick, or a moderator-selected comment instead."""
    comment_id = payload.comment_id if payload else None
    return workflow.moderator_confirm(post_id, actor, comment_id=comment_id)


@router.post("/reopen-verification/{post_id}", response_model=WorkflowResult)
async def reopen_verification(
    post_id: str,
    actor: CurrentActorDep,
    workflow: WorkflowDep,
) -> dict[str, bool]:
    """Reject the current identification and reset the post to unverified."""
    return workflow.moderator_reopen(post_id, actor)


@router.get("/actions", response_model=list[ModeratorActionResponse])
async def list_moderator_actions(
    actor: CurrentActorDep,
    db: SessionDep,
    post_id: str | None = Query(None, description="Restrict to one post"),
    limit: int = Query(50, ge=1, le=200),
) -> list[ModeratorAction]:
    """Audit log of moderator decisions, newest first."""
    require_moderator(actor)
    query = db.query(ModeratorAction)
    if post_id is not None:
        query = query.filter(ModeratorAction.post_id == post_id)
    return query.order_by(ModeratorAction.created_at.desc()).limit(limit).all()
