# src/dubhub/api/v1/endpoints/posts.py
"""Post and comment endpoints, including the owner's community verification."""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from dubhub.api.v1.dependencies import (
    ArtistTagServiceDep,
    CurrentActorDep,
    SessionDep,
    WorkflowDep,
)
from dubhub.core.settings import settings
from dubhub.models import ArtistVideoTag, Comment, Post
from dubhub.repositories.post_repo import PostRepository
from dubhub.schemas.artist_tag import ArtistTagResponse
from dubhub.schemas.comment import CommentCreate, CommentResponse
from dubhub.schemas.moderation import CommunityVerifyRequest
from dubhub.schemas.post import PostCreate, PostResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=list[PostResponse])
async def list_posts(
    db: SessionDep,
    limit: int = Query(settings.default_page_size, ge=1, le=100),
    offset: int = Query(0, ge=0),
    genre: str | None = Query(None, description="Filter by genre; 'all' disables the filter"),
) -> list[Post]:
    """List the feed, newest first."""
    return PostRepository(db).list_posts(limit=limit, offset=offset, genre=genre)


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: PostCreate,
    actor: CurrentActorDep,
    db: SessionDep,
) -> Post:
    """Submit a new clip; it starts out unverified."""
    post = PostRepository(db).create_post(user_id=actor.user_id, **payload.model_dump())
    logger.info("Post %s created by %s", post.id, actor.user_id)
    return post


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str, db: SessionDep) -> Post:
    """Get a specific post by ID."""
    post = PostRepository(db).get_post(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: str, db: SessionDep) -> list[Comment]:
    """List the candidate identifications on a post."""
    repo = PostRepository(db)
    if repo.get_post(post_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return repo.list_comments(post_id)


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    payload: CommentCreate,
    actor: CurrentActorDep,
    db: SessionDep,
    tagger: ArtistTagServiceDep,
) -> Comment:
    """Comment on a post with a candidate track identification.

    @mentions of verified artists create pending artist tags.
    """
    comment = PostRepository(db).create_comment(
        post_id=post_id,
        user_id=actor.user_id,
        body=payload.body,
    )
    tagger.tag_mentions(comment)
    return comment


@router.get("/{post_id}/artist-tags", response_model=list[ArtistTagResponse])
async def list_artist_tags(
    post_id: str,
    db: SessionDep,
    tagger: ArtistTagServiceDep,
) -> list[ArtistVideoTag]:
    """Artists tagged on a post, newest first."""
    if PostRepository(db).get_post(post_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return tagger.list_for_post(post_id)


@router.post("/{post_id}/community-verify", response_model=PostResponse)
async def community_verify(
    post_id: str,
    payload: CommunityVerifyRequest,
    actor: CurrentActorDep,
    workflow: WorkflowDep,
) -> Post:
    """Owner accepts a comment's identification and sends it to moderators."""
    return workflow.submit_for_community_verification(post_id, payload.comment_id, actor)
