"""Profile, karma and leaderboard endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from dubhub.api.v1.dependencies import CurrentProfileDep, ReputationLedgerDep, SessionDep
from dubhub.core.settings import settings
from dubhub.models import Post, Profile
from dubhub.models.profile import ROLE_ARTIST, ROLE_USER
from dubhub.repositories.post_repo import PostRepository
from dubhub.schemas.post import PostResponse
from dubhub.schemas.user import KarmaResponse, LeaderboardEntry, ProfileResponse, UserStats

router = APIRouter(tags=["users"])


@router.get("/users/me", response_model=ProfileResponse)
async def get_me(profile: CurrentProfileDep) -> Profile:
    """Return the caller's profile."""
    return profile


@router.get("/users/{user_id}/karma", response_model=KarmaResponse)
async def get_karma(user_id: str, ledger: ReputationLedgerDep) -> KarmaResponse:
    """Return a user's karma; users never credited have zero."""
    karma = ledger.get(user_id)
    return KarmaResponse(
        user_id=user_id,
        karma=karma.score if karma else 0,
        correct_ids=karma.correct_ids if karma else 0,
    )


@router.get("/users/{user_id}/stats", response_model=UserStats)
async def get_user_stats(user_id: str, db: SessionDep) -> UserStats:
    """Count the clips a user submitted and how many are identified."""
    if db.get(Profile, user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    total, confirmed = PostRepository(db).count_user_posts(user_id)
    return UserStats(user_id=user_id, total_ids=total, confirmed_ids=confirmed)


@router.get("/users/{user_id}/posts", response_model=list[PostResponse])
async def get_user_posts(user_id: str, db: SessionDep) -> list[Post]:
    """List the clips a user has submitted."""
    if db.get(Profile, user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return PostRepository(db).list_user_posts(user_id)


@router.get("/leaderboard/users", response_model=list[LeaderboardEntry])
async def user_leaderboard(
    ledger: ReputationLedgerDep,
    limit: int = Query(settings.leaderboard_size, ge=1, le=200),
) -> list[dict[str, object]]:
    """Top identifiers among regular users."""
    return ledger.leaderboard(ROLE_USER, limit=limit)


@router.get("/leaderboard/artists", response_model=list[LeaderboardEntry])
async def artist_leaderboard(
    ledger: ReputationLedgerDep,
    limit: int = Query(settings.leaderboard_size, ge=1, le=200),
) -> list[dict[str, object]]:
    """Top identifiers among artists."""
    return ledger.leaderboard(ROLE_ARTIST, limit=limit)
