"""Verified artist directory and artist tag endpoints."""

from fastapi import APIRouter, HTTPException, status

from dubhub.api.v1.dependencies import ArtistTagServiceDep, CurrentActorDep, SessionDep
from dubhub.models import ArtistVideoTag, Post, Profile
from dubhub.models.profile import ROLE_ARTIST
from dubhub.schemas.artist_tag import ArtistTagResponse, ArtistTagStatusUpdate
from dubhub.schemas.post import PostResponse
from dubhub.schemas.user import ProfileResponse

router = APIRouter(tags=["artists"])


@router.get("/artists/verified", response_model=list[ProfileResponse])
async def list_verified_artists(tagger: ArtistTagServiceDep) -> list[Profile]:
    """Verified artists, alphabetically."""
    return tagger.list_verified_artists()


@router.get("/artists/{artist_id}/posts", response_model=list[PostResponse])
async def get_artist_posts(
    artist_id: str,
    db: SessionDep,
    tagger: ArtistTagServiceDep,
) -> list[Post]:
    """Posts an artist is tagged on, unless the artist denied the tag."""
    artist = db.get(Profile, artist_id)
    if artist is None or artist.account_type != ROLE_ARTIST:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artist not found")
    return tagger.list_artist_posts(artist_id)


@router.post("/artist-tags/{tag_id}/status", response_model=ArtistTagResponse)
async def update_artist_tag_status(
    tag_id: str,
    payload: ArtistTagStatusUpdate,
    actor: CurrentActorDep,
    tagger: ArtistTagServiceDep,
) -> ArtistVideoTag:
    """The tagged artist confirms or denies a tag."""
    return tagger.set_status(tag_id, payload.status, actor.user_id)
