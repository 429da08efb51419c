"""Artist tag Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ArtistTagStatusUpdate(BaseModel):
    """Tagged artist's answer: ``confirmed`` or ``denied``."""

    status: str = Field(..., description="confirmed | denied")


class ArtistTagResponse(BaseModel):
    """An artist mention on a post."""

    id: str
    post_id: str
    artist_id: str
    user_id: str
    comment_id: str
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
