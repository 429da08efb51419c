"""Profile and karma Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class ProfileResponse(BaseModel):
    """Public view of a user profile."""

    id: str
    username: str
    account_type: str
    moderator: bool
    verified_artist: bool
    avatar_url: str | None = None
    role: str

    model_config = ConfigDict(from_attributes=True)


class KarmaResponse(BaseModel):
    """A user's accumulated karma."""

    user_id: str
    karma: int
    correct_ids: int


class LeaderboardEntry(BaseModel):
    """One ranked row of the karma leaderboard."""

    user_id: str
    username: str
    avatar_url: str | None = None
    account_type: str
    moderator: bool
    score: int
    correct_ids: int


class UserStats(BaseModel):
    """Identification counts over the posts a user submitted."""

    user_id: str
    total_ids: int
    confirmed_ids: int
