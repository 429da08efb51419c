"""Version 1 API endpoints."""

from .endpoints import (
    artists_router,
    moderator_router,
    notifications_router,
    posts_router,
    users_router,
)

__all__ = [
    "artists_router",
    "moderator_router",
    "notifications_router",
    "posts_router",
    "users_router",
]
