# src/dubhub/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .artists import router as artists_router
from .moderator import router as moderator_router
from .notifications import router as notifications_router
from .posts import router as posts_router
from .users import router as users_router

__all__ = [
    "artists_router",
    "moderator_router",
    "notifications_router",
    "posts_router",
    "users_router",
]
