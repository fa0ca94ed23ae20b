# src/park_locator/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    comments_router,
    parks_router,
    photos_router,
    tags_router,
    votes_router,
)

__all__ = [
    "parks_router",
    "votes_router",
    "photos_router",
    "comments_router",
    "tags_router",
]
