# src/park_locator/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .comments import router as comments_router
from .parks import router as parks_router
from .photos import router as photos_router
from .tags import router as tags_router
from .votes import router as votes_router

__all__ = [
    "parks_router",
    "votes_router",
    "photos_router",
    "comments_router",
    "tags_router",
]
