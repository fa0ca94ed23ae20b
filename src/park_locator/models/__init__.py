# src/park_locator/models/__init__.py
"""SQLAlchemy models for the Park Locator application."""

from .comment import ParkComment
from .park import Park, ParkStatus
from .photo import ParkPhoto
from .tag import ParkTag
from .vote import ParkVote

__all__ = [
    "Park", "ParkStatus",
    "ParkComment",
    "ParkPhoto",
    "ParkTag",
    "ParkVote",
]
