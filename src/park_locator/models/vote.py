# src/park_locator/models/vote.py
"""Models capturing voting interactions on parks."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from park_locator.db.session import Base
from park_locator.db.time import utcnow

if TYPE_CHECKING:
    from .park import Park


class ParkVote(Base):
    """Per-user vote on a park submission.

    Rows are insert-only. The unique constraint is the last line of defence
    against a voter voting twice on the same park.
    """

    __tablename__ = "park_vote"
    __table_args__ = (
        UniqueConstraint("park_id", "user_id", name="uq_park_vote_park_user"),
        Index("ix_park_vote_park_id", "park_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    park_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("park.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    # True = upvote, False = downvote.
    vote_type: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    park: Mapped[Park] = relationship(back_populates="votes")
