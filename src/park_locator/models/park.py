# src/park_locator/models/park.py
"""SQLAlchemy model for park submissions."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, Enum, Float, Index, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from park_locator.db.session import Base
from park_locator.db.time import utcnow

if TYPE_CHECKING:
    from .comment import ParkComment
    from .photo import ParkPhoto
    from .tag import ParkTag
    from .vote import ParkVote


class ParkStatus(str, enum.Enum):
    """Moderation states of a submission. Approved and rejected are terminal."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not ParkStatus.PENDING


class Park(Base):
    """Candidate park submitted by a user and moderated by community votes."""

    __tablename__ = "park"
    __table_args__ = (
        CheckConstraint("upvotes >= 0", name="ck_park_upvotes_non_negative"),
        CheckConstraint("downvotes >= 0", name="ck_park_downvotes_non_negative"),
        Index("ix_park_status", "status"),
        Index("ix_park_created_by", "created_by"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[ParkStatus] = mapped_column(
        Enum(
            ParkStatus,
            name="park_status",
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        default=ParkStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    # Opaque identity supplied by the identity provider.
    created_by: Mapped[str] = mapped_column(Text, nullable=False)

    # Denormalized tallies, updated in the same transaction as the vote insert.
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    votes: Mapped[list[ParkVote]] = relationship(
        back_populates="park", cascade="all, delete-orphan", passive_deletes=True
    )
    photos: Mapped[list[ParkPhoto]] = relationship(
        back_populates="park", cascade="all, delete-orphan", passive_deletes=True
    )
    comments: Mapped[list[ParkComment]] = relationship(
        back_populates="park", cascade="all, delete-orphan", passive_deletes=True
    )
    tags: Mapped[list[ParkTag]] = relationship(
        back_populates="park", cascade="all, delete-orphan", passive_deletes=True
    )
