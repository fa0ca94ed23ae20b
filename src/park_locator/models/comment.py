# src/park_locator/models/comment.py
"""Comments left on parks."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from park_locator.db.session import Base
from park_locator.db.time import utcnow

if TYPE_CHECKING:
    from .park import Park


class ParkComment(Base):
    """User comment on a park. Reported comments are hidden from the public."""

    __tablename__ = "park_comment"
    __table_args__ = (Index("ix_park_comment_park_id", "park_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    park_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("park.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    is_reported: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    park: Mapped[Park] = relationship(back_populates="comments")
