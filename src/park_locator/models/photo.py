# src/park_locator/models/photo.py
"""Photo references attached to parks."""

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


class ParkPhoto(Base):
    """Reference to an uploaded photo; the binary lives in object storage."""

    __tablename__ = "park_photo"
    __table_args__ = (Index("ix_park_photo_park_id", "park_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    park_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("park.id", ondelete="CASCADE"), nullable=False
    )
    url: Mapped[str] = mapped_column(Text, nullable=False)
    uploaded_by: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    # Set by admins only; not vote driven.
    is_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    park: Mapped[Park] = relationship(back_populates="photos")
