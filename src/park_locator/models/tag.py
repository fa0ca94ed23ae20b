# src/park_locator/models/tag.py
"""Free-text tags on parks."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from park_locator.db.session import Base

if TYPE_CHECKING:
    from .park import Park


class ParkTag(Base):
    """Unmoderated tag; always visible."""

    __tablename__ = "park_tag"
    __table_args__ = (Index("ix_park_tag_park_id", "park_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    park_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("park.id", ondelete="CASCADE"), nullable=False
    )
    tag: Mapped[str] = mapped_column(Text, nullable=False)

    park: Mapped[Park] = relationship(back_populates="tags")
