"""Park-related Pydantic schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from park_locator.models import ParkStatus


class ParkCreate(BaseModel):
    """Schema for submitting a new park."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str | None = Field(None, max_length=500)


class ParkResponse(BaseModel):
    """Schema for park information returned by the API."""

    id: uuid.UUID
    name: str
    description: str | None
    latitude: float
    longitude: float
    address: str | None
    status: ParkStatus
    created_at: datetime
    created_by: str
    upvotes: int
    downvotes: int

    model_config = ConfigDict(from_attributes=True)


class ParkStatusUpdate(BaseModel):
    """Admin override of a park's moderation status."""

    status: ParkStatus
