"""Schemas for photos, comments and tags."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PhotoCreate(BaseModel):
    """Reference to a photo already uploaded to object storage."""

    url: str = Field(..., min_length=1, max_length=2048)


class PhotoResponse(BaseModel):
    id: uuid.UUID
    park_id: uuid.UUID
    url: str
    uploaded_by: str
    created_at: datetime
    is_approved: bool

    model_config = ConfigDict(from_attributes=True)


class PhotoApproval(BaseModel):
    is_approved: bool


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


class CommentResponse(BaseModel):
    id: uuid.UUID
    park_id: uuid.UUID
    user_id: str
    content: str
    created_at: datetime
    is_reported: bool

    model_config = ConfigDict(from_attributes=True)


class CommentReport(BaseModel):
    is_reported: bool


class TagCreate(BaseModel):
    tag: str = Field(..., min_length=1, max_length=50)


class TagResponse(BaseModel):
    id: uuid.UUID
    park_id: uuid.UUID
    tag: str

    model_config = ConfigDict(from_attributes=True)
