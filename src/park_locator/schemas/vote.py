"""Vote-related Pydantic schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class VoteCreate(BaseModel):
    """Schema for casting a vote."""

    vote_type: bool = Field(..., description="true for upvote, false for downvote")


class VoteResponse(BaseModel):
    """A single recorded vote."""

    id: uuid.UUID
    park_id: uuid.UUID
    user_id: str
    vote_type: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MyVoteResponse(BaseModel):
    """The caller's vote on a park, or null if they have not voted."""

    vote_type: bool | None = None
