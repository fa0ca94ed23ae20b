"""Vote tally aggregation."""

from __future__ import annotations

import uuid
from typing import NamedTuple

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from park_locator.models import Park, ParkVote


class Tally(NamedTuple):
    """Up and down vote counts for one park."""

    upvotes: int
    downvotes: int


def recompute(db: Session, park_id: uuid.UUID) -> Tally:
    """Count the ledger rows for ``park_id`` by direction."""
    upvotes, downvotes = db.execute(
        select(
            func.coalesce(func.sum(case((ParkVote.vote_type.is_(True), 1), else_=0)), 0),
            func.coalesce(func.sum(case((ParkVote.vote_type.is_(False), 1), else_=0)), 0),
        ).where(ParkVote.park_id == park_id)
    ).one()
    return Tally(int(upvotes), int(downvotes))


def apply_vote(park: Park, vote_type: bool) -> Tally:
    """Increment exactly one counter for an accepted vote.

    The caller must hold the park row lock for the current transaction.
    """
    if vote_type:
        park.upvotes += 1
    else:
        park.downvotes += 1
    return Tally(park.upvotes, park.downvotes)
