# src/park_locator/api/v1/endpoints/votes.py
"""Vote-related endpoints for the Park Locator API."""

import uuid

from fastapi import APIRouter, status

from park_locator.api.v1.dependencies import (
    CallerDep,
    SessionDep,
    VoteLedgerDep,
    to_http_exception,
)
from park_locator.core.errors import ParkLocatorError
from park_locator.models import ParkVote
from park_locator.schemas.vote import MyVoteResponse, VoteCreate, VoteResponse

router = APIRouter(prefix="/parks", tags=["votes"])


@router.post(
    "/{park_id}/votes",
    response_model=VoteResponse,
    status_code=status.HTTP_201_CREATED,
)
def cast_vote(
    park_id: uuid.UUID,
    vote_data: VoteCreate,
    caller: CallerDep,
    db: SessionDep,
    ledger: VoteLedgerDep,
) -> ParkVote:
    """Cast the caller's single vote on a park.

    Returns 409 if the caller has already voted on this park.
    """
    try:
        return ledger.cast_vote(db, caller, park_id, vote_data.vote_type)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.get("/{park_id}/votes", response_model=list[VoteResponse])
def list_votes(
    park_id: uuid.UUID,
    caller: CallerDep,
    db: SessionDep,
    ledger: VoteLedgerDep,
) -> list[ParkVote]:
    """List the votes on a park visible to the caller."""
    try:
        return ledger.list_votes(db, caller, park_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.get("/{park_id}/votes/mine", response_model=MyVoteResponse)
def get_my_vote(
    park_id: uuid.UUID,
    caller: CallerDep,
    db: SessionDep,
    ledger: VoteLedgerDep,
) -> MyVoteResponse:
    """Get the current user's vote on a specific park."""
    try:
        vote = ledger.get_my_vote(db, caller, park_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err
    return MyVoteResponse(vote_type=None if vote is None else vote.vote_type)
