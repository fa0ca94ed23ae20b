"""Shared API dependencies for caller identity and error translation."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from park_locator.core.errors import (
    DuplicateVote,
    NotFoundOrHidden,
    ParkLocatorError,
    Unauthorized,
    UnknownSubmission,
)
from park_locator.core.security import Caller, InvalidToken, decode_caller
from park_locator.db.session import get_db
from park_locator.services.ledger import VoteLedger, get_vote_ledger

# Anonymous requests are allowed; the policy decides what they may see.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Caller:
    """Resolve the caller from an optional bearer token.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent

    Returns:
        The authenticated caller, or an anonymous one when no token is present

    Raises:
        HTTPException: If a token is present but invalid
    """
    if credentials is None:
        return Caller.anonymous()
    try:
        return decode_caller(credentials.credentials)
    except InvalidToken as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from err


def get_vote_ledger_dep() -> VoteLedger:
    """Return the vote ledger service."""
    return get_vote_ledger()


CallerDep = Annotated[Caller, Depends(get_caller)]
VoteLedgerDep = Annotated[VoteLedger, Depends(get_vote_ledger_dep)]


def to_http_exception(err: ParkLocatorError) -> HTTPException:
    """Translate a domain error into the HTTP error surfaced to clients."""
    if isinstance(err, DuplicateVote):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="You have already voted on this park",
        )
    if isinstance(err, UnknownSubmission):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Park not found")
    if isinstance(err, NotFoundOrHidden):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))
    if isinstance(err, Unauthorized):
        if err.anonymous:
            return HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=err.detail,
                headers={"WWW-Authenticate": "Bearer"},
            )
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=err.detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err))
