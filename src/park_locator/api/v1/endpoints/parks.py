# src/park_locator/api/v1/endpoints/parks.py
"""Park submission endpoints for the Park Locator API."""

import uuid

from fastapi import APIRouter, Query, Response, status

from park_locator.api.v1.dependencies import (
    CallerDep,
    SessionDep,
    VoteLedgerDep,
    to_http_exception,
)
from park_locator.core.errors import ParkLocatorError
from park_locator.core.settings import settings
from park_locator.models import Park, ParkStatus
from park_locator.schemas.park import ParkCreate, ParkResponse, ParkStatusUpdate
from park_locator.services import parks as park_service

router = APIRouter(prefix="/parks", tags=["parks"])


@router.post("", response_model=ParkResponse, status_code=status.HTTP_201_CREATED)
def create_park(payload: ParkCreate, caller: CallerDep, db: SessionDep) -> Park:
    """Submit a new park for community moderation."""
    try:
        return park_service.create_park(db, caller, **payload.model_dump())
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.get("", response_model=list[ParkResponse])
def list_parks(
    caller: CallerDep,
    db: SessionDep,
    status_filter: ParkStatus | None = Query(None, alias="status"),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    before: uuid.UUID | None = Query(None, description="Return parks listed after this park ID"),
) -> list[Park]:
    """List the parks visible to the caller, newest first.

    Anonymous callers only ever receive approved parks; owners also see their
    own pending submissions; admins see everything. Pass the last ID of a
    page as ``before`` to fetch the next one.
    """
    try:
        return park_service.list_visible_parks(
            db, caller, status=status_filter, limit=limit, before=before
        )
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.get("/{park_id}", response_model=ParkResponse)
def get_park(park_id: uuid.UUID, caller: CallerDep, db: SessionDep) -> Park:
    """Get a specific park by ID."""
    try:
        return park_service.get_park(db, caller, park_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.put("/{park_id}/status", response_model=ParkResponse)
def set_park_status(
    park_id: uuid.UUID,
    payload: ParkStatusUpdate,
    caller: CallerDep,
    db: SessionDep,
) -> Park:
    """Override a park's moderation status (admin only)."""
    try:
        return park_service.set_park_status(db, caller, park_id, payload.status)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.post("/{park_id}/tally/resync", response_model=ParkResponse)
def resync_tally(
    park_id: uuid.UUID,
    caller: CallerDep,
    db: SessionDep,
    ledger: VoteLedgerDep,
) -> Park:
    """Rebuild a park's vote counters from the ledger (admin only)."""
    try:
        return ledger.resync(db, caller, park_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.delete("/{park_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_park(park_id: uuid.UUID, caller: CallerDep, db: SessionDep) -> Response:
    """Delete a park together with its votes, photos, comments and tags."""
    try:
        park_service.delete_park(db, caller, park_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)
