# src/park_locator/api/v1/endpoints/tags.py
"""Tag endpoints for the Park Locator API."""

import uuid

from fastapi import APIRouter, status

from park_locator.api.v1.dependencies import CallerDep, SessionDep, to_http_exception
from park_locator.core.errors import ParkLocatorError
from park_locator.models import ParkTag
from park_locator.schemas.content import TagCreate, TagResponse
from park_locator.services import content

router = APIRouter(prefix="/parks", tags=["tags"])


@router.post("/{park_id}/tags", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
def create_tag(
    park_id: uuid.UUID, payload: TagCreate, caller: CallerDep, db: SessionDep
) -> ParkTag:
    try:
        return content.create_tag(db, caller, park_id, payload.tag)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.get("/{park_id}/tags", response_model=list[TagResponse])
def list_tags(park_id: uuid.UUID, caller: CallerDep, db: SessionDep) -> list[ParkTag]:
    try:
        return content.list_tags(db, caller, park_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err
