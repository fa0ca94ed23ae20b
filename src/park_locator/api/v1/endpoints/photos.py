# src/park_locator/api/v1/endpoints/photos.py
"""Photo endpoints for the Park Locator API."""

import uuid

from fastapi import APIRouter, status

from park_locator.api.v1.dependencies import CallerDep, SessionDep, to_http_exception
from park_locator.core.errors import ParkLocatorError
from park_locator.models import ParkPhoto
from park_locator.schemas.content import PhotoApproval, PhotoCreate, PhotoResponse
from park_locator.services import content

router = APIRouter(tags=["photos"])


@router.post(
    "/parks/{park_id}/photos",
    response_model=PhotoResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_photo(
    park_id: uuid.UUID, payload: PhotoCreate, caller: CallerDep, db: SessionDep
) -> ParkPhoto:
    """Attach a photo URL to a park; hidden from others until approved."""
    try:
        return content.create_photo(db, caller, park_id, payload.url)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.get("/parks/{park_id}/photos", response_model=list[PhotoResponse])
def list_photos(park_id: uuid.UUID, caller: CallerDep, db: SessionDep) -> list[ParkPhoto]:
    try:
        return content.list_photos(db, caller, park_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.get("/photos/{photo_id}", response_model=PhotoResponse)
def get_photo(photo_id: uuid.UUID, caller: CallerDep, db: SessionDep) -> ParkPhoto:
    try:
        return content.get_photo(db, caller, photo_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.put("/photos/{photo_id}/approval", response_model=PhotoResponse)
def set_photo_approval(
    photo_id: uuid.UUID, payload: PhotoApproval, caller: CallerDep, db: SessionDep
) -> ParkPhoto:
    """Approve or withdraw a photo (admin only)."""
    try:
        return content.set_photo_approval(db, caller, photo_id, payload.is_approved)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err
