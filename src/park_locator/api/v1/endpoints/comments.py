# src/park_locator/api/v1/endpoints/comments.py
"""Comment endpoints for the Park Locator API."""

import uuid

from fastapi import APIRouter, status

from park_locator.api.v1.dependencies import CallerDep, SessionDep, to_http_exception
from park_locator.core.errors import ParkLocatorError
from park_locator.models import ParkComment
from park_locator.schemas.content import CommentCreate, CommentReport, CommentResponse
from park_locator.services import content

router = APIRouter(tags=["comments"])


@router.post(
    "/parks/{park_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    park_id: uuid.UUID, payload: CommentCreate, caller: CallerDep, db: SessionDep
) -> ParkComment:
    try:
        return content.create_comment(db, caller, park_id, payload.content)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.get("/parks/{park_id}/comments", response_model=list[CommentResponse])
def list_comments(park_id: uuid.UUID, caller: CallerDep, db: SessionDep) -> list[ParkComment]:
    """List comments on a park; reported ones are only shown to their author."""
    try:
        return content.list_comments(db, caller, park_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.get("/comments/{comment_id}", response_model=CommentResponse)
def get_comment(comment_id: uuid.UUID, caller: CallerDep, db: SessionDep) -> ParkComment:
    try:
        return content.get_comment(db, caller, comment_id)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err


@router.put("/comments/{comment_id}/reported", response_model=CommentResponse)
def set_comment_reported(
    comment_id: uuid.UUID, payload: CommentReport, caller: CallerDep, db: SessionDep
) -> ParkComment:
    """Hide or restore a comment (admin only)."""
    try:
        return content.set_comment_reported(db, caller, comment_id, payload.is_reported)
    except ParkLocatorError as err:
        raise to_http_exception(err) from err
