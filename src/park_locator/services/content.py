"""Photos, comments and tags attached to parks.

Each child row is gated individually by the access policy. Listing the
children of a park only requires that the park exists.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from park_locator.core.errors import Unauthorized
from park_locator.core.security import Caller
from park_locator.db.session import unit_of_work
from park_locator.models import ParkComment, ParkPhoto, ParkTag
from park_locator.services.parks import get_existing_park, require_readable
from park_locator.services.policy import Operation, can_write, visible

logger = logging.getLogger(__name__)


def _insert(db: Session, caller: Caller, row: ParkPhoto | ParkComment | ParkTag) -> None:
    if not can_write(caller, row, Operation.INSERT):
        raise Unauthorized("Sign in to contribute", anonymous=not caller.is_authenticated)
    with unit_of_work(db):
        get_existing_park(db, row.park_id)
        db.add(row)


def _update(caller: Caller, row: ParkPhoto | ParkComment, **values: bool) -> None:
    if not can_write(caller, row, Operation.UPDATE):
        raise Unauthorized("Admin access required", anonymous=not caller.is_authenticated)
    for key, value in values.items():
        setattr(row, key, value)


# Photos

def create_photo(db: Session, caller: Caller, park_id: uuid.UUID, url: str) -> ParkPhoto:
    """Attach a photo reference; it stays private to the uploader until approved."""
    photo = ParkPhoto(park_id=park_id, url=url, uploaded_by=caller.user_id, is_approved=False)
    _insert(db, caller, photo)
    return photo


def list_photos(db: Session, caller: Caller, park_id: uuid.UUID) -> list[ParkPhoto]:
    get_existing_park(db, park_id)
    rows = db.execute(
        select(ParkPhoto).where(ParkPhoto.park_id == park_id).order_by(ParkPhoto.created_at)
    ).scalars()
    return visible(caller, list(rows))


def get_photo(db: Session, caller: Caller, photo_id: uuid.UUID) -> ParkPhoto:
    return require_readable(caller, db.get(ParkPhoto, photo_id), "photo", photo_id)


def set_photo_approval(
    db: Session, caller: Caller, photo_id: uuid.UUID, is_approved: bool
) -> ParkPhoto:
    """Approve or withdraw a photo. Admin only."""
    with unit_of_work(db):
        photo = require_readable(caller, db.get(ParkPhoto, photo_id), "photo", photo_id)
        _update(caller, photo, is_approved=is_approved)
    logger.info("Photo %s approval set to %s by %s", photo_id, is_approved, caller.user_id)
    return photo


# Comments

def create_comment(db: Session, caller: Caller, park_id: uuid.UUID, content: str) -> ParkComment:
    comment = ParkComment(park_id=park_id, user_id=caller.user_id, content=content)
    _insert(db, caller, comment)
    return comment


def list_comments(db: Session, caller: Caller, park_id: uuid.UUID) -> list[ParkComment]:
    get_existing_park(db, park_id)
    rows = db.execute(
        select(ParkComment)
        .where(ParkComment.park_id == park_id)
        .order_by(ParkComment.created_at)
    ).scalars()
    return visible(caller, list(rows))


def get_comment(db: Session, caller: Caller, comment_id: uuid.UUID) -> ParkComment:
    return require_readable(caller, db.get(ParkComment, comment_id), "comment", comment_id)


def set_comment_reported(
    db: Session, caller: Caller, comment_id: uuid.UUID, is_reported: bool
) -> ParkComment:
    """Hide or restore a comment. Admin only."""
    with unit_of_work(db):
        comment = require_readable(caller, db.get(ParkComment, comment_id), "comment", comment_id)
        _update(caller, comment, is_reported=is_reported)
    logger.info("Comment %s reported flag set to %s by %s", comment_id, is_reported, caller.user_id)
    return comment


# Tags

def create_tag(db: Session, caller: Caller, park_id: uuid.UUID, tag: str) -> ParkTag:
    row = ParkTag(park_id=park_id, tag=tag)
    _insert(db, caller, row)
    return row


def list_tags(db: Session, caller: Caller, park_id: uuid.UUID) -> list[ParkTag]:
    get_existing_park(db, park_id)
    rows = db.execute(
        select(ParkTag).where(ParkTag.park_id == park_id).order_by(ParkTag.tag)
    ).scalars()
    return visible(caller, list(rows))
