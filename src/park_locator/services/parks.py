"""Service-level helpers for park submissions."""

from __future__ import annotations

import logging
import uuid
from typing import TypeVar

from sqlalchemy import Select, and_, or_, select
from sqlalchemy.orm import Session

from park_locator.core.errors import NotFoundOrHidden, Unauthorized, UnknownSubmission
from park_locator.core.security import Caller
from park_locator.db.session import unit_of_work
from park_locator.models import Park, ParkStatus
from park_locator.services.policy import Operation, can_read, can_write

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SCAN_BATCH = 200


def _require(caller: Caller, row: object, operation: Operation, detail: str) -> None:
    if not can_write(caller, row, operation):
        raise Unauthorized(detail, anonymous=not caller.is_authenticated)


def create_park(
    db: Session,
    caller: Caller,
    *,
    name: str,
    latitude: float,
    longitude: float,
    description: str | None = None,
    address: str | None = None,
) -> Park:
    """Submit a new park owned by ``caller``.

    New parks always start pending with empty tallies, whatever the caller.

    Raises:
        Unauthorized: If the caller is anonymous.
    """
    park = Park(
        name=name,
        description=description,
        latitude=latitude,
        longitude=longitude,
        address=address,
        created_by=caller.user_id,
        status=ParkStatus.PENDING,
        upvotes=0,
        downvotes=0,
    )
    _require(caller, park, Operation.INSERT, "Sign in to submit a park")

    with unit_of_work(db):
        db.add(park)
    logger.info("Park %s submitted by %s", park.id, caller.user_id)
    return park


def require_readable(caller: Caller, row: T | None, kind: str, row_id: uuid.UUID) -> T:
    """Return ``row`` if the caller may see it.

    Missing and hidden rows raise the same error, so write paths checked
    afterwards never reveal that a hidden row exists.
    """
    if row is None or not can_read(caller, row):
        raise NotFoundOrHidden(kind, row_id)
    return row


def get_park(db: Session, caller: Caller, park_id: uuid.UUID) -> Park:
    """Return a park the caller may read.

    Raises:
        NotFoundOrHidden: If the park does not exist or is hidden from the caller.
    """
    return require_readable(caller, db.get(Park, park_id), "park", park_id)


def get_existing_park(db: Session, park_id: uuid.UUID) -> Park:
    """Return a park regardless of visibility, for child-row operations."""
    park = db.get(Park, park_id)
    if park is None:
        raise UnknownSubmission(park_id)
    return park


def _older_than(query: Select[tuple[Park]], anchor: Park) -> Select[tuple[Park]]:
    return query.where(
        or_(
            Park.created_at < anchor.created_at,
            and_(Park.created_at == anchor.created_at, Park.id < anchor.id),
        )
    )


def list_visible_parks(
    db: Session,
    caller: Caller,
    *,
    status: ParkStatus | None = None,
    limit: int = 50,
    before: uuid.UUID | None = None,
) -> list[Park]:
    """List parks visible to ``caller``, newest first.

    Args:
        db: Database session
        caller: Identity the listing is filtered for
        status: Optional status filter applied before visibility
        limit: Maximum number of parks to return
        before: Return parks listed after this park ID (the last ID of the
            previous page)

    Raises:
        NotFoundOrHidden: If ``before`` is not a park the caller can see.
    """
    query = select(Park).order_by(Park.created_at.desc(), Park.id.desc())
    if status is not None:
        query = query.where(Park.status == status)

    cursor = None
    if before is not None:
        cursor = require_readable(caller, db.get(Park, before), "park", before)

    # Scan in batches so hidden rows never force the whole table into memory.
    batch_size = max(limit, _SCAN_BATCH)
    visible: list[Park] = []
    while len(visible) < limit:
        page_query = query if cursor is None else _older_than(query, cursor)
        rows = list(db.execute(page_query.limit(batch_size)).scalars())
        for park in rows:
            if can_read(caller, park):
                visible.append(park)
                if len(visible) >= limit:
                    break
        if len(rows) < batch_size:
            break
        cursor = rows[-1]
    return visible


def set_park_status(db: Session, caller: Caller, park_id: uuid.UUID, status: ParkStatus) -> Park:
    """Admin override of a park's moderation status.

    This is the only path that can move a park out of a terminal state.
    """
    with unit_of_work(db):
        park = db.execute(
            select(Park)
            .where(Park.id == park_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()
        park = require_readable(caller, park, "park", park_id)
        _require(caller, park, Operation.UPDATE, "Admin access required")

        if park.status != status:
            logger.warning(
                "Admin %s overrode park %s status %s -> %s",
                caller.user_id,
                park_id,
                park.status.value,
                status.value,
            )
            park.status = status
    return park


def delete_park(db: Session, caller: Caller, park_id: uuid.UUID) -> None:
    """Delete a park and, by cascade, its votes, photos, comments and tags."""
    with unit_of_work(db):
        park = require_readable(caller, db.get(Park, park_id), "park", park_id)
        _require(caller, park, Operation.DELETE, "Admin access required")
        db.delete(park)
    logger.warning("Admin %s deleted park %s", caller.user_id, park_id)
