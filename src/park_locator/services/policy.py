"""Row-level access policy.

A single pure evaluator deciding, from the caller and the row alone, whether a
read or write is allowed. It only uses attribute access so any storage
backend can feed it rows.
"""

from __future__ import annotations

import enum
from typing import Any

from park_locator.core.security import Caller
from park_locator.models import Park, ParkComment, ParkPhoto, ParkStatus, ParkTag, ParkVote


class Operation(str, enum.Enum):
    """Write operations a caller may attempt on a row."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class Role(str, enum.Enum):
    """Caller's role relative to a particular row."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    OWNER = "owner"
    ADMIN = "admin"


def owner_of(row: Any) -> str | None:
    """Return the identity that owns ``row``, if the row kind has one."""
    if isinstance(row, Park):
        return row.created_by
    if isinstance(row, ParkPhoto):
        return row.uploaded_by
    if isinstance(row, ParkComment | ParkVote):
        return row.user_id
    return None


def role_for(caller: Caller, row: Any) -> Role:
    """Classify the caller against ``row``."""
    if caller.is_admin:
        return Role.ADMIN
    if not caller.is_authenticated:
        return Role.ANONYMOUS
    if caller.owns(owner_of(row)):
        return Role.OWNER
    return Role.AUTHENTICATED


def can_read(caller: Caller, row: Any) -> bool:
    """Return True if ``caller`` may see ``row``."""
    role = role_for(caller, row)
    if role is Role.ADMIN:
        return True

    if isinstance(row, Park):
        if row.status == ParkStatus.APPROVED:
            return True
        return role is Role.OWNER and row.status == ParkStatus.PENDING
    if isinstance(row, ParkPhoto):
        return bool(row.is_approved) or role is Role.OWNER
    if isinstance(row, ParkComment):
        return not row.is_reported or role is Role.OWNER
    if isinstance(row, ParkTag):
        return True
    if isinstance(row, ParkVote):
        return role is Role.OWNER
    raise TypeError(f"No read policy for {type(row).__name__}")


def can_write(caller: Caller, row: Any, operation: Operation) -> bool:
    """Return True if ``caller`` may perform ``operation`` on ``row``.

    For inserts ``row`` is the not-yet-persisted candidate.
    """
    if not isinstance(row, Park | ParkPhoto | ParkComment | ParkTag | ParkVote):
        raise TypeError(f"No write policy for {type(row).__name__}")

    role = role_for(caller, row)
    if role is Role.ADMIN:
        return True
    if operation is not Operation.INSERT or role is Role.ANONYMOUS:
        return False
    if isinstance(row, ParkVote):
        # Votes can only be recorded for the caller's own identity.
        return role is Role.OWNER
    return True


def visible(caller: Caller, rows: list[Any]) -> list[Any]:
    """Filter ``rows`` down to those ``caller`` may read."""
    return [row for row in rows if can_read(caller, row)]
