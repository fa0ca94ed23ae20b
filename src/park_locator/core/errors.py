"""Domain errors raised by the park locator services.

Services raise these; the API layer translates them to HTTP responses.
None of them are retried by the core.
"""

from __future__ import annotations


class ParkLocatorError(RuntimeError):
    """Base exception for all per-request domain failures."""


class DuplicateVote(ParkLocatorError):
    """Raised when a voter has already voted on a submission."""

    def __init__(self, park_id: object, voter_id: str) -> None:
        super().__init__(f"User {voter_id} has already voted on park {park_id}")
        self.park_id = park_id
        self.voter_id = voter_id


class UnknownSubmission(ParkLocatorError):
    """Raised when a referenced submission does not exist."""

    def __init__(self, park_id: object) -> None:
        super().__init__(f"Park {park_id} does not exist")
        self.park_id = park_id


class NotFoundOrHidden(ParkLocatorError):
    """Raised when a row is absent or not visible to the caller.

    The two cases are deliberately indistinguishable to callers.
    """

    def __init__(self, kind: str, row_id: object) -> None:
        super().__init__(f"{kind.capitalize()} not found")
        self.kind = kind
        self.row_id = row_id


class Unauthorized(ParkLocatorError):
    """Raised when the caller lacks the capability for an operation."""

    def __init__(self, detail: str, *, anonymous: bool = False) -> None:
        super().__init__(detail)
        self.detail = detail
        self.anonymous = anonymous
