"""Vote-driven moderation state machine for park submissions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from park_locator.core.settings import settings
from park_locator.models import Park, ParkStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Thresholds:
    """Absolute and relative vote thresholds for a decision."""

    approve_min_upvotes: int = 10
    reject_min_downvotes: int = 5
    ratio: float = 0.7

    @classmethod
    def from_settings(cls) -> Thresholds:
        return cls(
            approve_min_upvotes=settings.approve_min_upvotes,
            reject_min_downvotes=settings.reject_min_downvotes,
            ratio=settings.decision_ratio,
        )


def next_status(
    current: ParkStatus,
    upvotes: int,
    downvotes: int,
    thresholds: Thresholds | None = None,
) -> ParkStatus:
    """Return the status a submission should hold for the given tallies.

    Terminal states are returned unchanged. Approval is checked before
    rejection. Each branch's absolute threshold is at least one, so the
    denominator is positive whenever a ratio is computed.
    """
    if current.is_terminal:
        return current

    limits = thresholds or Thresholds.from_settings()
    if upvotes >= limits.approve_min_upvotes and upvotes / (upvotes + downvotes) >= limits.ratio:
        return ParkStatus.APPROVED
    if (
        downvotes >= limits.reject_min_downvotes
        and downvotes / (upvotes + downvotes) >= limits.ratio
    ):
        return ParkStatus.REJECTED
    return current


class ModerationService:
    """Applies the state machine to persisted parks."""

    def __init__(self, thresholds: Thresholds | None = None) -> None:
        self.thresholds = thresholds

    def advance(self, park: Park) -> bool:
        """Re-evaluate ``park.status`` from its counters.

        Returns:
            True if the status changed.
        """
        new_status = next_status(park.status, park.upvotes, park.downvotes, self.thresholds)
        if new_status == park.status:
            return False

        logger.info(
            "Park %s moved %s -> %s at %d up / %d down",
            park.id,
            park.status.value,
            new_status.value,
            park.upvotes,
            park.downvotes,
        )
        park.status = new_status
        return True
