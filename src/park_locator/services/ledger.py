"""Vote ledger: one immutable vote per (park, voter).

Casting a vote is a single unit of work. The park row is locked, the vote is
inserted, the counters are bumped and the moderation state is re-evaluated
before anything is committed, so no reader sees counts and status out of
step with the ledger.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from park_locator.core.errors import DuplicateVote, Unauthorized, UnknownSubmission
from park_locator.core.security import Caller
from park_locator.db.session import unit_of_work
from park_locator.models import Park, ParkVote
from park_locator.services import tally
from park_locator.services.moderation import ModerationService
from park_locator.services.policy import Operation, can_read, can_write

logger = logging.getLogger(__name__)


class VoteLedger:
    """Records votes and drives the tally and moderation updates."""

    def __init__(self, moderation: ModerationService | None = None) -> None:
        self.moderation = moderation or ModerationService()

    @staticmethod
    def _lock_park(db: Session, park_id: uuid.UUID) -> Park:
        park = db.execute(
            select(Park)
            .where(Park.id == park_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()
        if park is None:
            raise UnknownSubmission(park_id)
        return park

    @staticmethod
    def _existing_vote(db: Session, park_id: uuid.UUID, user_id: str) -> ParkVote | None:
        return db.execute(
            select(ParkVote).where(ParkVote.park_id == park_id, ParkVote.user_id == user_id)
        ).scalar_one_or_none()

    def cast_vote(
        self,
        db: Session,
        caller: Caller,
        park_id: uuid.UUID,
        vote_type: bool,
    ) -> ParkVote:
        """Record ``caller``'s vote on a park.

        Args:
            db: Database session; committed on success, rolled back on failure.
            caller: The voter. The vote is always recorded for this identity.
            park_id: Park being voted on. It need not be visible to the caller.
            vote_type: True for an upvote, False for a downvote.

        Returns:
            The persisted vote.

        Raises:
            Unauthorized: If the caller is anonymous.
            UnknownSubmission: If the park does not exist.
            DuplicateVote: If the caller already voted on this park.
        """
        vote = ParkVote(park_id=park_id, user_id=caller.user_id, vote_type=vote_type)
        if not can_write(caller, vote, Operation.INSERT):
            raise Unauthorized("Sign in to vote", anonymous=not caller.is_authenticated)

        try:
            with unit_of_work(db):
                park = self._lock_park(db, park_id)
                if self._existing_vote(db, park_id, caller.user_id) is not None:
                    raise DuplicateVote(park_id, caller.user_id)

                db.add(vote)
                # Flush so a concurrent duplicate surfaces as a constraint error here.
                db.flush()

                tally.apply_vote(park, vote_type)
                # Votes on a terminal park are tallied but cannot move its status.
                self.moderation.advance(park)
        except IntegrityError as err:
            logger.info("Rejected concurrent duplicate vote by %s on park %s", caller.user_id, park_id)
            raise DuplicateVote(park_id, caller.user_id) from err
        except DuplicateVote:
            logger.info("Rejected duplicate vote by %s on park %s", caller.user_id, park_id)
            raise

        logger.info(
            "Accepted %s vote by %s on park %s",
            "up" if vote_type else "down",
            caller.user_id,
            park_id,
        )
        return vote

    def get_my_vote(self, db: Session, caller: Caller, park_id: uuid.UUID) -> ParkVote | None:
        """Return the caller's own vote on a park, if any."""
        if not caller.is_authenticated:
            raise Unauthorized("Sign in to view your vote", anonymous=True)
        if db.get(Park, park_id) is None:
            raise UnknownSubmission(park_id)
        return self._existing_vote(db, park_id, caller.user_id)

    def list_votes(self, db: Session, caller: Caller, park_id: uuid.UUID) -> list[ParkVote]:
        """Return the votes on a park that the caller may read."""
        if db.get(Park, park_id) is None:
            raise UnknownSubmission(park_id)
        votes = db.execute(
            select(ParkVote).where(ParkVote.park_id == park_id).order_by(ParkVote.created_at)
        ).scalars()
        return [vote for vote in votes if can_read(caller, vote)]

    def resync(self, db: Session, caller: Caller, park_id: uuid.UUID) -> Park:
        """Rewrite a park's counters from the ledger and re-run moderation.

        Admin only.
        """
        if not caller.is_admin:
            raise Unauthorized("Admin access required", anonymous=not caller.is_authenticated)

        with unit_of_work(db):
            park = self._lock_park(db, park_id)
            counts = tally.recompute(db, park_id)
            if (park.upvotes, park.downvotes) != tuple(counts):
                logger.warning(
                    "Park %s counters drifted: stored %d/%d, ledger %d/%d",
                    park_id,
                    park.upvotes,
                    park.downvotes,
                    counts.upvotes,
                    counts.downvotes,
                )
            park.upvotes, park.downvotes = counts
            self.moderation.advance(park)
        return park


def get_vote_ledger() -> VoteLedger:
    """Return a new vote ledger instance."""
    return VoteLedger()
