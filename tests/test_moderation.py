# tests/test_moderation.py
"""Tests for the vote-driven moderation state machine."""

import pytest

from park_locator.models import Park, ParkStatus
from park_locator.services.moderation import ModerationService, Thresholds, next_status

DEFAULTS = Thresholds()


@pytest.mark.parametrize(
    ("upvotes", "downvotes", "expected"),
    [
        (10, 0, ParkStatus.APPROVED),
        (9, 1, ParkStatus.PENDING),
        (0, 5, ParkStatus.REJECTED),
        (3, 4, ParkStatus.PENDING),
        (0, 0, ParkStatus.PENDING),
        # 10 / 14 = 0.714 clears the ratio.
        (10, 4, ParkStatus.APPROVED),
        # 10 / 15 = 0.667 does not; 5 / 15 does not reject either.
        (10, 5, ParkStatus.PENDING),
        (7, 3, ParkStatus.PENDING),
        (2, 5, ParkStatus.REJECTED),
        # 5 / 8 = 0.625 is below the ratio.
        (3, 5, ParkStatus.PENDING),
    ],
)
def test_pending_transitions(upvotes: int, downvotes: int, expected: ParkStatus) -> None:
    assert next_status(ParkStatus.PENDING, upvotes, downvotes, DEFAULTS) is expected


@pytest.mark.parametrize("terminal", [ParkStatus.APPROVED, ParkStatus.REJECTED])
@pytest.mark.parametrize(("upvotes", "downvotes"), [(0, 50), (50, 0), (3, 4), (0, 0)])
def test_terminal_states_never_move(terminal: ParkStatus, upvotes: int, downvotes: int) -> None:
    assert next_status(terminal, upvotes, downvotes, DEFAULTS) is terminal


def test_ratio_is_inclusive() -> None:
    """A ratio exactly at the threshold decides the submission."""
    thresholds = Thresholds(approve_min_upvotes=7, reject_min_downvotes=7, ratio=0.7)
    assert next_status(ParkStatus.PENDING, 7, 3, thresholds) is ParkStatus.APPROVED
    assert next_status(ParkStatus.PENDING, 3, 7, thresholds) is ParkStatus.REJECTED


def test_approval_takes_precedence_when_both_rules_match() -> None:
    thresholds = Thresholds(approve_min_upvotes=5, reject_min_downvotes=5, ratio=0.5)
    assert next_status(ParkStatus.PENDING, 5, 5, thresholds) is ParkStatus.APPROVED


def test_defaults_come_from_settings() -> None:
    assert Thresholds.from_settings() == DEFAULTS
    assert next_status(ParkStatus.PENDING, 10, 0) is ParkStatus.APPROVED


def test_service_advances_park_and_reports_change() -> None:
    park = Park(status=ParkStatus.PENDING, upvotes=10, downvotes=1, created_by="u")
    service = ModerationService(DEFAULTS)

    assert service.advance(park) is True
    assert park.status is ParkStatus.APPROVED

    park.downvotes = 40
    assert service.advance(park) is False
    assert park.status is ParkStatus.APPROVED
