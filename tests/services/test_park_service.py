# tests/services/test_park_service.py
"""Tests for park creation, visibility and admin operations."""

import uuid

import pytest
from sqlalchemy import func, select

from park_locator.core.errors import NotFoundOrHidden, Unauthorized
from park_locator.models import ParkComment, ParkPhoto, ParkStatus, ParkTag, ParkVote
from park_locator.services import content
from park_locator.services import parks as park_service


def test_create_park_starts_pending(db_session, other) -> None:
    park = park_service.create_park(
        db_session,
        other,
        name="Hilltop Rings",
        latitude=40.7,
        longitude=-74.0,
        description="Rings and parallel bars",
        address="5 Hill Rd",
    )

    assert park.status is ParkStatus.PENDING
    assert (park.upvotes, park.downvotes) == (0, 0)
    assert park.created_by == other.user_id
    assert park.created_at is not None


def test_anonymous_cannot_create_park(db_session, anonymous) -> None:
    with pytest.raises(Unauthorized):
        park_service.create_park(db_session, anonymous, name="x", latitude=0.0, longitude=0.0)


def test_anonymous_listing_only_shows_approved(db_session, make_park, anonymous) -> None:
    approved = make_park(status=ParkStatus.APPROVED, name="a")
    make_park(status=ParkStatus.PENDING, name="p")
    make_park(status=ParkStatus.REJECTED, name="r")

    listed = park_service.list_visible_parks(db_session, anonymous)

    assert [p.id for p in listed] == [approved.id]
    assert all(p.status is ParkStatus.APPROVED for p in listed)


def test_owner_sees_own_pending_park_but_others_do_not(
    db_session, pending_park, owner, other
) -> None:
    owner_ids = {p.id for p in park_service.list_visible_parks(db_session, owner)}
    other_ids = {p.id for p in park_service.list_visible_parks(db_session, other)}

    assert pending_park.id in owner_ids
    assert pending_park.id not in other_ids
    assert park_service.get_park(db_session, owner, pending_park.id) is pending_park
    with pytest.raises(NotFoundOrHidden):
        park_service.get_park(db_session, other, pending_park.id)


def test_owner_cannot_see_own_rejected_park(db_session, make_park, owner, admin) -> None:
    rejected = make_park(status=ParkStatus.REJECTED)
    with pytest.raises(NotFoundOrHidden):
        park_service.get_park(db_session, owner, rejected.id)
    assert park_service.get_park(db_session, admin, rejected.id) is rejected


def test_admin_sees_everything_and_can_filter(db_session, make_park, admin) -> None:
    make_park(status=ParkStatus.APPROVED, name="a")
    make_park(status=ParkStatus.PENDING, name="p")
    make_park(status=ParkStatus.REJECTED, name="r")

    assert len(park_service.list_visible_parks(db_session, admin)) == 3
    rejected = park_service.list_visible_parks(db_session, admin, status=ParkStatus.REJECTED)
    assert [p.name for p in rejected] == ["r"]


def test_listing_respects_limit(db_session, make_park, anonymous) -> None:
    for i in range(5):
        make_park(status=ParkStatus.APPROVED, name=f"park-{i}")
    assert len(park_service.list_visible_parks(db_session, anonymous, limit=2)) == 2


def test_get_missing_park(db_session, admin) -> None:
    with pytest.raises(NotFoundOrHidden):
        park_service.get_park(db_session, admin, uuid.uuid4())


def test_admin_status_override(db_session, make_park, admin, owner) -> None:
    park = make_park(status=ParkStatus.PENDING)

    with pytest.raises(Unauthorized):
        park_service.set_park_status(db_session, owner, park.id, ParkStatus.APPROVED)

    updated = park_service.set_park_status(db_session, admin, park.id, ParkStatus.APPROVED)
    assert updated.status is ParkStatus.APPROVED


def test_admin_can_reopen_terminal_park(db_session, make_park, admin) -> None:
    park = make_park(status=ParkStatus.REJECTED)
    updated = park_service.set_park_status(db_session, admin, park.id, ParkStatus.PENDING)
    assert updated.status is ParkStatus.PENDING


def test_status_override_unknown_park(db_session, admin) -> None:
    with pytest.raises(NotFoundOrHidden):
        park_service.set_park_status(db_session, admin, uuid.uuid4(), ParkStatus.APPROVED)


def test_delete_cascades_to_children(db_session, ledger, pending_park, admin, other) -> None:
    ledger.cast_vote(db_session, other, pending_park.id, True)
    content.create_photo(db_session, other, pending_park.id, "https://cdn.example/p.jpg")
    content.create_comment(db_session, other, pending_park.id, "Great bars")
    content.create_tag(db_session, other, pending_park.id, "dip-bars")
    park_id = pending_park.id

    park_service.delete_park(db_session, admin, park_id)

    for model in (ParkVote, ParkPhoto, ParkComment, ParkTag):
        count = db_session.scalar(
            select(func.count()).select_from(model).where(model.park_id == park_id)
        )
        assert count == 0


def test_only_admin_can_delete(db_session, pending_park, owner) -> None:
    with pytest.raises(Unauthorized) as exc_info:
        park_service.delete_park(db_session, owner, pending_park.id)
    assert exc_info.value.anonymous is False


def test_hidden_park_looks_missing_to_non_admin_writers(
    db_session, make_park, owner, other, admin
) -> None:
    pending = make_park(status=ParkStatus.PENDING)
    rejected = make_park(status=ParkStatus.REJECTED)

    for caller, park_id in ((other, pending.id), (owner, rejected.id), (other, uuid.uuid4())):
        with pytest.raises(NotFoundOrHidden):
            park_service.set_park_status(db_session, caller, park_id, ParkStatus.APPROVED)
        with pytest.raises(NotFoundOrHidden):
            park_service.delete_park(db_session, caller, park_id)

    assert park_service.get_park(db_session, admin, pending.id).status is ParkStatus.PENDING
    assert park_service.get_park(db_session, admin, rejected.id).status is ParkStatus.REJECTED


def test_listing_pages_past_the_first_page(db_session, make_park, anonymous) -> None:
    created = {make_park(status=ParkStatus.APPROVED, name=f"park-{i}").id for i in range(101)}
    make_park(status=ParkStatus.PENDING, name="hidden")

    seen: list[uuid.UUID] = []
    before = None
    while True:
        page = park_service.list_visible_parks(db_session, anonymous, limit=50, before=before)
        if not page:
            break
        seen.extend(p.id for p in page)
        before = page[-1].id

    assert len(seen) == len(set(seen)) == 101
    assert set(seen) == created


def test_listing_scans_past_hidden_rows(db_session, make_park, anonymous, monkeypatch) -> None:
    monkeypatch.setattr(park_service, "_SCAN_BATCH", 2)
    approved = make_park(status=ParkStatus.APPROVED, name="oldest")
    for i in range(5):
        make_park(status=ParkStatus.PENDING, name=f"pending-{i}")

    listed = park_service.list_visible_parks(db_session, anonymous, limit=1)

    assert [p.id for p in listed] == [approved.id]


def test_listing_cursor_must_be_visible(db_session, pending_park, other, owner) -> None:
    with pytest.raises(NotFoundOrHidden):
        park_service.list_visible_parks(db_session, other, before=pending_park.id)
    with pytest.raises(NotFoundOrHidden):
        park_service.list_visible_parks(db_session, owner, before=uuid.uuid4())
    assert park_service.list_visible_parks(db_session, owner, before=pending_park.id) == []
