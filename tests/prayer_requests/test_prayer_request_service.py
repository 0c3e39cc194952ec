from datetime import date, datetime

import pytest

from church_admin.common.validators import validate
from church_admin.core.enums import PrayerRequestStatus
from church_admin.core.exceptions import NotFoundError, ValidationError
from church_admin.prayer_requests.schemas import PrayerRequestCreate, PrayerRequestListQuery, PrayerRequestUpdate
from factories import member_input, prayer_request_input
from fakes import set_created_at


def test_create_defaults_to_pending(container):
    request = container.prayer_request_service.create(prayer_request_input(date_to_pray=date(2024, 6, 1)))

    assert request.status == PrayerRequestStatus.PENDING
    assert request.date_to_pray == datetime(2024, 6, 1, 0, 0)
    assert request.member is None


def test_title_and_description_are_required():
    with pytest.raises(ValidationError):
        validate(PrayerRequestCreate, {"title": " ", "description": "x"})
    with pytest.raises(ValidationError):
        validate(PrayerRequestCreate, {"title": "x"})


def test_create_with_unknown_member_is_not_found(container):
    with pytest.raises(NotFoundError, match="Member not found"):
        container.prayer_request_service.create(prayer_request_input(member_id=3))


def test_update_status_and_clear_optional_fields(container):
    member = container.member_service.create(member_input())
    request = container.prayer_request_service.create(
        prayer_request_input(member_id=member.member_id, note="urgent", date_to_pray=date(2024, 6, 1))
    )

    updated = container.prayer_request_service.update(
        request.prayer_request_id,
        validate(PrayerRequestUpdate, {"status": "ANSWERED", "note": None, "dateToPray": None, "memberId": None}),
    )

    assert updated.status == PrayerRequestStatus.ANSWERED
    assert updated.note is None
    assert updated.date_to_pray is None
    assert updated.member_id is None
    assert updated.title == "Healing"


def test_update_rejects_null_status():
    with pytest.raises(ValidationError):
        validate(PrayerRequestUpdate, {"status": None})


def test_missing_prayer_request_raises_not_found(container):
    with pytest.raises(NotFoundError, match="Prayer request not found"):
        container.prayer_request_service.get(1)
    with pytest.raises(NotFoundError):
        container.prayer_request_service.update(1, PrayerRequestUpdate(note="x"))
    with pytest.raises(NotFoundError):
        container.prayer_request_service.delete(1)


def test_list_filters_on_created_at_status_and_search(container, prayer_requests_repo):
    a = container.prayer_request_service.create(prayer_request_input(title="Job interview"))
    b = container.prayer_request_service.create(prayer_request_input(title="Travel", status="DONE"))
    c = container.prayer_request_service.create(prayer_request_input(title="Exams", description="Board exam"))
    set_created_at(prayer_requests_repo, a.prayer_request_id, datetime(2024, 1, 1, 8, 0))
    set_created_at(prayer_requests_repo, b.prayer_request_id, datetime(2024, 1, 31, 23, 59, 59))
    set_created_at(prayer_requests_repo, c.prayer_request_id, datetime(2024, 2, 1, 0, 0))

    january = container.prayer_request_service.list(
        validate(PrayerRequestListQuery, {"startDate": "2024-01-01", "endDate": "2024-01-31"})
    )
    assert [p.title for p in january.items] == ["Travel", "Job interview"]

    done = container.prayer_request_service.list(validate(PrayerRequestListQuery, {"status": "DONE"}))
    assert [p.title for p in done.items] == ["Travel"]

    found = container.prayer_request_service.list(validate(PrayerRequestListQuery, {"search": "BOARD"}))
    assert [p.title for p in found.items] == ["Exams"]
