from datetime import date, datetime
from decimal import Decimal

import pytest

from church_admin.common.validators import validate
from church_admin.core.enums import OfferingType, UserType
from church_admin.core.exceptions import ConflictError, NotFoundError, ValidationError
from church_admin.offerings.schemas import OfferingCreate, OfferingListQuery, OfferingUpdate
from factories import member_input, offering_input


def test_create_defaults_and_embeds_member(container):
    member = container.member_service.create(member_input(email="maria@example.com"))

    offering = container.offering_service.create(offering_input(member_id=member.member_id))

    assert offering.is_anonymous is False
    assert offering.date == datetime(2024, 1, 7, 0, 0)
    assert offering.member.member_id == member.member_id
    assert offering.member.email == "maria@example.com"


def test_create_with_unknown_member_is_not_found(container):
    with pytest.raises(NotFoundError, match="Member not found"):
        container.offering_service.create(offering_input(member_id=77))


def test_negative_amount_is_rejected():
    with pytest.raises(ValidationError):
        validate(OfferingCreate, {"date": "2024-01-07", "type": "TITHE", "amount": -5})


def test_receipt_numbers_are_unique(container):
    container.offering_service.create(offering_input(receipt_number="R-001"))

    with pytest.raises(ConflictError, match="Receipt number already exists"):
        container.offering_service.create(offering_input(receipt_number="R-001"))


def test_offerings_without_receipt_number_do_not_conflict(container):
    container.offering_service.create(offering_input())
    container.offering_service.create(offering_input(receipt_number=""))

    page = container.offering_service.list(OfferingListQuery())
    assert page.total_count == 2


def test_update_receipt_number_excludes_self(container):
    first = container.offering_service.create(offering_input(receipt_number="R-001"))
    second = container.offering_service.create(offering_input(receipt_number="R-002"))

    same = container.offering_service.update(first.offering_id, OfferingUpdate(receipt_number="R-001"))
    assert same.receipt_number == "R-001"

    with pytest.raises(ConflictError):
        container.offering_service.update(second.offering_id, OfferingUpdate(receipt_number="R-001"))


def test_update_null_member_unlinks(container):
    member = container.member_service.create(member_input())
    offering = container.offering_service.create(offering_input(member_id=member.member_id))

    updated = container.offering_service.update(offering.offering_id, validate(OfferingUpdate, {"memberId": None}))

    assert updated.member_id is None
    assert updated.member is None


def test_update_rejects_null_amount():
    with pytest.raises(ValidationError):
        validate(OfferingUpdate, {"amount": None})


def test_missing_offering_raises_not_found(container):
    with pytest.raises(NotFoundError, match="Tithes and offerings record not found"):
        container.offering_service.get(5)
    with pytest.raises(NotFoundError):
        container.offering_service.update(5, OfferingUpdate(note="x"))
    with pytest.raises(NotFoundError):
        container.offering_service.delete(5)


def test_list_filters_and_total_amount_covers_all_pages(container):
    member = container.member_service.create(member_input(first_name="Lito"))
    guest = container.member_service.create(member_input(first_name="Ely", user_type=UserType.GUEST))

    container.offering_service.create(offering_input(date=date(2023, 12, 31), amount=Decimal("999")))
    container.offering_service.create(offering_input(date=date(2024, 1, 1), amount=Decimal("10"), member_id=member.member_id))
    container.offering_service.create(offering_input(date=date(2024, 1, 15), amount=Decimal("20.50"), type="MISSIONS"))
    container.offering_service.create(
        offering_input(date=date(2024, 1, 31), amount=Decimal("30"), member_id=guest.member_id, is_anonymous=True)
    )

    january = {"startDate": "2024-01-01", "endDate": "2024-01-31", "limit": "2"}
    page = container.offering_service.list(validate(OfferingListQuery, january))
    assert page.total_count == 3
    assert page.total_pages == 2
    assert len(page.items) == 2
    assert page.total_amount == Decimal("60.50")
    assert [o.date.date() for o in page.items] == [date(2024, 1, 31), date(2024, 1, 15)]

    missions = container.offering_service.list(validate(OfferingListQuery, {"type": "MISSIONS"}))
    assert [o.type for o in missions.items] == [OfferingType.MISSIONS]

    anonymous = container.offering_service.list(validate(OfferingListQuery, {"isAnonymous": "true"}))
    assert [o.member_id for o in anonymous.items] == [guest.member_id]

    by_name = container.offering_service.list(validate(OfferingListQuery, {"search": "lito"}))
    assert [o.member_id for o in by_name.items] == [member.member_id]

    members_only = container.offering_service.list(validate(OfferingListQuery, {"userType": "MEMBER"}))
    assert [o.member_id for o in members_only.items] == [member.member_id]
