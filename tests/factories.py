from __future__ import annotations

from datetime import date
from decimal import Decimal

from church_admin.members.schemas import MemberCreate
from church_admin.offerings.schemas import OfferingCreate
from church_admin.prayer_requests.schemas import PrayerRequestCreate


def member_input(**overrides) -> MemberCreate:
    data = {
        "last_name": "Santos",
        "first_name": "Maria",
        "date_of_birth": date(1990, 5, 17),
        "place_of_birth": "Cebu City",
        "sex": "Female",
    }
    data.update(overrides)
    return MemberCreate(**data)


def offering_input(**overrides) -> OfferingCreate:
    data = {"date": date(2024, 1, 7), "type": "TITHE", "amount": Decimal("100.00")}
    data.update(overrides)
    return OfferingCreate(**data)


def prayer_request_input(**overrides) -> PrayerRequestCreate:
    data = {"title": "Healing", "description": "Pray for my mother's recovery"}
    data.update(overrides)
    return PrayerRequestCreate(**data)
