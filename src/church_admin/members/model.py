from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..core.enums import UserType


@dataclass(frozen=True)
class Member:
    """Person record (member or guest)."""

    member_id: int
    user_type: UserType
    last_name: str
    first_name: str
    date_of_birth: datetime
    place_of_birth: str
    sex: str
    citizenship: str
    image: Optional[str] = None
    middle_name: Optional[str] = None
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    present_address: Optional[str] = None
    occupation: Optional[str] = None
    blood_type: Optional[str] = None
    job_experience: Any = None
    cellphone_number: Optional[str] = None
    home_telephone_number: Optional[str] = None
    email: Optional[str] = None
    spouse_name: Optional[str] = None
    birth_order: Optional[str] = None
    previous_religion: Optional[str] = None
    date_accepted_the_lord: Optional[datetime] = None
    person_led_you_to_the_lord: Optional[str] = None
    first_day_of_church_attendance: Optional[datetime] = None
    date_water_baptized: Optional[datetime] = None
    date_spirit_baptized: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class MemberSummary:
    """Member projection embedded in offerings and prayer requests."""

    member_id: int
    first_name: str
    last_name: str
    user_type: UserType
    email: Optional[str] = None
    cellphone_number: Optional[str] = None


@dataclass(frozen=True)
class RosterMember:
    """Member projection used when taking attendance."""

    member_id: int
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    image: Optional[str] = None
