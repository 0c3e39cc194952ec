from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PrayerRequestStatus, UserType
from ..members.model import MemberSummary


@dataclass(frozen=True)
class PrayerRequest:
    prayer_request_id: int
    title: str
    description: str
    status: PrayerRequestStatus = PrayerRequestStatus.PENDING
    member_id: Optional[int] = None
    note: Optional[str] = None
    date_to_pray: Optional[datetime] = None
    member: Optional[MemberSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class PrayerRequestStatRow:
    status: PrayerRequestStatus
    user_type: Optional[UserType] = None
