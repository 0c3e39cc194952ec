from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.pagination import Page
from ..core.enums import OfferingType, UserType
from ..members.model import MemberSummary


@dataclass(frozen=True)
class Offering:
    """A tithe/offering contribution."""

    offering_id: int
    date: datetime
    type: OfferingType
    amount: Decimal
    is_anonymous: bool = False
    member_id: Optional[int] = None
    note: Optional[str] = None
    receipt_number: Optional[str] = None
    member: Optional[MemberSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class OfferingPage(Page):
    """A page of offerings plus the amount summed over every matching record."""

    total_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class OfferingStatRow:
    """Minimal projection fetched for statistics."""

    type: OfferingType
    amount: Decimal
    date: datetime
    is_anonymous: bool
    user_type: Optional[UserType] = None
