from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict


@dataclass(frozen=True)
class OfferingStats:
    total_amount: Decimal
    total_records: int
    amount_by_type: Dict[str, Decimal] = field(default_factory=dict)
    amount_by_user_type: Dict[str, Decimal] = field(default_factory=dict)
    anonymous_count: int = 0
    anonymous_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class PrayerRequestStats:
    total_count: int
    count_by_status: Dict[str, int] = field(default_factory=dict)
    count_by_user_type: Dict[str, int] = field(default_factory=dict)
