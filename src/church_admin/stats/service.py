from __future__ import annotations

from decimal import Decimal

from ..core.constants import UNLINKED_USER_TYPE
from ..offerings.repository import OfferingRepository, offering_filter
from ..offerings.schemas import OfferingFilters
from ..prayer_requests.repository import PrayerRequestRepository, prayer_request_filter
from ..prayer_requests.schemas import PrayerRequestFilters
from .model import OfferingStats, PrayerRequestStats


class StatsService:
    """Dashboard aggregates, reduced in memory from a minimal projection.

    Each aggregate takes the same filters as the matching list endpoint, minus
    pagination. Records without a linked member are counted as guests.
    """

    def __init__(self, offerings: OfferingRepository, prayer_requests: PrayerRequestRepository):
        self._offerings = offerings
        self._prayer_requests = prayer_requests

    def offering_stats(self, filters: OfferingFilters) -> OfferingStats:
        rows = self._offerings.list_for_stats(filters=offering_filter(filters))

        total = Decimal("0")
        by_type: dict[str, Decimal] = {}
        by_user_type: dict[str, Decimal] = {}
        anonymous_count = 0
        anonymous_amount = Decimal("0")

        for r in rows:
            total += r.amount
            by_type[r.type.value] = by_type.get(r.type.value, Decimal("0")) + r.amount

            user_type = r.user_type.value if r.user_type else UNLINKED_USER_TYPE
            by_user_type[user_type] = by_user_type.get(user_type, Decimal("0")) + r.amount

            if r.is_anonymous:
                anonymous_count += 1
                anonymous_amount += r.amount

        return OfferingStats(
            total_amount=total,
            total_records=len(rows),
            amount_by_type=by_type,
            amount_by_user_type=by_user_type,
            anonymous_count=anonymous_count,
            anonymous_amount=anonymous_amount,
        )

    def prayer_request_stats(self, filters: PrayerRequestFilters) -> PrayerRequestStats:
        rows = self._prayer_requests.list_for_stats(filters=prayer_request_filter(filters))

        by_status: dict[str, int] = {}
        by_user_type: dict[str, int] = {}
        for r in rows:
            by_status[r.status.value] = by_status.get(r.status.value, 0) + 1
            user_type = r.user_type.value if r.user_type else UNLINKED_USER_TYPE
            by_user_type[user_type] = by_user_type.get(user_type, 0) + 1

        return PrayerRequestStats(
            total_count=len(rows),
            count_by_status=by_status,
            count_by_user_type=by_user_type,
        )
