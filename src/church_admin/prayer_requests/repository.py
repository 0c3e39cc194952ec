from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence, Tuple

from ..common.query import QueryFilter
from .model import PrayerRequest, PrayerRequestStatRow
from .schemas import PrayerRequestFilters

SEARCH_COLUMNS = ("m.first_name", "m.last_name", "m.email", "p.title", "p.description", "p.note")


def prayer_request_filter(query: PrayerRequestFilters) -> QueryFilter:
    # Date filters apply to when the request was logged, not date_to_pray.
    return (
        QueryFilter()
        .equals("p.status", query.status)
        .date_range("p.created_at", query.start_date, query.end_date)
        .equals("m.user_type", query.user_type)
        .search(SEARCH_COLUMNS, query.search)
    )


class PrayerRequestRepository(Protocol):
    def get_by_id(self, prayer_request_id: int) -> Optional[PrayerRequest]:
        raise NotImplementedError

    def list_page(self, *, filters: QueryFilter, offset: int, limit: int) -> Tuple[Sequence[PrayerRequest], int]:
        raise NotImplementedError

    def list_for_stats(self, *, filters: QueryFilter) -> Sequence[PrayerRequestStatRow]:
        raise NotImplementedError

    def create(self, values: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, prayer_request_id: int, values: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete_by_id(self, prayer_request_id: int) -> bool:
        raise NotImplementedError
