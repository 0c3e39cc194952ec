from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional, Protocol, Sequence, Tuple

from ..common.query import QueryFilter
from .model import Offering, OfferingStatRow
from .schemas import OfferingFilters

SEARCH_COLUMNS = ("m.first_name", "m.last_name", "m.email", "o.note", "o.receipt_number")


def offering_filter(query: OfferingFilters) -> QueryFilter:
    return (
        QueryFilter()
        .equals("o.type", query.type)
        .flag("o.is_anonymous", query.is_anonymous)
        .date_range("o.date", query.start_date, query.end_date)
        .equals("m.user_type", query.user_type)
        .search(SEARCH_COLUMNS, query.search)
    )


class OfferingRepository(Protocol):
    def get_by_id(self, offering_id: int) -> Optional[Offering]:
        raise NotImplementedError

    def find_by_receipt_number(self, receipt_number: str, *, exclude_id: Optional[int] = None) -> Optional[Offering]:
        raise NotImplementedError

    def list_page(
        self, *, filters: QueryFilter, offset: int, limit: int
    ) -> Tuple[Sequence[Offering], int, Decimal]:
        """Return (page items, total count, total amount over all matches)."""

        raise NotImplementedError

    def list_for_stats(self, *, filters: QueryFilter) -> Sequence[OfferingStatRow]:
        raise NotImplementedError

    def create(self, values: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, offering_id: int, values: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete_by_id(self, offering_id: int) -> bool:
        raise NotImplementedError
