from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence, Set, Tuple

from ..common.query import QueryFilter
from .model import Member, RosterMember
from .schemas import MemberListQuery

SEARCH_COLUMNS = ("m.first_name", "m.middle_name", "m.last_name", "m.email")
ROSTER_SEARCH_COLUMNS = ("m.first_name", "m.last_name", "m.middle_name")


def member_filter(query: MemberListQuery) -> QueryFilter:
    return (
        QueryFilter()
        .search(SEARCH_COLUMNS, query.search)
        .equals("m.sex", query.sex)
        .equals("m.user_type", query.user_type)
    )


def roster_filter(search: Optional[str]) -> QueryFilter:
    return QueryFilter().search(ROSTER_SEARCH_COLUMNS, search)


class MemberRepository(Protocol):
    """Repository interface for Member.

    Services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def find_missing_ids(self, member_ids: Iterable[int]) -> Set[int]:
        """Return the ids in ``member_ids`` that have no member row."""

        raise NotImplementedError

    def list_page(self, *, filters: QueryFilter, offset: int, limit: int) -> Tuple[Sequence[Member], int]:
        """Return one page ordered by newest first, plus the total match count."""

        raise NotImplementedError

    def list_for_roster(self, *, filters: QueryFilter) -> Sequence[RosterMember]:
        raise NotImplementedError

    def create(self, values: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, member_id: int, values: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete_by_id(self, member_id: int) -> bool:
        raise NotImplementedError
