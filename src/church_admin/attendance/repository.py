from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Protocol, Sequence, Tuple

from ..common.query import QueryFilter
from ..core.enums import AttendanceType
from .model import AttendanceSession, MemberAttendance, RosterEntry
from .schemas import AttendanceListQuery


def attendance_filter(query: AttendanceListQuery) -> QueryFilter:
    return (
        QueryFilter()
        .equals("a.type", query.type)
        .date_range("a.date", query.start_date, query.end_date)
        .search(("a.type",), query.search)
    )


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def find_in_window(
        self,
        *,
        type: AttendanceType,
        start: datetime,
        end: datetime,
        exclude_id: Optional[int] = None,
    ) -> Optional[AttendanceSession]:
        """Any session of ``type`` dated inside [start, end], other than ``exclude_id``."""

        raise NotImplementedError

    def list_page(self, *, filters: QueryFilter, offset: int, limit: int) -> Tuple[Sequence[AttendanceSession], int]:
        raise NotImplementedError

    def create(self, *, date: datetime, type: AttendanceType) -> int:
        raise NotImplementedError

    def update(self, attendance_id: int, values: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete_by_id(self, attendance_id: int) -> bool:
        raise NotImplementedError

    # Roster
    def create_with_roster(self, *, date: datetime, type: AttendanceType, entries: Sequence[RosterEntry]) -> int:
        """Insert the session and all of its roster rows in one transaction."""

        raise NotImplementedError

    def replace_roster(self, *, attendance_id: int, entries: Sequence[RosterEntry]) -> Optional[int]:
        """Delete every roster row of the session and insert ``entries``, atomically.

        Returns the number of rows inserted, or None if the session no longer exists.
        """

        raise NotImplementedError

    def list_roster(self, attendance_id: int) -> Sequence[MemberAttendance]:
        raise NotImplementedError
