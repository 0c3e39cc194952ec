"""Attendance roster: the per-member statuses attached to a session.

Rosters have no row-level identity worth keeping, so every submission
replaces the whole roster of a session instead of merging into it.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..common.datetime_utils import to_datetime
from ..core.exceptions import NotFoundError
from ..members.repository import MemberRepository, roster_filter
from .model import RosterEntry, RosterView, SessionRoster
from .repository import AttendanceRepository
from .schemas import MemberAttendanceInput, RosterCreate, RosterQuery, RosterReplace
from .service import AttendanceService

logger = logging.getLogger(__name__)


def _entries(items: Sequence[MemberAttendanceInput]) -> list[RosterEntry]:
    return [RosterEntry(member_id=i.member_id, status=i.status) for i in items]


class RosterService:
    def __init__(self, attendance: AttendanceRepository, members: MemberRepository, sessions: AttendanceService):
        self._attendance = attendance
        self._members = members
        self._sessions = sessions

    def _ensure_members_exist(self, entries: Sequence[RosterEntry]) -> None:
        missing = self._members.find_missing_ids(e.member_id for e in entries)
        if missing:
            raise NotFoundError(f"Member not found: {', '.join(str(i) for i in sorted(missing))}")

    def get_roster(self, query: RosterQuery) -> RosterView:
        members = self._members.list_for_roster(filters=roster_filter(query.search))
        member_attendances = []
        if query.attendance_id:
            member_attendances = list(self._attendance.list_roster(int(query.attendance_id)))
        return RosterView(members=members, member_attendances=member_attendances)

    def create_with_roster(self, data: RosterCreate) -> SessionRoster:
        self._sessions.ensure_slot_available(day=data.date, type=data.type)

        entries = _entries(data.member_attendances)
        self._ensure_members_exist(entries)

        attendance_id = self._attendance.create_with_roster(
            date=to_datetime(data.date),
            type=data.type,
            entries=entries,
        )
        logger.info("Created attendance %s with %d roster rows", attendance_id, len(entries))
        return SessionRoster(
            session=self._sessions.get(attendance_id),
            member_attendances=list(self._attendance.list_roster(attendance_id)),
        )

    def replace_roster(self, attendance_id: int, data: RosterReplace) -> dict:
        self._sessions.get(attendance_id)

        entries = _entries(data.member_attendances)
        self._ensure_members_exist(entries)

        count = self._attendance.replace_roster(attendance_id=int(attendance_id), entries=entries)
        if count is None:
            raise NotFoundError("Attendance record not found")
        logger.info("Replaced roster of attendance %s (%d rows)", attendance_id, count)
        return {"success": True, "count": count}
