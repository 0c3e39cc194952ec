from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus, AttendanceType
from ..members.model import RosterMember


@dataclass(frozen=True)
class AttendanceSession:
    """One dated, typed attendance-taking event."""

    attendance_id: int
    date: datetime
    type: AttendanceType
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class RosterEntry:
    member_id: int
    status: AttendanceStatus


@dataclass(frozen=True)
class MemberAttendance:
    """A roster row: a member's status for one session."""

    attendance_member_id: int
    attendance_id: int
    member_id: int
    status: AttendanceStatus
    member: Optional[RosterMember] = None


@dataclass(frozen=True)
class SessionRoster:
    session: AttendanceSession
    member_attendances: Sequence[MemberAttendance] = field(default_factory=list)


@dataclass(frozen=True)
class RosterView:
    """All members, plus the recorded statuses when a session was requested."""

    members: Sequence[RosterMember]
    member_attendances: Sequence[MemberAttendance]
