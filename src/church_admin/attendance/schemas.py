from __future__ import annotations

import datetime as dt
from typing import Annotated, List, Optional

from pydantic import BeforeValidator, model_validator

from ..common.pagination import PageQuery
from ..common.schemas import OptionalDate, OptionalInt, OptionalStr, Schema, reject_nulls
from ..common.validators import blank_to_none
from ..core.enums import AttendanceStatus, AttendanceType

OptionalAttendanceType = Annotated[Optional[AttendanceType], BeforeValidator(blank_to_none)]


class AttendanceCreate(Schema):
    date: dt.date
    type: AttendanceType = AttendanceType.SUNDAY_SERVICE


class AttendanceUpdate(Schema):
    date: Optional[dt.date] = None
    type: Optional[AttendanceType] = None

    @model_validator(mode="after")
    def _not_null(self) -> "AttendanceUpdate":
        reject_nulls(self, {"date", "type"})
        return self


class AttendanceListQuery(PageQuery):
    type: OptionalAttendanceType = None
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    search: OptionalStr = None


class MemberAttendanceInput(Schema):
    member_id: int
    status: AttendanceStatus


def _reject_duplicate_members(entries: List[MemberAttendanceInput]) -> None:
    seen: set[int] = set()
    for e in entries:
        if e.member_id in seen:
            raise ValueError(f"member {e.member_id} appears more than once")
        seen.add(e.member_id)


class RosterCreate(Schema):
    date: dt.date
    type: AttendanceType = AttendanceType.SUNDAY_SERVICE
    member_attendances: List[MemberAttendanceInput] = []

    @model_validator(mode="after")
    def _unique_members(self) -> "RosterCreate":
        _reject_duplicate_members(self.member_attendances)
        return self


class RosterReplace(Schema):
    member_attendances: List[MemberAttendanceInput]

    @model_validator(mode="after")
    def _unique_members(self) -> "RosterReplace":
        _reject_duplicate_members(self.member_attendances)
        return self


class RosterQuery(Schema):
    attendance_id: OptionalInt = None
    search: OptionalStr = None
