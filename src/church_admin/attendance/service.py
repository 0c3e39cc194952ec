from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import day_window, to_datetime
from ..common.pagination import Page
from ..core.enums import AttendanceType
from ..core.exceptions import ConflictError, NotFoundError
from .model import AttendanceSession
from .repository import AttendanceRepository, attendance_filter
from .schemas import AttendanceCreate, AttendanceListQuery, AttendanceUpdate

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: attendance sessions, at most one per (calendar day, type)."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def ensure_slot_available(self, *, day: date, type: AttendanceType, exclude_id: Optional[int] = None) -> None:
        start, end = day_window(day)
        existing = self._attendance.find_in_window(type=type, start=start, end=end, exclude_id=exclude_id)
        if existing:
            raise ConflictError(f"Attendance for {type.value} on this date already exists")

    def list(self, query: AttendanceListQuery) -> Page[AttendanceSession]:
        items, total = self._attendance.list_page(
            filters=attendance_filter(query), offset=query.offset, limit=query.limit
        )
        return Page.build(items, total_count=total, query=query)

    def get(self, attendance_id: int) -> AttendanceSession:
        session = self._attendance.get_by_id(int(attendance_id))
        if not session:
            raise NotFoundError("Attendance record not found")
        return session

    def create(self, data: AttendanceCreate) -> AttendanceSession:
        self.ensure_slot_available(day=data.date, type=data.type)
        attendance_id = self._attendance.create(date=to_datetime(data.date), type=data.type)
        logger.info("Created attendance %s (%s %s)", attendance_id, data.type.value, data.date)
        return self.get(attendance_id)

    def update(self, attendance_id: int, data: AttendanceUpdate) -> AttendanceSession:
        current = self.get(attendance_id)

        changes = data.changes()
        if not changes:
            return current

        new_day = data.date if "date" in changes else current.date.date()
        new_type = data.type if "type" in changes else current.type
        self.ensure_slot_available(day=new_day, type=new_type, exclude_id=current.attendance_id)

        if "date" in changes:
            changes["date"] = to_datetime(data.date)
        self._attendance.update(current.attendance_id, changes)
        logger.info("Updated attendance %s", current.attendance_id)
        return self.get(attendance_id)

    def delete(self, attendance_id: int) -> dict:
        self.get(attendance_id)
        self._attendance.delete_by_id(int(attendance_id))
        logger.info("Deleted attendance %s", attendance_id)
        return {"success": True}
