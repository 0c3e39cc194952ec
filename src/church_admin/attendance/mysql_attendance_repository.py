from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence, Tuple

from ..common.query import QueryFilter
from ..core.enums import AttendanceStatus, AttendanceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, update_columns
from ..members.model import RosterMember
from .model import AttendanceSession, MemberAttendance, RosterEntry
from .repository import AttendanceRepository

_SELECT = "a.attendance_id, a.date, a.type, a.created_at, a.updated_at"


def _row_to_session(r: dict) -> AttendanceSession:
    return AttendanceSession(
        attendance_id=int(r["attendance_id"]),
        date=r["date"],
        type=AttendanceType(r["type"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _insert_roster(cur, attendance_id: int, entries: Sequence[RosterEntry]) -> int:
    if not entries:
        return 0
    cur.executemany(
        "INSERT INTO attendance_members(attendance_id, member_id, status) VALUES(%s,%s,%s)",
        [(int(attendance_id), int(e.member_id), e.status.value) for e in entries],
    )
    return len(entries)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT} FROM attendance a WHERE a.attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _row_to_session(r) if r else None

    def find_in_window(
        self,
        *,
        type: AttendanceType,
        start: datetime,
        end: datetime,
        exclude_id: Optional[int] = None,
    ) -> Optional[AttendanceSession]:
        clauses = ["a.type=%s", "a.date>=%s", "a.date<=%s"]
        params: list[object] = [type.value, start, end]
        if exclude_id is not None:
            clauses.append("a.attendance_id<>%s")
            params.append(int(exclude_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT} FROM attendance a WHERE {where} LIMIT 1", tuple(params))
            r = fetchone(cur)
            return _row_to_session(r) if r else None

    def list_page(self, *, filters: QueryFilter, offset: int, limit: int) -> Tuple[Sequence[AttendanceSession], int]:
        where, params = filters.compile()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM attendance a {where}", params)
            total = int(fetchone(cur)["total"])
            cur.execute(
                f"""
                SELECT {_SELECT}
                FROM attendance a
                {where}
                ORDER BY a.date DESC, a.attendance_id DESC
                LIMIT %s OFFSET %s
                """,
                params + (int(limit), int(offset)),
            )
            return [_row_to_session(r) for r in fetchall(cur)], total

    def create(self, *, date: datetime, type: AttendanceType) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO attendance(date, type) VALUES(%s,%s)", (date, type.value))
            return int(cur.lastrowid)

    def update(self, attendance_id: int, values: Mapping[str, Any]) -> None:
        data = {k: (v.value if isinstance(v, AttendanceType) else v) for k, v in values.items() if k in {"date", "type"}}
        with db_cursor(self._conn_factory) as (_, cur):
            update_columns(cur, table="attendance", key_column="attendance_id", key=attendance_id, values=data)

    def delete_by_id(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0

    # -------- Roster --------
    def create_with_roster(self, *, date: datetime, type: AttendanceType, entries: Sequence[RosterEntry]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO attendance(date, type) VALUES(%s,%s)", (date, type.value))
            attendance_id = int(cur.lastrowid)
            _insert_roster(cur, attendance_id, entries)
            return attendance_id

    def replace_roster(self, *, attendance_id: int, entries: Sequence[RosterEntry]) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            # Row lock serializes concurrent replaces of the same session.
            cur.execute("SELECT attendance_id FROM attendance WHERE attendance_id=%s FOR UPDATE", (int(attendance_id),))
            if not fetchone(cur):
                return None
            cur.execute("DELETE FROM attendance_members WHERE attendance_id=%s", (int(attendance_id),))
            return _insert_roster(cur, attendance_id, entries)

    def list_roster(self, attendance_id: int) -> Sequence[MemberAttendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT am.attendance_member_id, am.attendance_id, am.member_id, am.status,
                       m.first_name, m.last_name, m.middle_name, m.image
                FROM attendance_members am
                JOIN members m ON m.member_id = am.member_id
                WHERE am.attendance_id=%s
                ORDER BY m.last_name ASC, m.first_name ASC
                """,
                (int(attendance_id),),
            )
            return [
                MemberAttendance(
                    attendance_member_id=int(r["attendance_member_id"]),
                    attendance_id=int(r["attendance_id"]),
                    member_id=int(r["member_id"]),
                    status=AttendanceStatus(r["status"]),
                    member=RosterMember(
                        member_id=int(r["member_id"]),
                        first_name=r["first_name"],
                        last_name=r["last_name"],
                        middle_name=r.get("middle_name"),
                        image=r.get("image"),
                    ),
                )
                for r in fetchall(cur)
            ]
