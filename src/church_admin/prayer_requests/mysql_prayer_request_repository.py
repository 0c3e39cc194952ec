from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Tuple

from ..common.query import QueryFilter
from ..core.enums import PrayerRequestStatus, UserType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, update_columns
from ..members.model import MemberSummary
from .model import PrayerRequest, PrayerRequestStatRow
from .repository import PrayerRequestRepository

WRITABLE = frozenset({"member_id", "title", "description", "note", "date_to_pray", "status"})

_SELECT = """
    p.prayer_request_id, p.member_id, p.title, p.description, p.note,
    p.date_to_pray, p.status, p.created_at, p.updated_at,
    m.first_name, m.last_name, m.user_type, m.email, m.cellphone_number
"""

_FROM = "FROM prayer_requests p LEFT JOIN members m ON m.member_id = p.member_id"


def _to_db(values: Mapping[str, Any]) -> dict:
    out: dict = {}
    for key, value in values.items():
        if key not in WRITABLE:
            raise KeyError(f"Unknown prayer request column: {key}")
        out[key] = value.value if isinstance(value, PrayerRequestStatus) else value
    return out


def _row_to_prayer_request(r: dict) -> PrayerRequest:
    member = None
    if r.get("member_id") is not None and r.get("first_name") is not None:
        member = MemberSummary(
            member_id=int(r["member_id"]),
            first_name=r["first_name"],
            last_name=r["last_name"],
            user_type=UserType(r["user_type"]),
            email=r.get("email"),
            cellphone_number=r.get("cellphone_number"),
        )
    return PrayerRequest(
        prayer_request_id=int(r["prayer_request_id"]),
        title=r["title"],
        description=r["description"],
        status=PrayerRequestStatus(r["status"]),
        member_id=int(r["member_id"]) if r.get("member_id") is not None else None,
        note=r.get("note"),
        date_to_pray=r.get("date_to_pray"),
        member=member,
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLPrayerRequestRepository(PrayerRequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, prayer_request_id: int) -> Optional[PrayerRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT} {_FROM} WHERE p.prayer_request_id=%s", (int(prayer_request_id),))
            r = fetchone(cur)
            return _row_to_prayer_request(r) if r else None

    def list_page(self, *, filters: QueryFilter, offset: int, limit: int) -> Tuple[Sequence[PrayerRequest], int]:
        where, params = filters.compile()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total {_FROM} {where}", params)
            total = int(fetchone(cur)["total"])
            cur.execute(
                f"""
                SELECT {_SELECT}
                {_FROM}
                {where}
                ORDER BY p.created_at DESC, p.prayer_request_id DESC
                LIMIT %s OFFSET %s
                """,
                params + (int(limit), int(offset)),
            )
            return [_row_to_prayer_request(r) for r in fetchall(cur)], total

    def list_for_stats(self, *, filters: QueryFilter) -> Sequence[PrayerRequestStatRow]:
        where, params = filters.compile()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT p.status, m.user_type {_FROM} {where}", params)
            return [
                PrayerRequestStatRow(
                    status=PrayerRequestStatus(r["status"]),
                    user_type=UserType(r["user_type"]) if r.get("user_type") else None,
                )
                for r in fetchall(cur)
            ]

    def create(self, values: Mapping[str, Any]) -> int:
        data = _to_db(values)
        cols = ", ".join(data)
        placeholders = ", ".join(["%s"] * len(data))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO prayer_requests({cols}) VALUES({placeholders})", tuple(data.values()))
            return int(cur.lastrowid)

    def update(self, prayer_request_id: int, values: Mapping[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            update_columns(
                cur,
                table="prayer_requests",
                key_column="prayer_request_id",
                key=prayer_request_id,
                values=_to_db(values),
            )

    def delete_by_id(self, prayer_request_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM prayer_requests WHERE prayer_request_id=%s", (int(prayer_request_id),))
            return cur.rowcount > 0
