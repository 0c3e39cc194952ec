from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, Optional, Sequence, Set, Tuple

from ..common.query import QueryFilter
from ..core.enums import UserType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, update_columns
from .model import Member, RosterMember
from .repository import MemberRepository

COLUMNS = (
    "member_id", "user_type", "image", "last_name", "first_name", "middle_name",
    "father_name", "mother_name", "date_of_birth", "place_of_birth", "sex",
    "height", "weight", "present_address", "occupation", "blood_type",
    "job_experience", "cellphone_number", "home_telephone_number", "email",
    "spouse_name", "birth_order", "citizenship", "previous_religion",
    "date_accepted_the_lord", "person_led_you_to_the_lord",
    "first_day_of_church_attendance", "date_water_baptized",
    "date_spirit_baptized", "created_at", "updated_at",
)

WRITABLE = frozenset(COLUMNS) - {"member_id", "created_at", "updated_at"}

_SELECT = ", ".join(f"m.{c}" for c in COLUMNS)


def _to_db(values: Mapping[str, Any]) -> dict:
    out: dict = {}
    for key, value in values.items():
        if key not in WRITABLE:
            raise KeyError(f"Unknown member column: {key}")
        if isinstance(value, UserType):
            value = value.value
        if key == "job_experience" and value is not None:
            value = json.dumps(value)
        out[key] = value
    return out


def _row_to_member(r: dict) -> Member:
    job_experience = r.get("job_experience")
    if isinstance(job_experience, (str, bytes, bytearray)):
        job_experience = json.loads(job_experience)

    data = {c: r.get(c) for c in COLUMNS}
    data.update(
        member_id=int(r["member_id"]),
        user_type=UserType(r["user_type"]),
        job_experience=job_experience,
    )
    return Member(**data)


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT} FROM members m WHERE m.member_id=%s", (int(member_id),))
            row = fetchone(cur)
            return _row_to_member(row) if row else None

    def find_missing_ids(self, member_ids: Iterable[int]) -> Set[int]:
        wanted = {int(i) for i in member_ids}
        if not wanted:
            return set()
        placeholders = ", ".join(["%s"] * len(wanted))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT member_id FROM members WHERE member_id IN ({placeholders})", tuple(wanted))
            found = {int(r["member_id"]) for r in fetchall(cur)}
        return wanted - found

    def list_page(self, *, filters: QueryFilter, offset: int, limit: int) -> Tuple[Sequence[Member], int]:
        where, params = filters.compile()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM members m {where}", params)
            total = int(fetchone(cur)["total"])
            cur.execute(
                f"""
                SELECT {_SELECT}
                FROM members m
                {where}
                ORDER BY m.created_at DESC, m.member_id DESC
                LIMIT %s OFFSET %s
                """,
                params + (int(limit), int(offset)),
            )
            return [_row_to_member(r) for r in fetchall(cur)], total

    def list_for_roster(self, *, filters: QueryFilter) -> Sequence[RosterMember]:
        where, params = filters.compile()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT m.member_id, m.first_name, m.last_name, m.middle_name, m.image
                FROM members m
                {where}
                ORDER BY m.last_name ASC, m.first_name ASC
                """,
                params,
            )
            return [
                RosterMember(
                    member_id=int(r["member_id"]),
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    middle_name=r.get("middle_name"),
                    image=r.get("image"),
                )
                for r in fetchall(cur)
            ]

    def create(self, values: Mapping[str, Any]) -> int:
        data = _to_db(values)
        cols = ", ".join(data)
        placeholders = ", ".join(["%s"] * len(data))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO members({cols}) VALUES({placeholders})", tuple(data.values()))
            return int(cur.lastrowid)

    def update(self, member_id: int, values: Mapping[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            update_columns(cur, table="members", key_column="member_id", key=member_id, values=_to_db(values))

    def delete_by_id(self, member_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE member_id=%s", (int(member_id),))
            return cur.rowcount > 0
