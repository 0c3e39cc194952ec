from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence, Tuple

from ..common.query import QueryFilter
from ..core.enums import OfferingType, UserType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, update_columns
from ..members.model import MemberSummary
from .model import Offering, OfferingStatRow
from .repository import OfferingRepository

WRITABLE = frozenset({"member_id", "date", "type", "amount", "note", "receipt_number", "is_anonymous"})

_SELECT = """
    o.offering_id, o.member_id, o.date, o.type, o.amount, o.note,
    o.receipt_number, o.is_anonymous, o.created_at, o.updated_at,
    m.first_name, m.last_name, m.user_type, m.email, m.cellphone_number
"""

_FROM = "FROM tithes_offerings o LEFT JOIN members m ON m.member_id = o.member_id"


def _to_db(values: Mapping[str, Any]) -> dict:
    out: dict = {}
    for key, value in values.items():
        if key not in WRITABLE:
            raise KeyError(f"Unknown offering column: {key}")
        if isinstance(value, OfferingType):
            value = value.value
        if key == "is_anonymous" and value is not None:
            value = 1 if value else 0
        out[key] = value
    return out


def _row_to_offering(r: dict) -> Offering:
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
    return Offering(
        offering_id=int(r["offering_id"]),
        date=r["date"],
        type=OfferingType(r["type"]),
        amount=Decimal(r["amount"]),
        is_anonymous=bool(r.get("is_anonymous")),
        member_id=int(r["member_id"]) if r.get("member_id") is not None else None,
        note=r.get("note"),
        receipt_number=r.get("receipt_number"),
        member=member,
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLOfferingRepository(OfferingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, offering_id: int) -> Optional[Offering]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT} {_FROM} WHERE o.offering_id=%s", (int(offering_id),))
            r = fetchone(cur)
            return _row_to_offering(r) if r else None

    def find_by_receipt_number(self, receipt_number: str, *, exclude_id: Optional[int] = None) -> Optional[Offering]:
        clauses = ["o.receipt_number=%s"]
        params: list[object] = [receipt_number]
        if exclude_id is not None:
            clauses.append("o.offering_id<>%s")
            params.append(int(exclude_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT} {_FROM} WHERE {where} LIMIT 1", tuple(params))
            r = fetchone(cur)
            return _row_to_offering(r) if r else None

    def list_page(
        self, *, filters: QueryFilter, offset: int, limit: int
    ) -> Tuple[Sequence[Offering], int, Decimal]:
        where, params = filters.compile()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT COUNT(*) AS total, COALESCE(SUM(o.amount), 0) AS total_amount {_FROM} {where}",
                params,
            )
            agg = fetchone(cur)
            cur.execute(
                f"""
                SELECT {_SELECT}
                {_FROM}
                {where}
                ORDER BY o.date DESC, o.offering_id DESC
                LIMIT %s OFFSET %s
                """,
                params + (int(limit), int(offset)),
            )
            items = [_row_to_offering(r) for r in fetchall(cur)]
            return items, int(agg["total"]), Decimal(agg["total_amount"])

    def list_for_stats(self, *, filters: QueryFilter) -> Sequence[OfferingStatRow]:
        where, params = filters.compile()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT o.type, o.amount, o.date, o.is_anonymous, m.user_type {_FROM} {where}", params)
            return [
                OfferingStatRow(
                    type=OfferingType(r["type"]),
                    amount=Decimal(r["amount"]),
                    date=r["date"],
                    is_anonymous=bool(r.get("is_anonymous")),
                    user_type=UserType(r["user_type"]) if r.get("user_type") else None,
                )
                for r in fetchall(cur)
            ]

    def create(self, values: Mapping[str, Any]) -> int:
        data = _to_db(values)
        cols = ", ".join(data)
        placeholders = ", ".join(["%s"] * len(data))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO tithes_offerings({cols}) VALUES({placeholders})", tuple(data.values()))
            return int(cur.lastrowid)

    def update(self, offering_id: int, values: Mapping[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            update_columns(cur, table="tithes_offerings", key_column="offering_id", key=offering_id, values=_to_db(values))

    def delete_by_id(self, offering_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tithes_offerings WHERE offering_id=%s", (int(offering_id),))
            return cur.rowcount > 0
