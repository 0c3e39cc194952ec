from datetime import date, datetime
from decimal import Decimal

import pytest

from church_admin.attendance.model import RosterEntry
from church_admin.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from church_admin.common.query import QueryFilter
from church_admin.core.enums import AttendanceStatus, OfferingType
from church_admin.database.bootstrap import SCHEMA_PATH, _iter_sql_statements, _strip_line_comments
from church_admin.database.mysql_base import db_cursor, update_columns
from church_admin.offerings.mysql_offering_repository import MySQLOfferingRepository


class FakeCursor:
    def __init__(self, results):
        self._results = list(results)
        self.executed = []
        self.lastrowid = 7
        self.rowcount = 1
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), tuple(params)))

    def executemany(self, sql, rows):
        self.executed.append((" ".join(sql.split()), [tuple(r) for r in rows]))

    def fetchone(self):
        return self._results.pop(0) if self._results else None

    def fetchall(self):
        return self._results.pop(0) if self._results else []

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self.cur = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, *results):
        self.conn = FakeConnection(FakeCursor(results))

    def connect(self, *, with_database=True):
        return self.conn

    @property
    def executed(self):
        return self.conn.cur.executed


def test_db_cursor_commits_on_success():
    factory = FakeConnectionFactory()
    with db_cursor(factory) as (_, cur):
        cur.execute("SELECT 1")

    assert factory.conn.committed and factory.conn.closed
    assert not factory.conn.rolled_back


def test_db_cursor_rolls_back_on_error():
    factory = FakeConnectionFactory()
    with pytest.raises(RuntimeError):
        with db_cursor(factory) as (_, cur):
            cur.execute("DELETE FROM attendance_members")
            raise RuntimeError("boom")

    assert factory.conn.rolled_back and factory.conn.closed
    assert not factory.conn.committed


def test_update_columns_only_touches_given_columns():
    cur = FakeCursor([])
    update_columns(cur, table="members", key_column="member_id", key=3, values={"occupation": "Nurse", "email": None})
    update_columns(cur, table="members", key_column="member_id", key=3, values={})

    assert cur.executed == [("UPDATE members SET occupation=%s, email=%s WHERE member_id=%s", ("Nurse", None, 3))]


def test_schema_splits_into_create_table_statements():
    sql = _strip_line_comments(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(sql))

    tables = [s.split()[5] for s in statements if s.upper().startswith("CREATE TABLE IF NOT EXISTS")]
    assert tables == ["admins", "members", "attendance", "attendance_members", "tithes_offerings", "prayer_requests"]


def _constraint(statement: str, name: str) -> str:
    clause = statement.split(f"CONSTRAINT {name} ", 1)[1]
    clause = clause.split(",\n", 1)[0].split("\n)", 1)[0]
    return " ".join(clause.split())


def test_member_references_null_out_or_cascade_on_delete():
    sql = _strip_line_comments(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = {s.split()[5]: s for s in _iter_sql_statements(sql) if s.upper().startswith("CREATE TABLE")}

    assert _constraint(statements["tithes_offerings"], "fk_tithes_offerings_member").endswith(
        "REFERENCES members(member_id) ON DELETE SET NULL"
    )
    assert _constraint(statements["prayer_requests"], "fk_prayer_requests_member").endswith(
        "REFERENCES members(member_id) ON DELETE SET NULL"
    )
    assert _constraint(statements["attendance_members"], "fk_attendance_members_member").endswith(
        "REFERENCES members(member_id) ON DELETE CASCADE"
    )
    assert _constraint(statements["attendance_members"], "fk_attendance_members_attendance").endswith(
        "REFERENCES attendance(attendance_id) ON DELETE CASCADE"
    )


def test_splitter_ignores_semicolons_inside_quotes():
    assert list(_iter_sql_statements("INSERT INTO t VALUES('a;b'); SELECT 1;")) == [
        "INSERT INTO t VALUES('a;b')",
        "SELECT 1",
    ]


def test_splitter_skips_escaped_quotes():
    assert list(_iter_sql_statements("SELECT 'it\\'s;'; SELECT 2")) == ["SELECT 'it\\'s;'", "SELECT 2"]


def test_offering_list_page_uses_compiled_filter():
    row = {
        "offering_id": 1,
        "member_id": None,
        "date": datetime(2024, 1, 7),
        "type": "TITHE",
        "amount": Decimal("100.00"),
        "note": None,
        "receipt_number": "R-1",
        "is_anonymous": 0,
        "created_at": None,
        "updated_at": None,
        "first_name": None,
        "last_name": None,
        "user_type": None,
        "email": None,
        "cellphone_number": None,
    }
    factory = FakeConnectionFactory({"total": 1, "total_amount": Decimal("100.00")}, [row])
    repo = MySQLOfferingRepository(factory)

    filters = QueryFilter().equals("o.type", OfferingType.TITHE).date_range("o.date", date(2024, 1, 1), None)
    items, total, total_amount = repo.list_page(filters=filters, offset=10, limit=5)

    assert (total, total_amount) == (1, Decimal("100.00"))
    assert items[0].type == OfferingType.TITHE
    assert items[0].member is None
    count_sql, count_params = factory.executed[0]
    page_sql, page_params = factory.executed[1]
    assert "WHERE o.type=%s AND o.date>=%s" in count_sql
    assert count_params == ("TITHE", datetime(2024, 1, 1))
    assert page_sql.endswith("ORDER BY o.date DESC, o.offering_id DESC LIMIT %s OFFSET %s")
    assert page_params == ("TITHE", datetime(2024, 1, 1), 5, 10)


def test_replace_roster_locks_session_and_replaces_rows():
    factory = FakeConnectionFactory({"attendance_id": 3})
    repo = MySQLAttendanceRepository(factory)

    count = repo.replace_roster(
        attendance_id=3,
        entries=[RosterEntry(1, AttendanceStatus.PRESENT), RosterEntry(2, AttendanceStatus.ABSENT)],
    )

    assert count == 2
    statements = [sql for sql, _ in factory.executed]
    assert statements[0].endswith("FOR UPDATE")
    assert statements[1] == "DELETE FROM attendance_members WHERE attendance_id=%s"
    assert factory.executed[2][1] == [(3, 1, "PRESENT"), (3, 2, "ABSENT")]
    assert factory.conn.committed


def test_replace_roster_of_missing_session_returns_none():
    factory = FakeConnectionFactory()
    repo = MySQLAttendanceRepository(factory)

    assert repo.replace_roster(attendance_id=3, entries=[]) is None
    assert len(factory.executed) == 1
