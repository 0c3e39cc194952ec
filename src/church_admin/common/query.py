"""List-query filter builder.

A ``QueryFilter`` is a conjunction of typed predicates. Repositories compile it
into a parameterised MySQL ``WHERE`` clause; in-memory repositories evaluate
the very same filter with ``matches`` so both honour identical semantics.

Every builder method skips its predicate when the value is unset, so an empty
filter compiles to no ``WHERE`` clause at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .datetime_utils import end_of_day, start_of_day


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class Equals:
    column: str
    value: Any

    def to_sql(self) -> Tuple[str, List[Any]]:
        return f"{self.column}=%s", [_plain(self.value)]

    def matches(self, row: Mapping[str, Any]) -> bool:
        return _plain(row.get(self.column)) == _plain(self.value)


@dataclass(frozen=True)
class DateRange:
    """Inclusive range: from the start of ``start`` to the end of ``end``."""

    column: str
    start: Optional[date] = None
    end: Optional[date] = None

    def to_sql(self) -> Tuple[str, List[Any]]:
        clauses: list[str] = []
        params: list[Any] = []
        if self.start is not None:
            clauses.append(f"{self.column}>=%s")
            params.append(start_of_day(self.start))
        if self.end is not None:
            clauses.append(f"{self.column}<=%s")
            params.append(end_of_day(self.end))
        return " AND ".join(clauses), params

    def matches(self, row: Mapping[str, Any]) -> bool:
        value = row.get(self.column)
        if value is None:
            return False
        if not isinstance(value, datetime):
            value = start_of_day(value)
        if self.start is not None and value < start_of_day(self.start):
            return False
        if self.end is not None and value > end_of_day(self.end):
            return False
        return True


@dataclass(frozen=True)
class Search:
    """Case-insensitive substring match OR'd across columns."""

    columns: Tuple[str, ...]
    text: str

    def to_sql(self) -> Tuple[str, List[Any]]:
        pattern = f"%{_escape_like(self.text.lower())}%"
        parts = [f"LOWER({c}) LIKE %s" for c in self.columns]
        return "(" + " OR ".join(parts) + ")", [pattern] * len(parts)

    def matches(self, row: Mapping[str, Any]) -> bool:
        needle = self.text.lower()
        for c in self.columns:
            value = _plain(row.get(c))
            if value is not None and needle in str(value).lower():
                return True
        return False


@dataclass(frozen=True)
class Flag:
    column: str
    value: bool

    def to_sql(self) -> Tuple[str, List[Any]]:
        return f"{self.column}=%s", [1 if self.value else 0]

    def matches(self, row: Mapping[str, Any]) -> bool:
        return bool(row.get(self.column)) is self.value


class QueryFilter:
    def __init__(self) -> None:
        self._predicates: list = []

    @property
    def predicates(self) -> Sequence:
        return tuple(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)

    def equals(self, column: str, value: Any) -> "QueryFilter":
        if value is not None:
            self._predicates.append(Equals(column, value))
        return self

    def date_range(self, column: str, start: Optional[date], end: Optional[date]) -> "QueryFilter":
        if start is not None or end is not None:
            self._predicates.append(DateRange(column, start, end))
        return self

    def search(self, columns: Sequence[str], text: Optional[str]) -> "QueryFilter":
        text = (text or "").strip()
        if text and columns:
            self._predicates.append(Search(tuple(columns), text))
        return self

    def flag(self, column: str, value: Optional[bool]) -> "QueryFilter":
        if value is not None:
            self._predicates.append(Flag(column, bool(value)))
        return self

    def compile(self) -> Tuple[str, Tuple[Any, ...]]:
        """Return ``("WHERE ...", params)``, or ``("", ())`` when empty."""
        clauses: list[str] = []
        params: list[Any] = []
        for p in self._predicates:
            sql, values = p.to_sql()
            clauses.append(sql)
            params.extend(values)
        if not clauses:
            return "", ()
        return "WHERE " + " AND ".join(clauses), tuple(params)

    def matches(self, row: Mapping[str, Any]) -> bool:
        return all(p.matches(row) for p in self._predicates)
