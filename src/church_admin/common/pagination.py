from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from pydantic import Field

from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from .schemas import Schema

T = TypeVar("T")


class PageQuery(Schema):
    """Pagination part shared by every list input."""

    page: int = Field(DEFAULT_PAGE, ge=1)
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def total_pages(total_count: int, limit: int) -> int:
    return math.ceil(total_count / limit) if total_count else 0


@dataclass(frozen=True)
class Page(Generic[T]):
    items: Sequence[T]
    total_count: int
    total_pages: int
    current_page: int

    @classmethod
    def build(cls, items: Sequence[T], *, total_count: int, query: PageQuery) -> "Page[T]":
        return cls(
            items=list(items),
            total_count=int(total_count),
            total_pages=total_pages(int(total_count), query.limit),
            current_page=query.page,
        )
