from __future__ import annotations

import logging

from ..common.datetime_utils import to_datetime
from ..common.pagination import Page
from ..core.exceptions import NotFoundError
from .model import Member
from .repository import MemberRepository, member_filter
from .schemas import DATE_FIELDS, MemberCreate, MemberListQuery, MemberUpdate

logger = logging.getLogger(__name__)


def _with_datetimes(values: dict) -> dict:
    """Date-only inputs become midnight datetimes; absent optional dates stay NULL."""
    out = dict(values)
    for field in DATE_FIELDS:
        if field in out:
            out[field] = to_datetime(out[field])
    return out


class MemberService:
    """Use case: manage the member/guest directory."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def list(self, query: MemberListQuery) -> Page[Member]:
        items, total = self._members.list_page(filters=member_filter(query), offset=query.offset, limit=query.limit)
        return Page.build(items, total_count=total, query=query)

    def get(self, member_id: int) -> Member:
        member = self._members.get_by_id(int(member_id))
        if not member:
            raise NotFoundError("Member not found")
        return member

    def create(self, data: MemberCreate) -> Member:
        member_id = self._members.create(_with_datetimes(data.model_dump()))
        logger.info("Created member %s (%s, %s)", member_id, data.last_name, data.first_name)
        return self.get(member_id)

    def update(self, member_id: int, data: MemberUpdate) -> Member:
        self.get(member_id)

        changes = _with_datetimes(data.changes())
        if changes:
            self._members.update(int(member_id), changes)
            logger.info("Updated member %s (%s)", member_id, ", ".join(sorted(changes)))
        return self.get(member_id)

    def delete(self, member_id: int) -> dict:
        self.get(member_id)
        self._members.delete_by_id(int(member_id))
        logger.info("Deleted member %s", member_id)
        return {"success": True}
