from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import to_datetime
from ..common.pagination import Page
from ..core.exceptions import NotFoundError
from ..members.repository import MemberRepository
from .model import PrayerRequest
from .repository import PrayerRequestRepository, prayer_request_filter
from .schemas import PrayerRequestCreate, PrayerRequestListQuery, PrayerRequestUpdate

logger = logging.getLogger(__name__)


class PrayerRequestService:
    def __init__(self, prayer_requests: PrayerRequestRepository, members: MemberRepository):
        self._prayer_requests = prayer_requests
        self._members = members

    def _ensure_member_exists(self, member_id: Optional[int]) -> None:
        if member_id is not None and not self._members.get_by_id(int(member_id)):
            raise NotFoundError("Member not found")

    def list(self, query: PrayerRequestListQuery) -> Page[PrayerRequest]:
        items, total = self._prayer_requests.list_page(
            filters=prayer_request_filter(query), offset=query.offset, limit=query.limit
        )
        return Page.build(items, total_count=total, query=query)

    def get(self, prayer_request_id: int) -> PrayerRequest:
        prayer_request = self._prayer_requests.get_by_id(int(prayer_request_id))
        if not prayer_request:
            raise NotFoundError("Prayer request not found")
        return prayer_request

    def create(self, data: PrayerRequestCreate) -> PrayerRequest:
        self._ensure_member_exists(data.member_id)

        values = data.model_dump()
        values["date_to_pray"] = to_datetime(data.date_to_pray)
        prayer_request_id = self._prayer_requests.create(values)
        logger.info("Created prayer request %s", prayer_request_id)
        return self.get(prayer_request_id)

    def update(self, prayer_request_id: int, data: PrayerRequestUpdate) -> PrayerRequest:
        current = self.get(prayer_request_id)

        changes = data.changes()
        self._ensure_member_exists(changes.get("member_id"))
        if "date_to_pray" in changes:
            changes["date_to_pray"] = to_datetime(changes["date_to_pray"])

        if changes:
            self._prayer_requests.update(current.prayer_request_id, changes)
            logger.info("Updated prayer request %s (%s)", current.prayer_request_id, ", ".join(sorted(changes)))
        return self.get(prayer_request_id)

    def delete(self, prayer_request_id: int) -> dict:
        self.get(prayer_request_id)
        self._prayer_requests.delete_by_id(int(prayer_request_id))
        logger.info("Deleted prayer request %s", prayer_request_id)
        return {"success": True}
