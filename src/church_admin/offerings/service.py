from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import to_datetime
from ..common.pagination import total_pages
from ..core.exceptions import ConflictError, NotFoundError
from ..members.repository import MemberRepository
from .model import Offering, OfferingPage
from .repository import OfferingRepository, offering_filter
from .schemas import OfferingCreate, OfferingListQuery, OfferingUpdate

logger = logging.getLogger(__name__)


class OfferingService:
    """Use case: record tithes and offerings."""

    def __init__(self, offerings: OfferingRepository, members: MemberRepository):
        self._offerings = offerings
        self._members = members

    def _ensure_member_exists(self, member_id: Optional[int]) -> None:
        if member_id is not None and not self._members.get_by_id(int(member_id)):
            raise NotFoundError("Member not found")

    def _ensure_receipt_unique(self, receipt_number: Optional[str], *, exclude_id: Optional[int] = None) -> None:
        if receipt_number and self._offerings.find_by_receipt_number(receipt_number, exclude_id=exclude_id):
            raise ConflictError("Receipt number already exists")

    def list(self, query: OfferingListQuery) -> OfferingPage:
        items, total, total_amount = self._offerings.list_page(
            filters=offering_filter(query), offset=query.offset, limit=query.limit
        )
        return OfferingPage(
            items=list(items),
            total_count=total,
            total_pages=total_pages(total, query.limit),
            current_page=query.page,
            total_amount=total_amount,
        )

    def get(self, offering_id: int) -> Offering:
        offering = self._offerings.get_by_id(int(offering_id))
        if not offering:
            raise NotFoundError("Tithes and offerings record not found")
        return offering

    def create(self, data: OfferingCreate) -> Offering:
        self._ensure_member_exists(data.member_id)
        self._ensure_receipt_unique(data.receipt_number)

        values = data.model_dump()
        values["date"] = to_datetime(data.date)
        offering_id = self._offerings.create(values)
        logger.info("Created offering %s (%s %s)", offering_id, data.type.value, data.amount)
        return self.get(offering_id)

    def update(self, offering_id: int, data: OfferingUpdate) -> Offering:
        current = self.get(offering_id)

        changes = data.changes()
        if changes.get("member_id") is not None:
            self._ensure_member_exists(changes["member_id"])
        if changes.get("receipt_number"):
            self._ensure_receipt_unique(changes["receipt_number"], exclude_id=current.offering_id)
        if "date" in changes:
            changes["date"] = to_datetime(changes["date"])

        if changes:
            self._offerings.update(current.offering_id, changes)
            logger.info("Updated offering %s (%s)", current.offering_id, ", ".join(sorted(changes)))
        return self.get(offering_id)

    def delete(self, offering_id: int) -> dict:
        self.get(offering_id)
        self._offerings.delete_by_id(int(offering_id))
        logger.info("Deleted offering %s", offering_id)
        return {"success": True}
