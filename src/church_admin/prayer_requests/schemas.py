from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BeforeValidator, model_validator

from ..common.pagination import PageQuery
from ..common.schemas import OptionalDate, OptionalInt, OptionalStr, RequiredStr, Schema, reject_nulls
from ..common.validators import blank_to_none
from ..core.enums import PrayerRequestStatus, UserType

OptionalStatus = Annotated[Optional[PrayerRequestStatus], BeforeValidator(blank_to_none)]
OptionalUserType = Annotated[Optional[UserType], BeforeValidator(blank_to_none)]


class PrayerRequestCreate(Schema):
    member_id: OptionalInt = None
    title: RequiredStr
    description: RequiredStr
    note: OptionalStr = None
    date_to_pray: OptionalDate = None
    status: PrayerRequestStatus = PrayerRequestStatus.PENDING


class PrayerRequestUpdate(Schema):
    member_id: OptionalInt = None
    title: Optional[RequiredStr] = None
    description: Optional[RequiredStr] = None
    note: OptionalStr = None
    date_to_pray: OptionalDate = None
    status: Optional[PrayerRequestStatus] = None

    @model_validator(mode="after")
    def _not_null(self) -> "PrayerRequestUpdate":
        reject_nulls(self, {"title", "description", "status"})
        return self


class PrayerRequestFilters(Schema):
    status: OptionalStatus = None
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    search: OptionalStr = None
    user_type: OptionalUserType = None


class PrayerRequestListQuery(PageQuery, PrayerRequestFilters):
    pass
