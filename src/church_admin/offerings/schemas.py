from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BeforeValidator, Field, model_validator

from ..common.pagination import PageQuery
from ..common.schemas import OptionalBool, OptionalDate, OptionalInt, OptionalStr, Schema, reject_nulls
from ..common.validators import blank_to_none
from ..core.enums import OfferingType, UserType

Amount = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]
OptionalOfferingType = Annotated[Optional[OfferingType], BeforeValidator(blank_to_none)]
OptionalUserType = Annotated[Optional[UserType], BeforeValidator(blank_to_none)]


class OfferingCreate(Schema):
    member_id: OptionalInt = None
    date: dt.date
    type: OfferingType
    amount: Amount
    note: OptionalStr = None
    receipt_number: OptionalStr = None
    is_anonymous: bool = False


class OfferingUpdate(Schema):
    member_id: OptionalInt = None
    date: Optional[dt.date] = None
    type: Optional[OfferingType] = None
    amount: Optional[Amount] = None
    note: OptionalStr = None
    receipt_number: OptionalStr = None
    is_anonymous: Optional[bool] = None

    @model_validator(mode="after")
    def _not_null(self) -> "OfferingUpdate":
        reject_nulls(self, {"date", "type", "amount", "is_anonymous"})
        return self


class OfferingFilters(Schema):
    type: OptionalOfferingType = None
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    search: OptionalStr = None
    user_type: OptionalUserType = None
    is_anonymous: OptionalBool = None


class OfferingListQuery(PageQuery, OfferingFilters):
    pass
