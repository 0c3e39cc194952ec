from __future__ import annotations

from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, EmailStr, model_validator

from ..common.pagination import PageQuery
from ..common.schemas import OptionalDate, OptionalStr, RequiredStr, Schema, reject_nulls
from ..common.validators import blank_to_none
from ..core.constants import DEFAULT_CITIZENSHIP
from ..core.enums import UserType

OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(blank_to_none)]
OptionalUserType = Annotated[Optional[UserType], BeforeValidator(blank_to_none)]

DATE_FIELDS = (
    "date_of_birth",
    "date_accepted_the_lord",
    "first_day_of_church_attendance",
    "date_water_baptized",
    "date_spirit_baptized",
)


class MemberCreate(Schema):
    user_type: UserType = UserType.MEMBER
    image: OptionalStr = None
    last_name: RequiredStr
    first_name: RequiredStr
    middle_name: OptionalStr = None
    father_name: OptionalStr = None
    mother_name: OptionalStr = None
    date_of_birth: date
    place_of_birth: RequiredStr
    sex: RequiredStr
    height: OptionalStr = None
    weight: OptionalStr = None
    present_address: OptionalStr = None
    occupation: OptionalStr = None
    blood_type: OptionalStr = None
    job_experience: Optional[Any] = None
    cellphone_number: OptionalStr = None
    home_telephone_number: OptionalStr = None
    email: OptionalEmail = None
    spouse_name: OptionalStr = None
    birth_order: OptionalStr = None
    citizenship: RequiredStr = DEFAULT_CITIZENSHIP
    previous_religion: OptionalStr = None
    date_accepted_the_lord: OptionalDate = None
    person_led_you_to_the_lord: OptionalStr = None
    first_day_of_church_attendance: OptionalDate = None
    date_water_baptized: OptionalDate = None
    date_spirit_baptized: OptionalDate = None


class MemberUpdate(Schema):
    user_type: Optional[UserType] = None
    image: OptionalStr = None
    last_name: Optional[RequiredStr] = None
    first_name: Optional[RequiredStr] = None
    middle_name: OptionalStr = None
    father_name: OptionalStr = None
    mother_name: OptionalStr = None
    date_of_birth: Optional[date] = None
    place_of_birth: Optional[RequiredStr] = None
    sex: Optional[RequiredStr] = None
    height: OptionalStr = None
    weight: OptionalStr = None
    present_address: OptionalStr = None
    occupation: OptionalStr = None
    blood_type: OptionalStr = None
    job_experience: Optional[Any] = None
    cellphone_number: OptionalStr = None
    home_telephone_number: OptionalStr = None
    email: OptionalEmail = None
    spouse_name: OptionalStr = None
    birth_order: OptionalStr = None
    citizenship: Optional[RequiredStr] = None
    previous_religion: OptionalStr = None
    date_accepted_the_lord: OptionalDate = None
    person_led_you_to_the_lord: OptionalStr = None
    first_day_of_church_attendance: OptionalDate = None
    date_water_baptized: OptionalDate = None
    date_spirit_baptized: OptionalDate = None

    @model_validator(mode="after")
    def _required_columns_not_null(self) -> "MemberUpdate":
        reject_nulls(
            self,
            {"user_type", "last_name", "first_name", "date_of_birth", "place_of_birth", "sex", "citizenship"},
        )
        return self


class MemberListQuery(PageQuery):
    search: OptionalStr = None
    sex: OptionalStr = None
    user_type: OptionalUserType = None
