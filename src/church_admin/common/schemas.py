from __future__ import annotations

from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

from .validators import blank_to_none


class Schema(BaseModel):
    """Base for API inputs: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    def changes(self) -> dict:
        """Only the fields the caller actually sent (omitted = unchanged)."""
        return self.model_dump(exclude_unset=True)


RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
OptionalStr = Annotated[Optional[str], BeforeValidator(blank_to_none)]
OptionalDate = Annotated[Optional[date], BeforeValidator(blank_to_none)]
OptionalInt = Annotated[Optional[int], BeforeValidator(blank_to_none)]
OptionalBool = Annotated[Optional[bool], BeforeValidator(blank_to_none)]


def reject_nulls(schema: BaseModel, fields: set[str]) -> None:
    """Explicit null is only allowed on nullable columns."""
    for name in sorted(fields & schema.model_fields_set):
        if getattr(schema, name) is None:
            raise ValueError(f"{name} cannot be null")
