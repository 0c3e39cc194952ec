from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar

import pydantic

from ..core.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def blank_to_none(value: Any) -> Any:
    """Form inputs send "" for untouched optional fields."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def validate(schema: Type[SchemaT], payload: Optional[Mapping[str, Any]]) -> SchemaT:
    """Validate raw input against a schema, raising the domain ValidationError."""
    try:
        return schema.model_validate(dict(payload or {}))
    except pydantic.ValidationError as e:
        raise ValidationError("Invalid input", errors=_field_errors(e)) from e


def _field_errors(error: pydantic.ValidationError) -> list[dict]:
    out: list[dict] = []
    for item in error.errors():
        field = ".".join(str(p) for p in item.get("loc", ())) or "__root__"
        out.append({"field": field, "message": item.get("msg", "Invalid value")})
    return out
