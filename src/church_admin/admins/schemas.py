from __future__ import annotations

from typing import Annotated

from pydantic import StringConstraints

from ..common.schemas import RequiredStr, Schema

# Credentials are compared verbatim against the stored hash.
Password = Annotated[str, StringConstraints(strip_whitespace=False, min_length=1)]


class LoginInput(Schema):
    model_config = {**Schema.model_config, "str_strip_whitespace": False}

    username: RequiredStr
    password: Password
