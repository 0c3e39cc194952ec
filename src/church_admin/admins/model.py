from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Admin:
    admin_id: int
    username: str
    password_hash: str
    created_at: Optional[datetime] = None
