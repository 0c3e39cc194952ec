from __future__ import annotations

from typing import Optional, Protocol

from .model import Admin


class AdminRepository(Protocol):
    def get_by_username(self, username: str) -> Optional[Admin]:
        raise NotImplementedError
