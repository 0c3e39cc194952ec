from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError
from .repository import AdminRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass(frozen=True)
class SessionAdmin:
    """What we store into the Flask session after login."""

    admin_id: int
    username: str


class AuthService:
    """Use case: authenticate an admin (login)."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def login(self, username: str, password: str) -> SessionAdmin:
        admin = self._admins.get_by_username(username)
        if not admin:
            logger.warning("Login failed for unknown admin %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(admin.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("Login failed for admin %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("Admin %s logged in", admin.username)
        return SessionAdmin(admin_id=admin.admin_id, username=admin.username)
