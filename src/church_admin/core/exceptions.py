from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "BAD_REQUEST"
    status_code = 400

    def __init__(self, message: str = "Invalid input", errors: Optional[Sequence[dict]] = None):
        super().__init__(message)
        self.errors = list(errors or [])

    def to_dict(self) -> dict:
        out = super().to_dict()
        if self.errors:
            out["fields"] = self.errors
        return out


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or no admin is logged in."""

    code = "UNAUTHORIZED"
    status_code = 401


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    code = "NOT_FOUND"
    status_code = 404


class ConflictError(DomainError):
    """Raised when a uniqueness rule would be violated."""

    code = "CONFLICT"
    status_code = 409
