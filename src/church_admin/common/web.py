from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import wraps
from typing import Any, Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, DomainError, ValidationError
from .serialization import to_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminContext:
    """Identity of the logged-in admin, handed to every protected view."""

    admin_id: int
    username: str


def current_admin() -> Optional[AdminContext]:
    if "admin_id" not in session:
        return None
    return AdminContext(admin_id=int(session["admin_id"]), username=str(session.get("admin_username", "")))


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        admin = current_admin()
        if admin is None:
            raise AuthenticationError("Login required")
        return view(admin, *args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def query_args() -> dict:
    return request.args.to_dict()


def ok(value: Any, status: int = 200):
    return jsonify(to_json(value)), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if e.status_code >= 500:
            logger.error("Domain error: %s", e)
        return jsonify({"error": e.to_dict()}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        code = (e.name or "ERROR").upper().replace(" ", "_")
        return jsonify({"error": {"code": code, "message": e.description}}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        message = str(e) if app.config.get("DEBUG") else "Internal server error"
        return jsonify({"error": {"code": "INTERNAL_SERVER_ERROR", "message": message}}), 500
