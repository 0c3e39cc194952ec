from __future__ import annotations

from flask import Flask, session

from ..common.validators import validate
from ..common.web import AdminContext, admin_required, json_body, ok
from ..container import Container
from .schemas import LoginInput


def _identity(admin_id: int, username: str) -> dict:
    return {"id": admin_id, "username": username}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = validate(LoginInput, json_body())
        s_admin = container.auth_service.login(data.username, data.password)

        session.clear()
        session["admin_id"] = s_admin.admin_id
        session["admin_username"] = s_admin.username
        return ok(_identity(s_admin.admin_id, s_admin.username))

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return ok({"success": True})

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @admin_required
    def auth_me(admin: AdminContext):
        return ok(_identity(admin.admin_id, admin.username))
