from __future__ import annotations

from flask import Flask

from ..common.validators import validate
from ..common.web import AdminContext, admin_required, json_body, ok, query_args
from ..container import Container
from .schemas import MemberCreate, MemberListQuery, MemberUpdate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/members", methods=["GET"], endpoint="members_list")
    @admin_required
    def members_list(admin: AdminContext):
        query = validate(MemberListQuery, query_args())
        return ok(container.member_service.list(query))

    @app.route("/api/members/<int:member_id>", methods=["GET"], endpoint="members_get")
    @admin_required
    def members_get(admin: AdminContext, member_id: int):
        return ok(container.member_service.get(member_id))

    @app.route("/api/members", methods=["POST"], endpoint="members_create")
    @admin_required
    def members_create(admin: AdminContext):
        data = validate(MemberCreate, json_body())
        return ok(container.member_service.create(data), 201)

    @app.route("/api/members/<int:member_id>", methods=["PUT", "PATCH"], endpoint="members_update")
    @admin_required
    def members_update(admin: AdminContext, member_id: int):
        data = validate(MemberUpdate, json_body())
        return ok(container.member_service.update(member_id, data))

    @app.route("/api/members/<int:member_id>", methods=["DELETE"], endpoint="members_delete")
    @admin_required
    def members_delete(admin: AdminContext, member_id: int):
        return ok(container.member_service.delete(member_id))
