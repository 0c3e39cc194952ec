from __future__ import annotations

from flask import Flask

from ..common.validators import validate
from ..common.web import AdminContext, admin_required, json_body, ok, query_args
from ..container import Container
from .schemas import AttendanceCreate, AttendanceListQuery, AttendanceUpdate, RosterCreate, RosterQuery, RosterReplace


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @admin_required
    def attendance_list(admin: AdminContext):
        query = validate(AttendanceListQuery, query_args())
        return ok(container.attendance_service.list(query))

    @app.route("/api/attendance/<int:attendance_id>", methods=["GET"], endpoint="attendance_get")
    @admin_required
    def attendance_get(admin: AdminContext, attendance_id: int):
        return ok(container.attendance_service.get(attendance_id))

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    @admin_required
    def attendance_create(admin: AdminContext):
        data = validate(AttendanceCreate, json_body())
        return ok(container.attendance_service.create(data), 201)

    @app.route("/api/attendance/<int:attendance_id>", methods=["PUT", "PATCH"], endpoint="attendance_update")
    @admin_required
    def attendance_update(admin: AdminContext, attendance_id: int):
        data = validate(AttendanceUpdate, json_body())
        return ok(container.attendance_service.update(attendance_id, data))

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    @admin_required
    def attendance_delete(admin: AdminContext, attendance_id: int):
        return ok(container.attendance_service.delete(attendance_id))

    # Roster
    @app.route("/api/attendance/roster", methods=["GET"], endpoint="attendance_roster")
    @admin_required
    def attendance_roster(admin: AdminContext):
        query = validate(RosterQuery, query_args())
        return ok(container.roster_service.get_roster(query))

    @app.route("/api/attendance/roster", methods=["POST"], endpoint="attendance_roster_create")
    @admin_required
    def attendance_roster_create(admin: AdminContext):
        data = validate(RosterCreate, json_body())
        return ok(container.roster_service.create_with_roster(data), 201)

    @app.route("/api/attendance/<int:attendance_id>/roster", methods=["PUT"], endpoint="attendance_roster_replace")
    @admin_required
    def attendance_roster_replace(admin: AdminContext, attendance_id: int):
        data = validate(RosterReplace, json_body())
        return ok(container.roster_service.replace_roster(attendance_id, data))
