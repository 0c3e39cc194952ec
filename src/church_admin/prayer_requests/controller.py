from __future__ import annotations

from flask import Flask

from ..common.validators import validate
from ..common.web import AdminContext, admin_required, json_body, ok, query_args
from ..container import Container
from .schemas import PrayerRequestCreate, PrayerRequestListQuery, PrayerRequestUpdate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/prayer-requests", methods=["GET"], endpoint="prayer_requests_list")
    @admin_required
    def prayer_requests_list(admin: AdminContext):
        query = validate(PrayerRequestListQuery, query_args())
        return ok(container.prayer_request_service.list(query))

    @app.route("/api/prayer-requests/<int:prayer_request_id>", methods=["GET"], endpoint="prayer_requests_get")
    @admin_required
    def prayer_requests_get(admin: AdminContext, prayer_request_id: int):
        return ok(container.prayer_request_service.get(prayer_request_id))

    @app.route("/api/prayer-requests", methods=["POST"], endpoint="prayer_requests_create")
    @admin_required
    def prayer_requests_create(admin: AdminContext):
        data = validate(PrayerRequestCreate, json_body())
        return ok(container.prayer_request_service.create(data), 201)

    @app.route(
        "/api/prayer-requests/<int:prayer_request_id>", methods=["PUT", "PATCH"], endpoint="prayer_requests_update"
    )
    @admin_required
    def prayer_requests_update(admin: AdminContext, prayer_request_id: int):
        data = validate(PrayerRequestUpdate, json_body())
        return ok(container.prayer_request_service.update(prayer_request_id, data))

    @app.route(
        "/api/prayer-requests/<int:prayer_request_id>", methods=["DELETE"], endpoint="prayer_requests_delete"
    )
    @admin_required
    def prayer_requests_delete(admin: AdminContext, prayer_request_id: int):
        return ok(container.prayer_request_service.delete(prayer_request_id))
