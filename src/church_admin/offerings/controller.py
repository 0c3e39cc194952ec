from __future__ import annotations

from flask import Flask

from ..common.validators import validate
from ..common.web import AdminContext, admin_required, json_body, ok, query_args
from ..container import Container
from .schemas import OfferingCreate, OfferingListQuery, OfferingUpdate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/offerings", methods=["GET"], endpoint="offerings_list")
    @admin_required
    def offerings_list(admin: AdminContext):
        query = validate(OfferingListQuery, query_args())
        return ok(container.offering_service.list(query))

    @app.route("/api/offerings/<int:offering_id>", methods=["GET"], endpoint="offerings_get")
    @admin_required
    def offerings_get(admin: AdminContext, offering_id: int):
        return ok(container.offering_service.get(offering_id))

    @app.route("/api/offerings", methods=["POST"], endpoint="offerings_create")
    @admin_required
    def offerings_create(admin: AdminContext):
        data = validate(OfferingCreate, json_body())
        return ok(container.offering_service.create(data), 201)

    @app.route("/api/offerings/<int:offering_id>", methods=["PUT", "PATCH"], endpoint="offerings_update")
    @admin_required
    def offerings_update(admin: AdminContext, offering_id: int):
        data = validate(OfferingUpdate, json_body())
        return ok(container.offering_service.update(offering_id, data))

    @app.route("/api/offerings/<int:offering_id>", methods=["DELETE"], endpoint="offerings_delete")
    @admin_required
    def offerings_delete(admin: AdminContext, offering_id: int):
        return ok(container.offering_service.delete(offering_id))
