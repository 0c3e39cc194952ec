from __future__ import annotations

from flask import Flask

from ..common.validators import validate
from ..common.web import AdminContext, admin_required, ok, query_args
from ..container import Container
from ..offerings.schemas import OfferingFilters
from ..prayer_requests.schemas import PrayerRequestFilters


def register(app: Flask, container: Container) -> None:
    @app.route("/api/offerings/stats", methods=["GET"], endpoint="offerings_stats")
    @admin_required
    def offerings_stats(admin: AdminContext):
        filters = validate(OfferingFilters, query_args())
        return ok(container.stats_service.offering_stats(filters))

    @app.route("/api/prayer-requests/stats", methods=["GET"], endpoint="prayer_requests_stats")
    @admin_required
    def prayer_requests_stats(admin: AdminContext):
        filters = validate(PrayerRequestFilters, query_args())
        return ok(container.stats_service.prayer_request_stats(filters))
