from __future__ import annotations

from flask import Flask

from ..common.http import make_api_view
from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    api_view = make_api_view(container.perf)

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @api_view("Failed to fetch dashboard statistics")
    def dashboard_stats():
        return ok(container.dashboard_service.stats())
