from __future__ import annotations

from flask import Flask

from ..common.guards import login_required, owner_required
from ..common.responses import handle_errors, ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.gantt_service

    @app.route("/gantt-settings", methods=["GET"], endpoint="gantt_settings")
    @login_required
    @handle_errors
    def get_settings():
        return ok(service.to_view(service.get()))

    @app.route("/owner/gantt-settings", methods=["PUT", "POST"], endpoint="save_gantt_settings")
    @owner_required
    @handle_errors
    def save_settings():
        data = request_data()
        saved = service.save(start_hour=data.get("start_hour"), end_hour=data.get("end_hour"))
        return ok(service.to_view(saved), message="Chart settings saved")
