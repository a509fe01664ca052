from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import now_local
from ..common.guards import current_user, employee_required, owner_required
from ..common.responses import handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/owner/dashboard", endpoint="owner_dashboard")
    @owner_required
    @handle_errors
    def owner_dashboard():
        today = now_local(container.offset).date()
        return ok(container.dashboard_service.owner_stats(today))

    @app.route("/employee/dashboard", endpoint="employee_dashboard")
    @employee_required
    @handle_errors
    def employee_dashboard():
        today = now_local(container.offset).date()
        return ok(container.dashboard_service.employee_stats(current_user().employee_id, today))
