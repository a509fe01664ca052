from __future__ import annotations

from flask import Flask

from ..common.guards import current_user, login_required, owner_required
from ..common.responses import handle_errors, ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.permission_service

    @app.route("/owner/permissions", methods=["GET"], endpoint="owner_permissions")
    @owner_required
    @handle_errors
    def list_permissions():
        return ok([service.to_view(p) for p in service.list_permissions()])

    @app.route("/owner/permissions/<int:employee_id>", methods=["PUT", "POST"], endpoint="set_permissions")
    @owner_required
    @handle_errors
    def set_permissions(employee_id: int):
        saved = service.set_permissions(employee_id, request_data())
        return ok(service.to_view(saved), message="Permissions saved")

    @app.route("/permissions/me", endpoint="my_permissions")
    @login_required
    @handle_errors
    def my_permissions():
        return ok(service.effective(current_user()).flags())
