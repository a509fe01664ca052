from __future__ import annotations

from flask import Flask, redirect, url_for

from ..common.guards import current_user, login_required
from ..common.responses import fail, handle_errors, ok, request_data
from ..container import Container
from ..core.exceptions import AuthenticationError


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["GET"], endpoint="login")
    def login_page():
        if current_user() is not None:
            return redirect(url_for("dashboard"))
        return ok({"authenticated": False}, message="Please log in")

    @app.route("/login", methods=["POST"], endpoint="login_submit")
    @handle_errors
    def login_submit():
        data = request_data()
        try:
            user = container.auth_service.login(data.get("email", ""), data.get("password", ""))
        except AuthenticationError as e:
            return fail(str(e), 401)
        return ok({"user": user.to_payload()}, message="Logged in")

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        return redirect(url_for("login"))

    @app.route("/me", endpoint="me")
    @login_required
    @handle_errors
    def me():
        user = container.auth_service.refresh_profile() or current_user()
        permissions = container.permission_service.effective(user)
        return ok({"user": user.to_payload(), "permissions": permissions.flags()})

    @app.route("/", endpoint="dashboard")
    @app.route("/dashboard")
    @login_required
    def dashboard():
        if current_user().is_owner:
            return redirect(url_for("owner_dashboard"))
        return redirect(url_for("employee_dashboard"))
