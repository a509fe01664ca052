from __future__ import annotations

import importlib
import logging
from typing import Optional

import requests
from dotenv import load_dotenv
from flask import Flask, redirect, session, url_for

from config import get_settings_module

from .auth.model import SessionUser
from .container import build_container
from .core.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_TIMEOUT_SECONDS,
    DEFAULT_OVERTIME_DAILY_HOURS,
    DEFAULT_UTC_OFFSET_HOURS,
    EXTENSION_KEY,
)
from .core.exceptions import AuthenticationError
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .gantt.controller import register as register_gantt
from .payroll.controller import register as register_payroll
from .permissions.controller import register as register_permissions
from .shift_requests.controller import register as register_shift_requests
from .shifts.controller import register as register_shifts
from .time_slots.controller import register as register_time_slots
from .wages.controller import register as register_wages

logger = logging.getLogger(__name__)


def _log_auth_change(user: Optional[SessionUser]) -> None:
    if user is None:
        logger.info("credentials cleared")
    else:
        logger.debug("session user is now %s (%s)", user.user_id, user.role.value)


def create_app(*, http: Optional[requests.Session] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    api_base_url = getattr(settings, "API_BASE_URL", DEFAULT_API_BASE_URL)
    logger.info("settings=%s api=%s", settings_module, api_base_url)

    container = build_container(
        session_store=session,
        api_base_url=api_base_url,
        api_timeout=float(getattr(settings, "API_TIMEOUT_SECONDS", DEFAULT_API_TIMEOUT_SECONDS)),
        utc_offset_hours=float(getattr(settings, "DISPLAY_UTC_OFFSET_HOURS", DEFAULT_UTC_OFFSET_HOURS)),
        overtime_daily_hours=int(getattr(settings, "OVERTIME_DAILY_HOURS", DEFAULT_OVERTIME_DAILY_HOURS)),
        http=http,
    )
    container.auth_session.subscribe(_log_auth_change)
    app.extensions[EXTENSION_KEY] = container

    @app.errorhandler(AuthenticationError)
    def on_authentication_error(e: AuthenticationError):
        container.auth_session.clear()
        logger.info("authentication required: %s", e)
        return redirect(url_for("login"))

    register_auth(app, container)
    register_dashboard(app, container)
    register_employees(app, container)
    register_shifts(app, container)
    register_attendance(app, container)
    register_shift_requests(app, container)
    register_wages(app, container)
    register_payroll(app, container)
    register_time_slots(app, container)
    register_permissions(app, container)
    register_gantt(app, container)

    return app
