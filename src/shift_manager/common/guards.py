from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Optional

from flask import current_app, redirect, url_for

from ..auth.model import SessionUser
from ..core.constants import EXTENSION_KEY
from ..core.enums import PermissionFlag
from .responses import fail

if TYPE_CHECKING:
    from ..container import Container


def get_container() -> "Container":
    return current_app.extensions[EXTENSION_KEY]


def current_user() -> Optional[SessionUser]:
    session = get_container().auth_session
    return session.get_user() if session.is_authenticated else None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def owner_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_user()
        if user is None:
            return redirect(url_for("login"))
        if not user.is_owner:
            return fail("Only the owner can do this", 403)
        return view(*args, **kwargs)

    return wrapper


def employee_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_user()
        if user is None:
            return redirect(url_for("login"))
        if user.is_owner or user.employee_id is None:
            return fail("This page is for employees", 403)
        return view(*args, **kwargs)

    return wrapper


def permission_required(flag: PermissionFlag):
    """Allow the owner, or an employee holding ``flag``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_user()
            if user is None:
                return redirect(url_for("login"))
            if not get_container().permission_service.has_permission(user, flag):
                return fail("You do not have permission to do this", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator
