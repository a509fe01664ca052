from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import ApiError, AuthenticationError, AuthorizationError, ValidationError

logger = logging.getLogger(__name__)


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200):
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def request_data() -> dict:
    """Submitted fields from a JSON body or a classic form post."""

    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def handle_errors(view):
    """Turn domain errors raised by a view into JSON error replies.

    AuthenticationError is left to the app-level handler, which clears the
    session and sends the user to the login page.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except AuthenticationError:
            raise
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthorizationError as e:
            return fail(str(e), 403)
        except ApiError as e:
            status = e.status_code if e.status_code and e.status_code >= 400 else 502
            return fail(str(e), status)
        except Exception:
            logger.error("unexpected error in endpoint '%s'", view.__name__, exc_info=True)
            return fail("An unexpected server error occurred.", 500)

    return wrapper
