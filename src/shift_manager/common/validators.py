from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_int(value: Any, field_name: str, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")

    if minimum is not None and number < minimum:
        raise ValidationError(f"{field_name} must be at least {minimum}")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field_name} must be at most {maximum}")
    return number


def require_date(value: Optional[str], field_name: str) -> str:
    """Check a YYYY-MM-DD value and return it normalized."""

    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")
