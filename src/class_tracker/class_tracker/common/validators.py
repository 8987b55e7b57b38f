from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_score(value, field_name: str = "score"):
    """Coerce an optional score; None/blank stays None, anything else must be a finite number >= 0."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        score = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(score) or score < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return score


def require_int(value, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field_name} must be an integer")
        return int(value)
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if not number.is_integer():
        raise ValidationError(f"{field_name} must be an integer")
    return int(number)


def optional_bool(value, field_name: str) -> bool:
    """Only real booleans are accepted; None/missing means False."""
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value
