from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_negative_int(value: Optional[object], field_name: str) -> int:
    """Coerce to int; None counts as 0."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if number != value and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a whole number")
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number
