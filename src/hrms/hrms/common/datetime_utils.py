from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Union

from ..core.constants import MONTH_NAMES
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def resolve_month(month: Union[int, str]) -> int:
    """Accept an English month name ("March") or a number (3, "03") and return 1-12."""
    if isinstance(month, str):
        value = month.strip()
        if value.isdigit():
            month = int(value)
        else:
            for idx, name in enumerate(MONTH_NAMES, start=1):
                if name.lower() == value.lower():
                    return idx
            raise ValidationError(f"Invalid month: {month!r}")

    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValidationError(f"Invalid month: {month!r}")
    return month


def month_name(month: Union[int, str]) -> str:
    return MONTH_NAMES[resolve_month(month) - 1]


def month_bounds(month: Union[int, str], year: int) -> tuple[date, date]:
    """First and last calendar day of the month."""
    m = resolve_month(month)
    y = int(year)
    if not 1 <= y <= 9999:
        raise ValidationError(f"Invalid year: {year!r}")
    last_day = calendar.monthrange(y, m)[1]
    return date(y, m, 1), date(y, m, last_day)
