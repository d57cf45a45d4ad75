from datetime import date

import pytest

from src.hrms.hrms.common.datetime_utils import month_bounds, month_name, parse_iso_date, resolve_month
from src.hrms.hrms.core.exceptions import ValidationError


@pytest.mark.parametrize("value, expected", [("March", 3), ("march", 3), (3, 3), ("03", 3), ("December", 12)])
def test_resolve_month(value, expected):
    assert resolve_month(value) == expected


@pytest.mark.parametrize("value", [0, 13, "Smarch", "", True, None])
def test_resolve_month_rejects_invalid(value):
    with pytest.raises(ValidationError):
        resolve_month(value)


def test_month_bounds_use_calendar_days():
    assert month_bounds("February", 2024) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2, 2026) == (date(2026, 2, 1), date(2026, 2, 28))
    assert month_bounds(12, 2026) == (date(2026, 12, 1), date(2026, 12, 31))


def test_month_name_and_iso_parsing():
    assert month_name(1) == "January"
    assert parse_iso_date("2026-01-31") == date(2026, 1, 31)
