from decimal import Decimal

import pytest

from src.hrms.hrms.common.money import format_currency, prorate, round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("2082.5"), 2083),
        (Decimal("2082.4999"), 2082),
        (Decimal("-2.5"), -3),
        (7, 7),
    ],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_prorate_does_not_pre_round_the_ratio():
    assert prorate(4167, 15, 30) == 2084
    assert prorate(50000, 20, 30) == 33333
    assert prorate(1800, 1, 30) == 60


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "₹0"),
        (999, "₹999"),
        (46800, "₹46,800"),
        (100000, "₹1,00,000"),
        (12345678, "₹1,23,45,678"),
        (-500, "-₹500"),
    ],
)
def test_format_currency_uses_indian_grouping(amount, expected):
    assert format_currency(amount) == expected
