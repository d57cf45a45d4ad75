from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, Decimal]


def round_half_up(value: Number) -> int:
    """Round to the nearest whole rupee, halves away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def prorate(amount: int, numerator: int, denominator: int) -> int:
    """round(amount * numerator / denominator) without pre-rounding the ratio."""
    return round_half_up(Decimal(amount) * Decimal(numerator) / Decimal(denominator))


def _group_indian(digits: str) -> str:
    # 1234567 -> 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    parts = []
    while len(head) > 2:
        parts.insert(0, head[-2:])
        head = head[:-2]
    if head:
        parts.insert(0, head)
    return ",".join(parts) + "," + tail


def format_currency(amount: Number) -> str:
    """Format an amount as INR without fractional paise, e.g. 100000 -> '₹1,00,000'."""
    rupees = round_half_up(amount)
    sign = "-" if rupees < 0 else ""
    return f"{sign}₹{_group_indian(str(abs(rupees)))}"
