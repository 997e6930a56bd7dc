"""
Formatting helpers for numbers, currency and percentages.

Numbers use Indian digit grouping (12,34,567.5): the last three integer
digits form one group and every group before it has two digits.
"""

import re
from decimal import Decimal, ROUND_HALF_UP

from app.core.config import MONEY_COLUMN_PATTERN

MAX_FRACTION_DIGITS = 3

_money_re = re.compile(MONEY_COLUMN_PATTERN, re.IGNORECASE)


def to_fixed(value, digits: int) -> Decimal:
    """Round half-up on the exact binary value of ``value``."""
    quantum = Decimal(1).scaleb(-digits)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)

    return ",".join(groups + [tail])


def _grouped(value) -> str:
    number = to_fixed(value, MAX_FRACTION_DIGITS)
    sign = "-" if number < 0 else ""
    text = f"{abs(number):f}"
    integer, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")

    result = sign + _group_indian(integer)
    if fraction:
        result += "." + fraction
    return result


def format_count(value) -> str:
    """Format a count or plain quantity."""
    return _grouped(value)


def format_inr(value) -> str:
    """Format INR currency."""
    return f"₹{_grouped(value)}"


def format_volume(value) -> str:
    """Format large amounts into crore/lakh notation."""
    if value >= 1e7:
        return f"₹{to_fixed(value / 1e7, 1)}Cr"
    if value >= 1e5:
        return f"₹{to_fixed(value / 1e5, 1)}L"
    return format_inr(value)


def format_pct(value, decimals: int = 2) -> str:
    return f"{to_fixed(value, decimals)}%"


def is_money_column(column: str) -> bool:
    return bool(_money_re.search(column))


def format_metric(column: str, value: float) -> str:
    """Format a column statistic as currency or as a quantity, by column name."""
    fixed = to_fixed(value, 2)
    if is_money_column(column):
        return format_inr(fixed)
    return format_count(fixed)
