"""Display formatting for dates and money."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..models.coerce import to_decimal
from .filtering import parse_record_date

_CENTS = Decimal("0.01")


def format_date(raw: Any) -> str:
    """``2024-01-05`` -> ``Jan 5, 2024``; missing or invalid dates render as ``-``."""

    parsed = parse_record_date(raw)
    if parsed is None:
        return "-"
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def _group_indian(digits: str) -> str:
    # Last three digits, then groups of two: 12345678 -> 1,23,45,678
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(amount: Any, symbol: str = "₹") -> str:
    """Format an amount the way the en-IN locale does: ``₹1,23,456.50``.

    This is the only place amounts are rounded.
    """

    value = to_decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, cents = f"{abs(value):.2f}".partition(".")
    return f"{sign}{symbol}{_group_indian(whole)}.{cents}"
