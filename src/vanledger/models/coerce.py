"""Coercion helpers that turn loosely-typed input into record field values.

Remote payloads and form fields both arrive as "whatever JSON/flet gave us":
numbers as floats, ints or strings, missing keys, ``None``.  Everything that
flows into aggregation goes through these helpers so the arithmetic only
ever sees ``Decimal`` values and plain strings.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")


def to_decimal(value: Any, default: Decimal = ZERO) -> Decimal:
    """Return ``value`` as a Decimal, or ``default`` when missing/unparseable.

    Floats go through ``str`` so 0.1 stays 0.1 instead of its binary expansion.
    """

    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        return value if value.is_finite() else default
    if isinstance(value, (int, float)):
        value = str(value)
    text = str(value).strip().replace(",", "")
    if not text:
        return default
    try:
        parsed = Decimal(text)
    except InvalidOperation:
        return default
    return parsed if parsed.is_finite() else default


def is_number(value: Any) -> bool:
    """True for blank input or anything ``to_decimal`` can parse."""

    if value is None or isinstance(value, (Decimal, int, float)):
        return True
    if not to_text(value):
        return True
    return to_decimal(value, default=None) is not None


def to_wire_number(value: Decimal) -> int | float:
    """JSON has no decimal type; integral amounts go out as ints."""

    if value == value.to_integral_value():
        return int(value)
    return float(value)


def to_text(value: Any) -> str:
    """Return a stripped string; ``None`` becomes the empty string."""

    if value is None:
        return ""
    return str(value).strip()


def to_optional_id(value: Any) -> str | None:
    """Record ids are kept as strings whatever the API returns."""

    text = to_text(value)
    return text or None


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return to_text(value).lower() in {"1", "true", "yes", "on"}


def to_iso_date(value: Any) -> str:
    """Normalize date-ish values to ``YYYY-MM-DD`` where possible.

    Timestamps such as ``2024-01-05T00:00:00.000Z`` are cut to their date
    part; strings that do not parse are kept verbatim so the filters can
    decide what to do with them.
    """

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = to_text(value)
    if len(text) >= 10:
        try:
            return date.fromisoformat(text[:10]).isoformat()
        except ValueError:
            return text
    return text
