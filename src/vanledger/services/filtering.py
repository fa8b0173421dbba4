"""Date-range and free-text filtering over in-memory record lists."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Optional, Sequence, TypeVar

from sqlmodel import SQLModel

RecordT = TypeVar("RecordT")


def parse_record_date(raw: Any) -> Optional[date]:
    """Parse a record's date value; ``None`` when missing or not a real date."""

    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


@dataclass(frozen=True)
class DateRange:
    """Inclusive date bounds; a missing bound is open-ended."""

    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def from_strings(cls, start: str | None, end: str | None) -> "DateRange":
        """Build a range from form text, ignoring blank bounds.

        Raises ValueError when a non-blank bound is not an ISO date.
        """

        def _bound(value: str | None) -> Optional[date]:
            text = (value or "").strip()
            return date.fromisoformat(text) if text else None

        return cls(_bound(start), _bound(end))

    @property
    def is_open(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, raw: Any) -> bool:
        """True if ``raw`` lies within the range.

        With no bounds everything is included, even unparseable dates.
        With any bound, unparseable dates are excluded.
        """

        if self.is_open:
            return True
        parsed = parse_record_date(raw)
        if parsed is None:
            return False
        if self.start is not None and parsed < self.start:
            return False
        if self.end is not None and parsed > self.end:
            return False
        return True


def filter_by_date(
    records: Iterable[RecordT], date_range: DateRange, *, date_field: str = "date"
) -> list[RecordT]:
    return [r for r in records if date_range.contains(getattr(r, date_field, None))]


class SearchMode(str, Enum):
    """How a free-text term is matched against a record."""

    ALL_FIELDS = "all_fields"
    DRIVER_NAME = "driver_name"


def _display_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        # 500.00 should match a search for "500"
        return format(value.normalize(), "f") if value == value.to_integral_value() else str(value)
    return str(value)


def record_values(record: Any) -> list[Any]:
    """Every field value on a record, derived values included."""

    if isinstance(record, SQLModel):
        values = list(record.model_dump().values())
    elif isinstance(record, dict):
        values = list(record.values())
    else:
        values = list(vars(record).values())
    for derived in ("number_of_bags", "total_rent"):
        if hasattr(type(record), derived):
            values.append(getattr(record, derived))
    return values


def matches_search(record: Any, term: str, mode: SearchMode) -> bool:
    needle = (term or "").strip().lower()
    if not needle:
        return True
    if mode is SearchMode.DRIVER_NAME:
        return needle in _display_text(getattr(record, "driver_name", "")).lower()
    return any(needle in _display_text(value).lower() for value in record_values(record))


def search_records(
    records: Iterable[RecordT], term: str | None, mode: SearchMode = SearchMode.ALL_FIELDS
) -> list[RecordT]:
    """Keep records matching ``term`` case-insensitively; blank terms keep all."""

    return [r for r in records if matches_search(r, term or "", mode)]


def apply_filters(
    records: Sequence[RecordT],
    *,
    date_range: DateRange | None = None,
    date_field: str = "date",
    term: str | None = None,
    mode: SearchMode = SearchMode.ALL_FIELDS,
) -> list[RecordT]:
    """Date range first, then free-text search."""

    filtered = filter_by_date(records, date_range or DateRange(), date_field=date_field)
    return search_records(filtered, term, mode)
