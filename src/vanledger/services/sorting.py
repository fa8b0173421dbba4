"""Comparator-based ordering with click-to-toggle semantics."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Literal, Sequence, TypeVar

RecordT = TypeVar("RecordT")
SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True)
class SortConfig:
    field: str
    order: SortOrder = "asc"


def toggle_sort(current: SortConfig | None, field: str) -> SortConfig:
    """Ascending on ``field`` flips to descending; anything else goes ascending."""

    if current is not None and current.field == field and current.order == "asc":
        return SortConfig(field, "desc")
    return SortConfig(field, "asc")


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def _sort_key(value: Any) -> tuple:
    # Numbers and strings get separate ranks so mixed columns never compare
    # int to str.
    if isinstance(value, bool):
        return (0, int(value))
    if isinstance(value, (int, float, Decimal)):
        return (0, value)
    return (1, str(value))


def sort_records(records: Sequence[RecordT], config: SortConfig | None) -> list[RecordT]:
    """Return a new, stably sorted list; the input is never mutated.

    ISO date strings sort chronologically because their lexical order is
    chronological. Records with a blank or missing value stay last in both
    directions, in their original order.
    """

    if config is None:
        return list(records)
    present, missing = [], []
    for record in records:
        (missing if _is_missing(getattr(record, config.field, None)) else present).append(record)
    ordered = sorted(
        present,
        key=lambda record: _sort_key(getattr(record, config.field, None)),
        reverse=config.order == "desc",
    )
    return ordered + missing
