"""Flatten visible table rows (plus a totals row) for spreadsheet export."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, Literal, Mapping, Sequence

import pandas as pd

from .aggregation import column_totals

TOTALS_LABEL = "TOTALS"

ColumnKind = Literal["text", "date", "money", "number", "bool"]


@dataclass(frozen=True)
class ExportColumn:
    """One visible table column: record attribute, header and value kind."""

    field: str
    header: str
    kind: ColumnKind = "text"
    summable: bool | None = None

    @property
    def numeric(self) -> bool:
        return self.kind in ("money", "number")

    @property
    def totalled(self) -> bool:
        return self.numeric if self.summable is None else self.summable


def _cell(record: Any, column: ExportColumn) -> Any:
    value = getattr(record, column.field, None)
    if value is None:
        return 0 if column.numeric else ""
    if column.kind == "bool":
        return "Yes" if value else "No"
    return value


def build_export_rows(
    records: Sequence[Any],
    columns: Sequence[ExportColumn],
    totals: Mapping[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """One dict per record keyed by column header, then a ``TOTALS`` row.

    The first column of the totals row carries the ``TOTALS`` marker; totalled
    numeric columns carry ``totals[field]`` (computed from ``records`` when not
    supplied) and every other cell is empty.
    """

    rows = [{column.header: _cell(record, column) for column in columns} for record in records]

    summed = [c.field for c in columns if c.totalled]
    computed = column_totals(records, summed)
    totals_row: dict[str, Any] = {}
    for index, column in enumerate(columns):
        if index == 0:
            totals_row[column.header] = TOTALS_LABEL
        elif column.totalled:
            supplied = (totals or {}).get(column.field)
            totals_row[column.header] = supplied if supplied is not None else computed[column.field]
        else:
            totals_row[column.header] = ""
    rows.append(totals_row)
    return rows


def export_filename(prefix: str, today: date | None = None, *, extension: str = "xlsx") -> str:
    """``vendor-payments-2024-01-31.xlsx`` style names."""

    stamp = (today or date.today()).isoformat()
    return f"{prefix}-{stamp}.{extension}"


def _plain(value: Any) -> Any:
    # Spreadsheet cells want floats, not Decimals.
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


def write_csv(rows: Iterable[Mapping[str, Any]], output_path: Path, headers: Sequence[str]) -> Path:
    """Write export rows to CSV with a deterministic header order."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    # newline='' keeps csv from doubling line endings on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(
            fh, fieldnames=list(headers), extrasaction="ignore", quoting=csv.QUOTE_MINIMAL
        )
        writer.writeheader()
        for row in rows:
            writer.writerow({key: _plain(value) for key, value in row.items()})
    return output_path


def write_xlsx(
    rows: Iterable[Mapping[str, Any]],
    output_path: Path,
    headers: Sequence[str],
    *,
    sheet_name: str = "Sheet1",
) -> Path:
    """Write export rows to an .xlsx workbook via pandas/openpyxl."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame(
        [{key: _plain(value) for key, value in row.items()} for row in rows],
        columns=list(headers),
    )
    frame.to_excel(output_path, index=False, sheet_name=sheet_name[:31])
    return output_path
