"""Screen coordinator: routes user actions to repositories and derives tables.

The coordinator owns the current ``ViewState`` plus the last snapshot
fetched for each record source. Every remote call goes through ``_run``,
which sets the loading flag, clears it on both success and failure, and turns
``VanLedgerError`` into the view's single error message.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar

from ..domain.repositories import RecordRepository
from ..errors import ValidationError, VanLedgerError
from ..logging_config import get_logger
from ..services import aggregation
from ..services.categories import ViewSpec, get_view
from ..services.export import build_export_rows, export_filename, write_csv, write_xlsx
from ..services.filtering import DateRange, apply_filters
from ..services.sorting import sort_records
from . import state as vs

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class TableData:
    """Rows (filtered, searched, sorted) and totals for the active view."""

    spec: ViewSpec
    records: list[Any]
    totals: Any
    export_totals: Optional[Mapping[str, Any]] = None


def _export_totals(spec: ViewSpec, totals: Any) -> Optional[Mapping[str, Any]]:
    if isinstance(totals, aggregation.TripTotals):
        return {
            "wayment": totals.wayment,
            "number_of_bags": totals.bags,
            "total_rent": totals.vendor_rent,
            "driver_rent": totals.driver_rent,
            "misc_spends": totals.misc_spends,
            "advance": totals.advance,
        }
    if isinstance(totals, aggregation.DriverSalarySummary):
        return {"driver_rent": totals.total_salary, "misc_spends": totals.total_misc}
    if isinstance(totals, aggregation.VendorPaymentSummary):
        return {
            "number_of_bags": totals.total_bags,
            "wayment": totals.total_wayment,
            "rent": totals.total_rent,
            "misc_spends": totals.total_misc,
            "advance": totals.total_advance,
        }
    return totals if isinstance(totals, Mapping) else None


class ScreenCoordinator:
    """Top-level screen logic shared by the flet view and the CLI."""

    def __init__(
        self,
        repositories: Mapping[str, RecordRepository[Any]],
        *,
        initial_view: str = "delivery",
    ):
        self.repositories = dict(repositories)
        self.state = vs.initial_state(initial_view)
        self.snapshots: dict[str, list[Any]] = {source: [] for source in self.repositories}
        self._listeners: list[Callable[[vs.ViewState], None]] = []

    # State plumbing ---------------------------------------------------

    @property
    def spec(self) -> ViewSpec:
        return get_view(self.state.active_view)

    def subscribe(self, listener: Callable[[vs.ViewState], None]) -> None:
        self._listeners.append(listener)

    def _set(self, new_state: vs.ViewState) -> None:
        self.state = new_state
        for listener in self._listeners:
            listener(new_state)

    def _run(self, label: str, action: Callable[[], T]) -> Optional[T]:
        self._set(vs.start_loading(self.state))
        error: Optional[str] = None
        try:
            return action()
        except VanLedgerError as exc:
            error = str(exc)
            logger.warning(f"{label} failed: {exc}", extra={"view": self.state.active_view})
            raise
        finally:
            self._set(vs.finish_loading(self.state, error))

    def _attempt(self, label: str, action: Callable[[], T]) -> tuple[Optional[T], Optional[VanLedgerError]]:
        try:
            return self._run(label, action), None
        except VanLedgerError as exc:
            return None, exc

    def _sources(self, spec: ViewSpec) -> list[str]:
        sources = [spec.source]
        if spec.key == "driver_payment":
            sources.append("advances")
        return sources

    # Navigation and filters -------------------------------------------

    def enter_view(self, view: str) -> None:
        """Switch to ``view`` and fetch its data."""

        self._set(vs.select_view(self.state, view))
        self.refresh()

    def open_form(self) -> None:
        self._set(vs.open_form(self.state))

    def edit(self, record: Any) -> None:
        self._set(vs.edit_record(self.state, record))

    def close_form(self) -> None:
        self._set(vs.close_form(self.state))

    def set_date_range(self, date_range: DateRange) -> None:
        self._set(vs.set_date_range(self.state, date_range))

    def set_search(self, term: str) -> None:
        self._set(vs.set_search(self.state, term))

    def sort_by(self, field: str) -> None:
        self._set(vs.sort_by(self.state, field))

    def dismiss_error(self) -> None:
        self._set(vs.clear_error(self.state))

    # Remote actions -----------------------------------------------------

    def refresh(self) -> bool:
        """Refetch every source the active view reads. Returns success."""

        for source in self._sources(self.spec):
            repo = self.repositories[source]
            records, error = self._attempt(f"Loading {source}", repo.list_all)
            if error is not None:
                return False
            self.snapshots[source] = list(records or [])
        return True

    def submit(self, data: Any, *, image: Optional[tuple[str, bytes]] = None) -> Optional[Any]:
        """Create or update from form data, then refetch.

        Validation failures keep the form open with per-field messages.
        """

        spec = self.spec
        if not spec.editable:
            return None
        repo = self.repositories[spec.source]
        selected = self.state.selected
        record_id = getattr(selected, "id", None)

        def _save() -> Any:
            if record_id:
                return repo.update(record_id, data)
            return repo.create(data)

        try:
            saved = self._run(f"Saving {spec.key}", _save)
        except ValidationError as exc:
            self._set(vs.set_field_errors(vs.clear_error(self.state), exc.errors))
            return None
        except VanLedgerError:
            return None

        if image is not None and spec.source == "trips" and getattr(saved, "id", None):
            filename, content = image
            _, error = self._attempt(
                "Uploading trip image", lambda: repo.upload_image(saved.id, filename, content)
            )
            if error is not None:
                # The trip exists; surface the upload failure after the refetch.
                self._set(vs.close_form(self.state))
                self._refresh_after_failure(error)
                return saved

        self._set(vs.close_form(self.state))
        self.refresh()
        return saved

    def request_delete(self, record_id: str) -> None:
        self._set(vs.request_delete(self.state, record_id))

    def cancel_delete(self) -> None:
        self._set(vs.cancel_delete(self.state))

    def confirm_delete(self) -> bool:
        """Issue the pending delete, then refetch whatever happened."""

        record_id = self.state.pending_delete
        if not record_id:
            return False
        repo = self.repositories[self.spec.source]
        _, error = self._attempt(f"Deleting {self.spec.key}", lambda: repo.delete(record_id))
        self._set(vs.cancel_delete(self.state))
        if error is not None:
            self._refresh_after_failure(error)
            return False
        self.refresh()
        return True

    def _refresh_after_failure(self, error: VanLedgerError) -> None:
        """Refetch after a failed mutation; a failed refetch keeps both messages."""

        if self.refresh():
            message = str(error)
        else:
            message = f"{error}\n{self.state.error}"
        self._set(vs.finish_loading(self.state, message))

    # Derived data -------------------------------------------------------

    def _base_records(self, spec: ViewSpec) -> list[Any]:
        records = self.snapshots.get(spec.source, [])
        if spec.key == "driver_payment":
            return aggregation.project_driver_payments(records)
        if spec.key == "vendor_payment":
            return aggregation.project_vendor_payments(records)
        return list(records)

    def table(self) -> TableData:
        """Filter by date, search, sort, then aggregate the active view."""

        spec = self.spec
        st = self.state
        filtered = apply_filters(
            self._base_records(spec),
            date_range=st.date_range,
            date_field=spec.date_field,
            term=st.search,
            mode=spec.search_mode,
        )
        rows = sort_records(filtered, st.sort)

        totals: Any
        if spec.key == "delivery":
            totals = aggregation.aggregate_trips(rows)
        elif spec.key == "driver_payment":
            totals = aggregation.driver_salary_summary(
                rows, self.snapshots.get("advances", []), st.date_range, st.search
            )
        elif spec.key == "vendor_payment":
            totals = aggregation.vendor_payment_summary(rows)
        else:
            totals = aggregation.column_totals(rows, [c.field for c in spec.columns if c.totalled])
        return TableData(spec=spec, records=rows, totals=totals, export_totals=_export_totals(spec, totals))

    def export_rows(self) -> list[dict[str, Any]]:
        table = self.table()
        return build_export_rows(table.records, table.spec.columns, table.export_totals)

    def export_to(
        self, directory: Path, *, fmt: str = "xlsx", today: date | None = None
    ) -> Path:
        """Write the active view's export rows into ``directory``."""

        spec = self.spec
        rows = self.export_rows()
        headers: Sequence[str] = [c.header for c in spec.columns]
        path = Path(directory) / export_filename(spec.export_prefix, today, extension=fmt)
        if fmt == "csv":
            write_csv(rows, path, headers)
        elif fmt == "xlsx":
            write_xlsx(rows, path, headers, sheet_name=spec.label)
        else:
            raise ValueError(f"Unsupported export format: {fmt}")
        logger.info("Exported view", extra={"view": spec.key, "rows": len(rows), "path": str(path)})
        return path
