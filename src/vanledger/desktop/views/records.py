"""Records view: tabs, date/search filters, sortable table, totals and forms."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import TYPE_CHECKING, Any

import flet as ft

from ...devtools import dev_log
from ...logging_config import get_logger
from ...models.trip import bags_for_wayment
from ...services import aggregation
from ...services.categories import VIEWS, FormField, ViewSpec
from ...services.export import ExportColumn
from ...services.filtering import DateRange
from ...services.formatters import format_currency, format_date
from ..components import build_stat_card, show_confirm_dialog, show_error_dialog, show_snack
from ..navigation import LOGIN_ROUTE

if TYPE_CHECKING:  # pragma: no cover
    from ..context import AppContext

logger = get_logger(__name__)


def display_value(value: Any, kind: str, symbol: str) -> str:
    if kind == "date":
        return format_date(value)
    if kind == "money":
        return format_currency(value, symbol)
    if kind == "bool":
        return "Yes" if value else "No"
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    return "" if value is None else str(value)


def totals_cards(spec: ViewSpec, totals: Any, symbol: str) -> list[tuple[str, str]]:
    """Label/value pairs shown under the table for the active view."""

    money = lambda amount: format_currency(amount, symbol)  # noqa: E731
    if isinstance(totals, aggregation.TripTotals):
        return [
            ("Total Rent", money(totals.vendor_rent)),
            ("Driver Rent", money(totals.driver_rent)),
            ("Misc Spends", money(totals.misc_spends)),
            ("Advance", money(totals.advance)),
            ("Driver Net", money(totals.driver_net)),
            ("Vendor Net", money(totals.vendor_net)),
        ]
    if isinstance(totals, aggregation.DriverSalarySummary):
        return [
            ("Total Salary", money(totals.total_salary)),
            ("Misc Spends", money(totals.total_misc)),
            ("Total Advance", money(totals.total_advance)),
            ("Net Salary", money(totals.net_salary)),
        ]
    if isinstance(totals, aggregation.VendorPaymentSummary):
        return [
            ("Total Rent", money(totals.total_rent)),
            ("Misc Spends", money(totals.total_misc)),
            ("Advance", money(totals.total_advance)),
            ("Net Payment", money(totals.net_payment)),
        ]
    by_field = {c.field: c for c in spec.columns}
    return [
        (f"Total {by_field[name].header}", money(value))
        for name, value in (totals or {}).items()
        if name in by_field and by_field[name].kind == "money"
    ]


def build_records_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the main screen around the shared ScreenCoordinator."""

    coord = ctx.coordinator
    symbol = ctx.config.CURRENCY_SYMBOL

    title = ft.Text("", size=24, weight=ft.FontWeight.BOLD)
    tabs_row = ft.Row(wrap=True, spacing=8)
    add_button = ft.FilledButton("Add New", icon=ft.Icons.ADD)
    back_button = ft.TextButton("Back to List", icon=ft.Icons.ARROW_BACK)
    start_field = ft.TextField(label="Start date", hint_text="YYYY-MM-DD", width=160)
    end_field = ft.TextField(label="End date", hint_text="YYYY-MM-DD", width=160)
    search_field = ft.TextField(label="Search", width=240)
    apply_button = ft.FilledButton("Apply")
    export_button = ft.TextButton("Export to Excel", icon=ft.Icons.DOWNLOAD)
    list_panel = ft.Column(spacing=12)
    form_panel = ft.Column(spacing=12)
    table_holder = ft.Column(scroll=ft.ScrollMode.AUTO)
    totals_row = ft.Row(wrap=True, spacing=12)
    list_panel.controls = [
        ft.Row([start_field, end_field, search_field, apply_button, export_button], wrap=True),
        table_holder,
        totals_row,
    ]

    def _surface_error() -> None:
        if coord.state.error:
            show_error_dialog(page, "Something went wrong", coord.state.error)
            coord.dismiss_error()

    # Table ----------------------------------------------------------------

    def _on_sort(field: str):
        def handler(_e):
            coord.sort_by(field)
            render()

        return handler

    def _header(column: ExportColumn) -> ft.DataColumn:
        label = column.header
        if coord.state.sort.field == column.field:
            label += " ▲" if coord.state.sort.order == "asc" else " ▼"
        return ft.DataColumn(ft.Text(label), numeric=column.numeric, on_sort=_on_sort(column.field))

    def _actions(record: Any) -> ft.DataCell:
        def edit(_e):
            coord.edit(record)
            render()

        def delete(_e):
            coord.request_delete(record.id)
            show_confirm_dialog(
                page,
                "Delete record",
                "This record will be removed permanently. Continue?",
                on_confirm=_confirm_delete,
                on_cancel=coord.cancel_delete,
            )

        return ft.DataCell(
            ft.Row(
                [
                    ft.IconButton(icon=ft.Icons.EDIT, tooltip="Edit", on_click=edit),
                    ft.IconButton(icon=ft.Icons.DELETE, tooltip="Delete", on_click=delete),
                ],
                spacing=0,
            )
        )

    def _confirm_delete() -> None:
        if coord.confirm_delete():
            show_snack(page, "Record deleted")
        render()
        _surface_error()

    def _render_table(spec: ViewSpec) -> None:
        data = coord.table()
        columns = [_header(c) for c in spec.columns]
        if spec.editable:
            columns.append(ft.DataColumn(ft.Text("Actions")))
        rows = []
        for record in data.records:
            cells = [
                ft.DataCell(ft.Text(display_value(getattr(record, c.field, None), c.kind, symbol)))
                for c in spec.columns
            ]
            if spec.editable:
                cells.append(_actions(record))
            rows.append(ft.DataRow(cells=cells))
        table_holder.controls = [
            ft.DataTable(columns=columns, rows=rows)
            if rows
            else ft.Text("No records for the current filters.", italic=True)
        ]
        totals_row.controls = [
            build_stat_card(label, value) for label, value in totals_cards(spec, data.totals, symbol)
        ]

    # Form -----------------------------------------------------------------

    form_inputs: dict[str, ft.Control] = {}
    bags_text = ft.Text("")
    image_field = ft.TextField(label="Receipt image (optional)", hint_text="Path to an image file", width=320)

    def _initial(field: FormField) -> Any:
        selected = coord.state.selected
        value = getattr(selected, field.name, None) if selected is not None else None
        if field.kind == "bool":
            return bool(value)
        if value is None:
            return ""
        if field.kind == "date":
            return str(value)
        return display_value(value, "number", symbol)

    def _update_bags(e=None) -> None:
        wayment = form_inputs.get("wayment")
        bags_text.value = f"Number of bags: {bags_for_wayment(getattr(wayment, 'value', 0))}"
        if e is not None:
            page.update()

    def _render_form(spec: ViewSpec) -> None:
        form_inputs.clear()
        controls: list[ft.Control] = []
        for field in spec.form_fields:
            if field.kind == "bool":
                control: ft.Control = ft.Checkbox(label=field.label, value=_initial(field))
            else:
                control = ft.TextField(
                    label=field.label,
                    hint_text=field.hint or None,
                    value=_initial(field),
                    width=320,
                    keyboard_type=ft.KeyboardType.NUMBER
                    if field.kind in ("money", "number")
                    else None,
                    error_text=coord.state.field_errors.get(field.name),
                )
            form_inputs[field.name] = control
            controls.append(control)
        if "wayment" in form_inputs:
            form_inputs["wayment"].on_change = _update_bags
            _update_bags()
            controls.append(bags_text)
        if spec.source == "trips":
            image_field.value = ""
            image_field.error_text = None
            controls.append(image_field)
        label = "Update" if coord.state.is_editing else "Save"
        controls.append(ft.FilledButton(label, on_click=_submit))
        form_panel.controls = controls

    def _submit(_e) -> None:
        data = {name: control.value for name, control in form_inputs.items()}
        image = None
        image_path = (image_field.value or "").strip() if coord.spec.source == "trips" else ""
        if image_path:
            try:
                image = (Path(image_path).name, Path(image_path).expanduser().read_bytes())
            except OSError as exc:
                dev_log(ctx.config, "Could not read trip image", exc=exc)
                image_field.error_text = "Could not read this file"
                page.update()
                return
        saved = coord.submit(data, image=image)
        errors = coord.state.field_errors
        if errors:
            # Keep what was typed; only attach the messages.
            for name, control in form_inputs.items():
                if isinstance(control, ft.TextField):
                    control.error_text = errors.get(name)
            page.update()
            return
        if saved is not None:
            show_snack(page, "Record saved")
        render()
        _surface_error()

    # Filters, tabs, export -------------------------------------------------

    def _apply(_e) -> None:
        start_field.error_text = None
        end_field.error_text = None
        try:
            date_range = DateRange.from_strings(start_field.value, end_field.value)
        except ValueError:
            for field in (start_field, end_field):
                try:
                    DateRange.from_strings(field.value, None)
                except ValueError:
                    field.error_text = "Use YYYY-MM-DD"
            page.update()
            return
        coord.set_date_range(date_range)
        coord.set_search(search_field.value or "")
        render()

    def _export(_e) -> None:
        try:
            path = coord.export_to(ctx.config.export_dir)
        except (OSError, ValueError) as exc:
            dev_log(ctx.config, "Export failed", exc=exc)
            show_error_dialog(page, "Export failed", str(exc))
            return
        show_snack(page, f"Exported to {path}")

    def _select(key: str):
        def handler(_e):
            coord.enter_view(key)
            search_field.value = ""
            render()
            _surface_error()

        return handler

    def _add(_e):
        coord.open_form()
        render()

    def _back(_e):
        coord.close_form()
        render()

    def _logout(_e):
        logger.info("User signed out", extra={"user": ctx.current_user})
        ctx.current_user = None
        page.go(LOGIN_ROUTE)

    apply_button.on_click = _apply
    export_button.on_click = _export
    add_button.on_click = _add
    back_button.on_click = _back

    def render() -> None:
        spec = coord.spec
        state = coord.state
        title.value = spec.label
        tabs_row.controls = [
            ft.FilledButton(view.label, on_click=_select(key))
            if key == spec.key
            else ft.OutlinedButton(view.label, on_click=_select(key))
            for key, view in VIEWS.items()
        ]
        in_form = state.mode == "form"
        add_button.visible = spec.editable and not in_form
        back_button.visible = in_form
        search_field.label = "Search by driver name" if spec.search_mode.value == "driver_name" else "Search"
        list_panel.visible = not in_form
        form_panel.visible = in_form
        if in_form:
            _render_form(spec)
        else:
            _render_table(spec)
        try:
            page.update()
        except AssertionError:
            pass

    coord.refresh()
    render()
    _surface_error()

    return ft.View(
        route="/records",
        controls=[
            ft.Container(
                content=ft.Column(
                    [
                        ft.Row(
                            [
                                title,
                                ft.Row(
                                    [
                                        add_button,
                                        back_button,
                                        ft.TextButton("Log out", icon=ft.Icons.LOGOUT, on_click=_logout),
                                    ]
                                ),
                            ],
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        ),
                        tabs_row,
                        list_panel,
                        form_panel,
                    ],
                    spacing=16,
                    scroll=ft.ScrollMode.AUTO,
                ),
                padding=24,
                expand=True,
            )
        ],
        padding=0,
    )
