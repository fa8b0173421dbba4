"""Immutable screen state and the pure transitions that update it."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal, Mapping, Optional

from ..services.categories import get_view
from ..services.filtering import DateRange
from ..services.sorting import SortConfig, toggle_sort

Mode = Literal["list", "form"]


@dataclass(frozen=True)
class ViewState:
    active_view: str = "delivery"
    mode: Mode = "list"
    selected: Optional[Any] = None
    date_range: DateRange = DateRange()
    sort: SortConfig = SortConfig("delivery_date", "desc")
    search: str = ""
    loading: bool = False
    error: Optional[str] = None
    pending_delete: Optional[str] = None
    field_errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_editing(self) -> bool:
        return self.mode == "form" and self.selected is not None


def initial_state(view: str = "delivery") -> ViewState:
    return ViewState(active_view=view, sort=get_view(view).default_sort)


def select_view(state: ViewState, view: str) -> ViewState:
    """Switch tabs: back to the list with the view's default sort; dates stay."""

    spec = get_view(view)
    return replace(
        state,
        active_view=spec.key,
        mode="list",
        selected=None,
        search="",
        sort=spec.default_sort,
        error=None,
        pending_delete=None,
        field_errors={},
    )


def open_form(state: ViewState) -> ViewState:
    if not get_view(state.active_view).editable:
        return state
    return replace(state, mode="form", selected=None, error=None, field_errors={})


def edit_record(state: ViewState, record: Any) -> ViewState:
    if not get_view(state.active_view).editable:
        return state
    return replace(state, mode="form", selected=record, error=None, field_errors={})


def close_form(state: ViewState) -> ViewState:
    return replace(state, mode="list", selected=None, field_errors={})


def set_date_range(state: ViewState, date_range: DateRange) -> ViewState:
    return replace(state, date_range=date_range)


def set_search(state: ViewState, term: str) -> ViewState:
    return replace(state, search=term or "")


def sort_by(state: ViewState, field: str) -> ViewState:
    return replace(state, sort=toggle_sort(state.sort, field))


def start_loading(state: ViewState) -> ViewState:
    return replace(state, loading=True, error=None)


def finish_loading(state: ViewState, error: Optional[str] = None) -> ViewState:
    return replace(state, loading=False, error=error)


def clear_error(state: ViewState) -> ViewState:
    return replace(state, error=None)


def request_delete(state: ViewState, record_id: str) -> ViewState:
    if not get_view(state.active_view).editable:
        return state
    return replace(state, pending_delete=str(record_id))


def cancel_delete(state: ViewState) -> ViewState:
    return replace(state, pending_delete=None)


def set_field_errors(state: ViewState, errors: Mapping[str, str]) -> ViewState:
    """Keep the form open and attach per-field messages."""

    return replace(state, field_errors=dict(errors))
