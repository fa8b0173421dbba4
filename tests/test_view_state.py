"""Tests for the immutable view state transitions."""

from __future__ import annotations

from datetime import date

from vanledger.desktop import state as vs
from vanledger.services.filtering import DateRange
from vanledger.services.sorting import SortConfig


def test_initial_state_uses_view_default_sort():
    state = vs.initial_state("advance")
    assert state.active_view == "advance"
    assert state.mode == "list"
    assert state.sort == SortConfig("date", "desc")
    assert not state.loading


def test_select_view_resets_everything_but_dates():
    rng = DateRange(date(2024, 1, 1), date(2024, 1, 31))
    state = vs.initial_state()
    state = vs.set_date_range(state, rng)
    state = vs.set_search(state, "ramesh")
    state = vs.open_form(state)
    state = vs.set_field_errors(state, {"wayment": "bad"})
    state = vs.finish_loading(state, "boom")

    switched = vs.select_view(state, "fuel")

    assert switched.active_view == "fuel"
    assert switched.mode == "list"
    assert switched.search == ""
    assert switched.error is None
    assert switched.field_errors == {}
    assert switched.sort == SortConfig("date", "desc")
    assert switched.date_range == rng


def test_transitions_do_not_mutate_input():
    state = vs.initial_state()
    vs.set_search(state, "x")
    vs.open_form(state)
    assert state == vs.initial_state()


def test_form_modes(trip_factory):
    trip = trip_factory()
    state = vs.initial_state()

    adding = vs.open_form(state)
    editing = vs.edit_record(state, trip)

    assert adding.mode == "form" and not adding.is_editing
    assert editing.is_editing and editing.selected == trip
    assert vs.close_form(editing).selected is None


def test_read_only_views_refuse_forms_and_deletes(trip_factory):
    state = vs.initial_state("driver_payment")

    assert vs.open_form(state) == state
    assert vs.edit_record(state, trip_factory()) == state
    assert vs.request_delete(state, "t1") == state


def test_sort_by_toggles():
    state = vs.initial_state()
    once = vs.sort_by(state, "wayment")
    twice = vs.sort_by(once, "wayment")
    assert once.sort == SortConfig("wayment", "asc")
    assert twice.sort == SortConfig("wayment", "desc")


def test_loading_cycle_and_errors():
    state = vs.finish_loading(vs.initial_state(), "old error")

    loading = vs.start_loading(state)
    failed = vs.finish_loading(loading, "Network down")

    assert loading.loading and loading.error is None
    assert not failed.loading and failed.error == "Network down"
    assert vs.clear_error(failed).error is None


def test_delete_request_and_cancel():
    state = vs.request_delete(vs.initial_state("maintenance"), 42)
    assert state.pending_delete == "42"
    assert vs.cancel_delete(state).pending_delete is None
