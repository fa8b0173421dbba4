"""Tests for date-range and free-text filtering."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from vanledger.models.payments import DriverPaymentRecord
from vanledger.services.filtering import (
    DateRange,
    SearchMode,
    apply_filters,
    filter_by_date,
    parse_record_date,
    search_records,
)


def test_parse_record_date_handles_timestamps_and_garbage():
    assert parse_record_date("2024-03-01") == date(2024, 3, 1)
    assert parse_record_date("2024-03-01T10:00:00Z") == date(2024, 3, 1)
    assert parse_record_date("") is None
    assert parse_record_date("yesterday") is None
    assert parse_record_date(None) is None


def test_date_range_from_strings_ignores_blank_bounds():
    rng = DateRange.from_strings("2024-01-01", "  ")
    assert rng.start == date(2024, 1, 1)
    assert rng.end is None
    assert DateRange.from_strings(None, "").is_open


def test_date_range_from_strings_rejects_bad_bound():
    with pytest.raises(ValueError):
        DateRange.from_strings("01/02/2024", None)


def test_date_range_is_inclusive_on_both_ends():
    rng = DateRange(date(2024, 1, 5), date(2024, 1, 10))
    assert rng.contains("2024-01-05")
    assert rng.contains("2024-01-10")
    assert not rng.contains("2024-01-04")
    assert not rng.contains("2024-01-11")


def test_open_range_keeps_unparseable_dates_bounded_range_drops_them():
    assert DateRange().contains("garbage")
    assert DateRange().contains("")
    assert not DateRange(start=date(2024, 1, 1)).contains("garbage")
    assert not DateRange(end=date(2024, 1, 1)).contains("")


def test_filter_by_date_uses_named_field(trip_factory):
    trips = [
        trip_factory(id="1", delivery_date="2024-01-01"),
        trip_factory(id="2", delivery_date="2024-02-01"),
        trip_factory(id="3", delivery_date="2024-03-01"),
    ]
    rng = DateRange(date(2024, 1, 15), date(2024, 2, 15))

    kept = filter_by_date(trips, rng, date_field="delivery_date")

    assert [t.id for t in kept] == ["2"]


def test_search_all_fields_is_case_insensitive(trip_factory):
    trips = [
        trip_factory(id="1", from_location="Nashik", driver_name="Ramesh"),
        trip_factory(id="2", from_location="Mumbai", driver_name="Suresh"),
    ]

    assert [t.id for t in search_records(trips, "MUMBAI")] == ["2"]
    assert [t.id for t in search_records(trips, "esh")] == ["1", "2"]


def test_search_matches_numbers_and_derived_values(trip_factory):
    trips = [
        trip_factory(id="1", rent_per_bag=Decimal("500.00"), wayment=Decimal("780"), misc_spends=Decimal("0")),
        trip_factory(id="2", rent_per_bag=Decimal("450"), wayment=Decimal("1560"), misc_spends=Decimal("0")),
    ]

    # 1560 wayment is 20 bags at 450 = 9000 total rent
    assert [t.id for t in search_records(trips, "9000")] == ["2"]
    assert [t.id for t in search_records(trips, "500")] == ["1"]


def test_blank_search_keeps_everything(trip_factory):
    trips = [trip_factory(id="1"), trip_factory(id="2")]
    assert search_records(trips, "   ") == trips
    assert search_records(trips, None) == trips


def test_driver_name_mode_ignores_other_fields():
    payments = [
        DriverPaymentRecord(id="1", date="2024-01-01", from_location="Ramnagar", driver_name="Suresh"),
        DriverPaymentRecord(id="2", date="2024-01-01", from_location="Pune", driver_name="Ramesh"),
    ]

    kept = search_records(payments, "ram", SearchMode.DRIVER_NAME)

    assert [p.id for p in kept] == ["2"]


def test_apply_filters_combines_date_and_search(trip_factory):
    trips = [
        trip_factory(id="1", delivery_date="2024-01-01", driver_name="Ramesh"),
        trip_factory(id="2", delivery_date="2024-02-01", driver_name="Ramesh"),
        trip_factory(id="3", delivery_date="2024-02-02", driver_name="Suresh"),
    ]

    kept = apply_filters(
        trips,
        date_range=DateRange(start=date(2024, 2, 1)),
        date_field="delivery_date",
        term="ramesh",
    )

    assert [t.id for t in kept] == ["2"]
