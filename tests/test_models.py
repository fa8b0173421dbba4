"""Tests for record models and input coercion."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from vanledger.models import TripRecord
from vanledger.models.coerce import to_bool, to_decimal, to_iso_date, to_optional_id, to_wire_number


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Decimal("0")),
        ("", Decimal("0")),
        ("abc", Decimal("0")),
        ("1,250.50", Decimal("1250.50")),
        (0.1, Decimal("0.1")),
        (7, Decimal("7")),
        (True, Decimal("0")),
        ("NaN", Decimal("0")),
    ],
)
def test_to_decimal(value, expected):
    assert to_decimal(value) == expected


def test_to_wire_number_prefers_ints():
    assert to_wire_number(Decimal("500.00")) == 500
    assert isinstance(to_wire_number(Decimal("500.00")), int)
    assert to_wire_number(Decimal("12.5")) == 12.5


def test_to_iso_date():
    assert to_iso_date("2024-01-05T00:00:00.000Z") == "2024-01-05"
    assert to_iso_date(datetime(2024, 1, 5, 10, 30)) == "2024-01-05"
    assert to_iso_date(date(2024, 1, 5)) == "2024-01-05"
    assert to_iso_date("someday") == "someday"
    assert to_iso_date(None) == ""


def test_ids_and_flags():
    assert to_optional_id(12) == "12"
    assert to_optional_id("  ") is None
    assert to_bool("yes") is True
    assert to_bool(0) is False
    assert to_bool(None) is False


def test_trip_derived_fields():
    trip = TripRecord(from_location="Nashik", to_location="Pune", wayment=Decimal("1560"), rent_per_bag=Decimal("450"))

    assert trip.number_of_bags == 20
    assert trip.total_rent == Decimal("9000")
    assert trip.route == "Nashik - Pune"
    assert "number_of_bags" not in trip.model_dump()
