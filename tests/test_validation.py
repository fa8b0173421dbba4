"""Tests for client-side record validation."""

from __future__ import annotations

from decimal import Decimal

import pytest

from vanledger.errors import ValidationError
from vanledger.services.validation import (
    check_numbers,
    ensure_valid,
    validate_advance,
    validate_fuel,
    validate_maintenance,
    validate_trip,
)


def test_valid_records_have_no_errors(trip_factory, maintenance_factory, fuel_factory, advance_factory):
    assert validate_trip(trip_factory()) == {}
    assert validate_maintenance(maintenance_factory()) == {}
    assert validate_fuel(fuel_factory(driver_name="")) == {}
    assert validate_advance(advance_factory()) == {}


def test_trip_rules(trip_factory):
    errors = validate_trip(
        trip_factory(
            from_location="",
            delivery_date="05/01/2024",
            rent_per_bag=Decimal("-1"),
            driver_rent=Decimal("0"),
            misc_spends=Decimal("-5"),
            advance=Decimal("-1"),
        )
    )

    assert errors == {
        "from_location": "From location is required",
        "delivery_date": "Delivery date must be a date (YYYY-MM-DD)",
        "rent_per_bag": "Rent per bag must be greater than 0",
        "driver_rent": "Driver rent must be greater than 0",
        "misc_spends": "Misc spends cannot be negative",
        "advance": "Advance cannot be negative",
    }


def test_zero_misc_and_advance_are_allowed(trip_factory):
    assert validate_trip(trip_factory(misc_spends=Decimal("0"), advance=Decimal("0"))) == {}


def test_missing_date_is_required(maintenance_factory, fuel_factory):
    assert validate_maintenance(maintenance_factory(date=""))["date"] == "Date is required"
    assert validate_fuel(fuel_factory(date=""))["date"] == "Date is required"


def test_fuel_cost_must_be_positive(fuel_factory):
    assert validate_fuel(fuel_factory(cost=Decimal("0"))) == {"cost": "Cost must be greater than 0"}


def test_advance_requires_driver(advance_factory):
    assert validate_advance(advance_factory(driver_name="")) == {"driver_name": "Driver name is required"}


def test_ensure_valid_raises_with_field_map():
    ensure_valid({})
    with pytest.raises(ValidationError) as info:
        ensure_valid({"cost": "Cost must be greater than 0"})
    assert info.value.errors == {"cost": "Cost must be greater than 0"}
    assert "cost: Cost must be greater than 0" in str(info.value)
    assert isinstance(info.value, ValueError)


def test_check_numbers_flags_unparseable_text():
    fields = {"misc_spends": "Misc spends", "advance": "Advance", "wayment": "Wayment"}

    errors = check_numbers({"misc_spends": "5OO", "advance": "", "wayment": "1,560"}, fields)

    assert errors == {"misc_spends": "Misc spends must be a number"}


@pytest.mark.parametrize("value", [None, "", "  ", 0, 12.5, Decimal("3"), "-40"])
def test_check_numbers_accepts_blank_and_numeric(value):
    assert check_numbers({"cost": value}, {"cost": "Cost"}) == {}
