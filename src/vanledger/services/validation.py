"""Client-side checks run before anything is sent to the API.

Each ``validate_*`` returns a ``field -> message`` mapping keyed by record
field name so forms can show the message next to the offending input.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping

from ..errors import ValidationError
from ..models.coerce import is_number
from ..models.expenses import AdvanceRecord, FuelRecord, MaintenanceRecord
from ..models.trip import TripRecord


def _check_date(errors: dict[str, str], field: str, value: str, label: str) -> None:
    if not value:
        errors[field] = f"{label} is required"
        return
    try:
        date.fromisoformat(value)
    except ValueError:
        errors[field] = f"{label} must be a date (YYYY-MM-DD)"


def validate_trip(record: TripRecord) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not record.from_location:
        errors["from_location"] = "From location is required"
    if not record.to_location:
        errors["to_location"] = "To location is required"
    _check_date(errors, "delivery_date", record.delivery_date, "Delivery date")
    if record.wayment <= 0:
        errors["wayment"] = "Wayment must be greater than 0"
    if record.rent_per_bag <= 0:
        errors["rent_per_bag"] = "Rent per bag must be greater than 0"
    if not record.driver_name:
        errors["driver_name"] = "Driver name is required"
    if record.driver_rent <= 0:
        errors["driver_rent"] = "Driver rent must be greater than 0"
    if record.misc_spends < 0:
        errors["misc_spends"] = "Misc spends cannot be negative"
    if record.advance < 0:
        errors["advance"] = "Advance cannot be negative"
    return errors


def validate_maintenance(record: MaintenanceRecord) -> dict[str, str]:
    errors: dict[str, str] = {}
    _check_date(errors, "date", record.date, "Date")
    if not record.van_no:
        errors["van_no"] = "Van number is required"
    if not record.description:
        errors["description"] = "Description is required"
    if record.cost <= 0:
        errors["cost"] = "Cost must be greater than 0"
    return errors


def validate_fuel(record: FuelRecord) -> dict[str, str]:
    errors: dict[str, str] = {}
    _check_date(errors, "date", record.date, "Date")
    if not record.description:
        errors["description"] = "Description is required"
    if record.cost <= 0:
        errors["cost"] = "Cost must be greater than 0"
    return errors


def validate_advance(record: AdvanceRecord) -> dict[str, str]:
    errors: dict[str, str] = {}
    _check_date(errors, "date", record.date, "Date")
    if not record.driver_name:
        errors["driver_name"] = "Driver name is required"
    if record.amount <= 0:
        errors["amount"] = "Amount must be greater than 0"
    return errors


def check_numbers(data: Mapping[str, Any], fields: Mapping[str, str]) -> dict[str, str]:
    """Flag raw form values in ``fields`` that are not numbers.

    Coercion turns unparseable text into 0, so this runs on the raw mapping.
    """

    return {
        name: f"{label} must be a number"
        for name, label in fields.items()
        if not is_number(data.get(name))
    }


def ensure_valid(errors: Mapping[str, str]) -> None:
    """Raise ValidationError when ``errors`` is non-empty."""

    if errors:
        raise ValidationError(errors)
