"""API-backed repository for fuel purchases."""

from __future__ import annotations

from typing import Any, Mapping

from ...models.coerce import to_bool, to_decimal, to_iso_date, to_optional_id, to_text, to_wire_number
from ...models.expenses import FuelRecord
from ...services.validation import validate_fuel
from .base import ApiRecordRepository


class ApiFuelRepository(ApiRecordRepository[FuelRecord]):
    """Fuel lives under ``/diesel``; the API calls cost ``amount``."""

    resource = "diesel"
    label = "fuel"
    number_fields = {"cost": "Cost"}

    def normalize(self, data: Mapping[str, Any]) -> FuelRecord:
        return FuelRecord(
            id=to_optional_id(data.get("id")),
            date=to_iso_date(data.get("date")),
            driver_name=to_text(data.get("driver_name")),
            description=to_text(data.get("description")),
            cost=to_decimal(data.get("cost")),
            paid_by_driver=to_bool(data.get("paid_by_driver")),
        )

    def from_wire(self, payload: Mapping[str, Any]) -> FuelRecord:
        return FuelRecord(
            id=to_optional_id(payload.get("id")),
            date=to_iso_date(payload.get("date")),
            driver_name=to_text(payload.get("driverName")),
            description=to_text(payload.get("description")),
            cost=to_decimal(payload.get("amount")),
            paid_by_driver=to_bool(payload.get("paidByDriver")),
        )

    def to_wire(self, record: FuelRecord) -> dict[str, Any]:
        # The fuel form has no van field; the API still requires one.
        return {
            "vanNo": self.default_van_no,
            "amount": to_wire_number(record.cost),
            "description": record.description,
            "date": record.date,
            "driverName": record.driver_name,
            "paidByDriver": record.paid_by_driver,
        }

    def validate(self, record: FuelRecord) -> dict[str, str]:
        return validate_fuel(record)
