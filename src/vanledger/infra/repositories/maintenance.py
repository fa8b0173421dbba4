"""API-backed repository for maintenance records."""

from __future__ import annotations

from typing import Any, Mapping

from ...models.coerce import to_bool, to_decimal, to_iso_date, to_optional_id, to_text, to_wire_number
from ...models.expenses import MaintenanceRecord
from ...services.validation import validate_maintenance
from .base import ApiRecordRepository


class ApiMaintenanceRepository(ApiRecordRepository[MaintenanceRecord]):
    """Maintenance lives under ``/maintenance``; the API calls cost ``amount``."""

    resource = "maintenance"
    label = "maintenance"
    number_fields = {"cost": "Cost"}

    def normalize(self, data: Mapping[str, Any]) -> MaintenanceRecord:
        return MaintenanceRecord(
            id=to_optional_id(data.get("id")),
            date=to_iso_date(data.get("date")),
            van_no=to_text(data.get("van_no")),
            driver_name=to_text(data.get("driver_name")),
            description=to_text(data.get("description")),
            cost=to_decimal(data.get("cost")),
            paid_by_driver=to_bool(data.get("paid_by_driver")),
        )

    def from_wire(self, payload: Mapping[str, Any]) -> MaintenanceRecord:
        return MaintenanceRecord(
            id=to_optional_id(payload.get("id")),
            date=to_iso_date(payload.get("date")),
            van_no=to_text(payload.get("vanNo")),
            driver_name=to_text(payload.get("driverName")),
            description=to_text(payload.get("description")),
            cost=to_decimal(payload.get("amount")),
            paid_by_driver=to_bool(payload.get("paidByDriver")),
        )

    def to_wire(self, record: MaintenanceRecord) -> dict[str, Any]:
        return {
            "vanNo": record.van_no,
            "amount": to_wire_number(record.cost),
            "description": record.description,
            "date": record.date,
            "driverName": record.driver_name,
            "paidByDriver": record.paid_by_driver,
        }

    def validate(self, record: MaintenanceRecord) -> dict[str, str]:
        return validate_maintenance(record)
