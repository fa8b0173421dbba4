"""API-backed repository for driver advances."""

from __future__ import annotations

from typing import Any, Mapping

from ...models.coerce import to_decimal, to_iso_date, to_optional_id, to_text, to_wire_number
from ...models.expenses import AdvanceRecord
from ...services.validation import validate_advance
from .base import ApiRecordRepository


class ApiAdvanceRepository(ApiRecordRepository[AdvanceRecord]):
    """Advances live under ``/advance``."""

    resource = "advance"
    label = "advances"
    number_fields = {"amount": "Amount"}

    def normalize(self, data: Mapping[str, Any]) -> AdvanceRecord:
        return AdvanceRecord(
            id=to_optional_id(data.get("id")),
            date=to_iso_date(data.get("date")),
            driver_name=to_text(data.get("driver_name")),
            amount=to_decimal(data.get("amount")),
        )

    def from_wire(self, payload: Mapping[str, Any]) -> AdvanceRecord:
        return AdvanceRecord(
            id=to_optional_id(payload.get("id")),
            date=to_iso_date(payload.get("date")),
            driver_name=to_text(payload.get("driverName")),
            amount=to_decimal(payload.get("amount")),
        )

    def to_wire(self, record: AdvanceRecord) -> dict[str, Any]:
        return {
            "driverName": record.driver_name,
            "date": record.date,
            "amount": to_wire_number(record.amount),
            "vanNo": self.default_van_no,
        }

    def validate(self, record: AdvanceRecord) -> dict[str, str]:
        return validate_advance(record)
