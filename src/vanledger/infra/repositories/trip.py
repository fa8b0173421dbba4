"""API-backed repository for delivery (trip) records."""

from __future__ import annotations

from typing import Any, Mapping

from ...logging_config import get_logger
from ...models.coerce import to_decimal, to_iso_date, to_optional_id, to_text, to_wire_number
from ...models.trip import TripRecord
from ...services.validation import validate_trip
from .base import ApiRecordRepository

logger = get_logger(__name__)

IMAGE_UPLOAD_PATH = "images/upload"


class ApiTripRepository(ApiRecordRepository[TripRecord]):
    """Trips live under ``/tripdata`` with camelCase field names."""

    resource = "tripdata"
    label = "trips"
    number_fields = {
        "wayment": "Wayment",
        "rent_per_bag": "Rent per bag",
        "driver_rent": "Driver rent",
        "misc_spends": "Misc spends",
        "advance": "Advance",
    }

    def normalize(self, data: Mapping[str, Any]) -> TripRecord:
        return TripRecord(
            id=to_optional_id(data.get("id")),
            from_location=to_text(data.get("from_location")),
            to_location=to_text(data.get("to_location")),
            delivery_date=to_iso_date(data.get("delivery_date")),
            wayment=to_decimal(data.get("wayment")),
            rent_per_bag=to_decimal(data.get("rent_per_bag")),
            driver_name=to_text(data.get("driver_name")),
            driver_rent=to_decimal(data.get("driver_rent")),
            misc_spends=to_decimal(data.get("misc_spends")),
            advance=to_decimal(data.get("advance")),
            van_no=to_text(data.get("van_no")),
            image_url=to_text(data.get("image_url")) or None,
        )

    def from_wire(self, payload: Mapping[str, Any]) -> TripRecord:
        # numberOfBags on the wire is ignored; it is recomputed from wayment.
        return TripRecord(
            id=to_optional_id(payload.get("id")),
            from_location=to_text(payload.get("fromLocation")),
            to_location=to_text(payload.get("toLocation")),
            delivery_date=to_iso_date(payload.get("dateOfDelivery")),
            wayment=to_decimal(payload.get("wayment")),
            rent_per_bag=to_decimal(payload.get("rentPerBag")),
            driver_name=to_text(payload.get("driverName")),
            driver_rent=to_decimal(payload.get("driverRent")),
            misc_spends=to_decimal(payload.get("miscSpends")),
            advance=to_decimal(payload.get("advance")),
            van_no=to_text(payload.get("vanNo")),
            image_url=to_text(payload.get("imageUrl")) or None,
        )

    def to_wire(self, record: TripRecord) -> dict[str, Any]:
        return {
            "fromLocation": record.from_location,
            "toLocation": record.to_location,
            "dateOfDelivery": record.delivery_date,
            "wayment": to_wire_number(record.wayment),
            "numberOfBags": record.number_of_bags,
            "rentPerBag": to_wire_number(record.rent_per_bag),
            "driverName": record.driver_name,
            "driverRent": to_wire_number(record.driver_rent),
            "miscSpends": to_wire_number(record.misc_spends),
            "vanNo": record.van_no or self.default_van_no,
            "advance": to_wire_number(record.advance),
        }

    def validate(self, record: TripRecord) -> dict[str, str]:
        return validate_trip(record)

    def upload_image(self, trip_id: str, filename: str, content: bytes) -> None:
        """Attach an image to an existing trip."""

        self.client.upload(
            IMAGE_UPLOAD_PATH,
            files={"file": (filename, content)},
            data={"tripId": str(trip_id)},
        )
        logger.info("Uploaded trip image", extra={"id": trip_id, "image_name": filename})
