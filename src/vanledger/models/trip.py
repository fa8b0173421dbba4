"""SQLModel schema for delivery (trip) records."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Optional

from sqlmodel import Field, SQLModel

from .coerce import ZERO, to_decimal

WAYMENT_PER_BAG = 78


def bags_for_wayment(wayment: Any) -> int:
    """Number of bags for a wayment: ``ceil(wayment / 78)``, 0 when not positive."""

    value = to_decimal(wayment)
    if value <= 0:
        return 0
    return math.ceil(value / WAYMENT_PER_BAG)


class TripRecord(SQLModel):
    """A single delivery job from one location to another."""

    id: Optional[str] = Field(default=None)
    from_location: str = Field(default="", max_length=255)
    to_location: str = Field(default="", max_length=255)
    delivery_date: str = Field(default="", description="ISO date (YYYY-MM-DD)")
    wayment: Decimal = Field(default=ZERO, description="Weight measure the bag count derives from")
    rent_per_bag: Decimal = Field(default=ZERO)
    driver_name: str = Field(default="", max_length=255)
    driver_rent: Decimal = Field(default=ZERO)
    misc_spends: Decimal = Field(default=ZERO)
    advance: Decimal = Field(default=ZERO, description="Advance paid out on this trip")
    van_no: str = Field(default="", max_length=32)
    image_url: Optional[str] = Field(default=None)

    @property
    def number_of_bags(self) -> int:
        # Never stored: always follows wayment.
        return bags_for_wayment(self.wayment)

    @property
    def total_rent(self) -> Decimal:
        return self.number_of_bags * self.rent_per_bag

    @property
    def route(self) -> str:
        return f"{self.from_location} - {self.to_location}"
