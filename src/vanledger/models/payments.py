"""Derived payment views projected from trip records."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel

from .coerce import ZERO


class DriverPaymentRecord(SQLModel):
    """What a driver earned on one trip."""

    id: Optional[str] = Field(default=None)
    date: str = Field(default="")
    from_location: str = Field(default="")
    to_location: str = Field(default="")
    number_of_bags: int = Field(default=0)
    driver_name: str = Field(default="")
    driver_rent: Decimal = Field(default=ZERO)
    misc_spends: Decimal = Field(default=ZERO)

    @property
    def route(self) -> str:
        return f"{self.from_location} - {self.to_location}"


class VendorPaymentRecord(SQLModel):
    """What the vendor owes for one trip."""

    id: Optional[str] = Field(default=None)
    date: str = Field(default="")
    from_location: str = Field(default="")
    to_location: str = Field(default="")
    number_of_bags: int = Field(default=0)
    wayment: Decimal = Field(default=ZERO)
    rent: Decimal = Field(default=ZERO)
    misc_spends: Decimal = Field(default=ZERO)
    advance: Decimal = Field(default=ZERO)

    @property
    def route(self) -> str:
        return f"{self.from_location} - {self.to_location}"
