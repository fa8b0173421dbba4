"""SQLModel schemas for van running costs and driver advances."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel

from .coerce import ZERO


class MaintenanceRecord(SQLModel):
    """Repair or service work done on a van."""

    id: Optional[str] = Field(default=None)
    date: str = Field(default="")
    van_no: str = Field(default="", max_length=32)
    driver_name: str = Field(default="", max_length=255)
    description: str = Field(default="", max_length=500)
    cost: Decimal = Field(default=ZERO)
    paid_by_driver: bool = Field(default=False)


class FuelRecord(SQLModel):
    """A diesel purchase, optionally paid out of a driver's pocket."""

    id: Optional[str] = Field(default=None)
    date: str = Field(default="")
    driver_name: str = Field(default="", max_length=255)
    description: str = Field(default="", max_length=500)
    cost: Decimal = Field(default=ZERO)
    paid_by_driver: bool = Field(default=False)


class AdvanceRecord(SQLModel):
    """Cash paid to a driver ahead of settlement."""

    id: Optional[str] = Field(default=None)
    date: str = Field(default="")
    driver_name: str = Field(default="", max_length=255)
    amount: Decimal = Field(default=ZERO)
