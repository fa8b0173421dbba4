"""Totals and net figures derived from trip and advance records.

Two different "advance" figures exist and are kept apart:

* the advance typed into a trip form (``TripRecord.advance``), which feeds
  the vendor net and the trip table's driver net;
* standalone ``AdvanceRecord`` rows, which are the only thing netted
  against a driver's salary on the driver payment view.

All sums are ``Decimal``; rounding is left to the formatters.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Sequence

from ..models.coerce import ZERO, to_decimal
from ..models.expenses import AdvanceRecord
from ..models.payments import DriverPaymentRecord, VendorPaymentRecord
from ..models.trip import TripRecord
from .filtering import DateRange, SearchMode, apply_filters


@dataclass(frozen=True)
class TripTotals:
    """Column sums over a list of trips."""

    count: int = 0
    bags: int = 0
    wayment: Decimal = ZERO
    driver_rent: Decimal = ZERO
    misc_spends: Decimal = ZERO
    advance: Decimal = ZERO
    vendor_rent: Decimal = ZERO

    @property
    def driver_net(self) -> Decimal:
        return self.driver_rent + self.misc_spends - self.advance

    @property
    def vendor_net(self) -> Decimal:
        return self.vendor_rent + self.misc_spends - self.advance

    def __add__(self, other: "TripTotals") -> "TripTotals":
        if not isinstance(other, TripTotals):
            return NotImplemented
        return TripTotals(
            count=self.count + other.count,
            bags=self.bags + other.bags,
            wayment=self.wayment + other.wayment,
            driver_rent=self.driver_rent + other.driver_rent,
            misc_spends=self.misc_spends + other.misc_spends,
            advance=self.advance + other.advance,
            vendor_rent=self.vendor_rent + other.vendor_rent,
        )


def aggregate_trips(trips: Iterable[TripRecord]) -> TripTotals:
    totals = TripTotals()
    for trip in trips:
        totals = totals + TripTotals(
            count=1,
            bags=trip.number_of_bags,
            wayment=trip.wayment,
            driver_rent=trip.driver_rent,
            misc_spends=trip.misc_spends,
            advance=to_decimal(trip.advance),
            vendor_rent=trip.total_rent,
        )
    return totals


def total_advances(
    advances: Iterable[AdvanceRecord],
    date_range: DateRange | None = None,
    driver_term: str | None = None,
) -> Decimal:
    """Sum standalone advances dated within ``date_range``.

    ``driver_term`` narrows to drivers whose name contains it, the same
    match the driver payment search uses.
    """

    in_scope = apply_filters(
        list(advances),
        date_range=date_range,
        date_field="date",
        term=driver_term,
        mode=SearchMode.DRIVER_NAME,
    )
    return sum((a.amount for a in in_scope), ZERO)


@dataclass(frozen=True)
class DriverSalarySummary:
    total_salary: Decimal = ZERO
    total_misc: Decimal = ZERO
    total_advance: Decimal = ZERO

    @property
    def net_salary(self) -> Decimal:
        return self.total_salary + self.total_misc - self.total_advance


def driver_salary_summary(
    payments: Sequence[DriverPaymentRecord],
    advances: Iterable[AdvanceRecord],
    date_range: DateRange | None = None,
    driver_term: str | None = None,
) -> DriverSalarySummary:
    """Net salary for already-filtered driver payments.

    ``advances`` is filtered here, independently of the payment list.
    """

    return DriverSalarySummary(
        total_salary=sum((p.driver_rent for p in payments), ZERO),
        total_misc=sum((p.misc_spends for p in payments), ZERO),
        total_advance=total_advances(advances, date_range, driver_term),
    )


@dataclass(frozen=True)
class VendorPaymentSummary:
    total_rent: Decimal = ZERO
    total_misc: Decimal = ZERO
    total_advance: Decimal = ZERO
    total_bags: int = 0
    total_wayment: Decimal = ZERO

    @property
    def net_payment(self) -> Decimal:
        return self.total_rent + self.total_misc - self.total_advance


def vendor_payment_summary(payments: Sequence[VendorPaymentRecord]) -> VendorPaymentSummary:
    return VendorPaymentSummary(
        total_rent=sum((p.rent for p in payments), ZERO),
        total_misc=sum((p.misc_spends for p in payments), ZERO),
        total_advance=sum((p.advance for p in payments), ZERO),
        total_bags=sum(p.number_of_bags for p in payments),
        total_wayment=sum((p.wayment for p in payments), ZERO),
    )


def project_driver_payments(trips: Iterable[TripRecord]) -> list[DriverPaymentRecord]:
    return [
        DriverPaymentRecord(
            id=trip.id,
            date=trip.delivery_date,
            from_location=trip.from_location,
            to_location=trip.to_location,
            number_of_bags=trip.number_of_bags,
            driver_name=trip.driver_name,
            driver_rent=trip.driver_rent,
            misc_spends=trip.misc_spends,
        )
        for trip in trips
    ]


def project_vendor_payments(trips: Iterable[TripRecord]) -> list[VendorPaymentRecord]:
    return [
        VendorPaymentRecord(
            id=trip.id,
            date=trip.delivery_date,
            from_location=trip.from_location,
            to_location=trip.to_location,
            number_of_bags=trip.number_of_bags,
            wayment=trip.wayment,
            rent=trip.total_rent,
            misc_spends=trip.misc_spends,
            advance=trip.advance,
        )
        for trip in trips
    ]


def column_totals(records: Iterable[Any], fields: Iterable[str]) -> dict[str, Decimal]:
    """Sum each named attribute across ``records``; missing values count as 0."""

    names = list(fields)
    totals = {name: ZERO for name in names}
    for record in records:
        for name in names:
            totals[name] += to_decimal(getattr(record, name, None))
    return totals
