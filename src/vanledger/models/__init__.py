"""Record schema exports."""

from .expenses import AdvanceRecord, FuelRecord, MaintenanceRecord
from .payments import DriverPaymentRecord, VendorPaymentRecord
from .trip import WAYMENT_PER_BAG, TripRecord, bags_for_wayment

__all__ = [
    "AdvanceRecord",
    "DriverPaymentRecord",
    "FuelRecord",
    "MaintenanceRecord",
    "TripRecord",
    "VendorPaymentRecord",
    "WAYMENT_PER_BAG",
    "bags_for_wayment",
]
