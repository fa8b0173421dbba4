"""Concrete repository implementations backed by the remote API."""

from .advance import ApiAdvanceRepository
from .base import ApiRecordRepository
from .fuel import ApiFuelRepository
from .maintenance import ApiMaintenanceRepository
from .trip import ApiTripRepository

__all__ = [
    "ApiAdvanceRepository",
    "ApiFuelRepository",
    "ApiMaintenanceRepository",
    "ApiRecordRepository",
    "ApiTripRepository",
]
