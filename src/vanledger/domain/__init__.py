"""Domain-level contracts."""

from .repositories import RecordRepository

__all__ = ["RecordRepository"]
