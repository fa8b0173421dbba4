"""Error taxonomy shared by services, the coordinator and the CLI."""

from __future__ import annotations

from typing import Mapping


class VanLedgerError(Exception):
    """Base class for recoverable application errors."""


class ValidationError(VanLedgerError, ValueError):
    """Client-side form validation failed; nothing was sent to the API."""

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        summary = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(summary or "Invalid record")


class NetworkError(VanLedgerError):
    """A remote call failed or returned a non-success status."""

    def __init__(self, message: str, *, status: int | None = None):
        super().__init__(message)
        self.status = status


class NotFoundError(NetworkError):
    """The remote store has no record with the requested id."""


class DataShapeError(NetworkError):
    """The remote response was not in the expected shape."""
