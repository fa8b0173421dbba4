"""Pytest configuration and shared fixtures for VanLedger tests.

This module provides a fake HTTP session, in-memory repositories and record
factories so services, repositories and the coordinator can be exercised
without touching the real API.
"""

from __future__ import annotations

import itertools
import json
from decimal import Decimal
from typing import Any, Callable

import pytest
import requests

from vanledger.config import BaseConfig
from vanledger.errors import NetworkError, NotFoundError
from vanledger.infra.api_client import ApiClient
from vanledger.infra.repositories import (
    ApiAdvanceRepository,
    ApiFuelRepository,
    ApiMaintenanceRepository,
    ApiTripRepository,
)
from vanledger.models import AdvanceRecord, FuelRecord, MaintenanceRecord, TripRecord
from vanledger.desktop.coordinator import ScreenCoordinator

# =============================================================================
# HTTP fakes
# =============================================================================


class FakeResponse:
    """Just enough of ``requests.Response`` for the API client."""

    def __init__(self, status_code: int = 200, body: Any = None, *, text: str | None = None):
        self.status_code = status_code
        if text is not None:
            self.text = text
        elif body is None:
            self.text = ""
        else:
            self.text = json.dumps(body)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Records every request and replays queued responses in order."""

    def __init__(self, *responses: Any):
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, *responses: Any) -> "FakeSession":
        self.responses.extend(responses)
        return self

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def api_client(fake_session) -> ApiClient:
    return ApiClient("http://api.test/api", timeout=5, session=fake_session)


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture
def config(tmp_path, monkeypatch) -> BaseConfig:
    """Configuration rooted in a temporary data directory."""

    monkeypatch.setenv("VANLEDGER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("VANLEDGER_API_URL", "http://api.test/api/")
    monkeypatch.setenv("VANLEDGER_DEV_MODE", "false")
    return BaseConfig()


# =============================================================================
# Record factories
# =============================================================================


def make_trip(**overrides: Any) -> TripRecord:
    data = dict(
        id="t1",
        from_location="Nashik",
        to_location="Pune",
        delivery_date="2024-01-05",
        wayment=Decimal("780"),
        rent_per_bag=Decimal("500"),
        driver_name="Ramesh",
        driver_rent=Decimal("3000"),
        misc_spends=Decimal("500"),
        advance=Decimal("0"),
        van_no="VAN001",
    )
    data.update(overrides)
    return TripRecord(**data)


def make_maintenance(**overrides: Any) -> MaintenanceRecord:
    data = dict(
        id="m1",
        date="2024-01-10",
        van_no="VAN001",
        driver_name="Ramesh",
        description="Oil change",
        cost=Decimal("1200"),
        paid_by_driver=False,
    )
    data.update(overrides)
    return MaintenanceRecord(**data)


def make_fuel(**overrides: Any) -> FuelRecord:
    data = dict(
        id="f1",
        date="2024-01-12",
        driver_name="Suresh",
        description="Diesel 40L",
        cost=Decimal("3600"),
        paid_by_driver=True,
    )
    data.update(overrides)
    return FuelRecord(**data)


def make_advance(**overrides: Any) -> AdvanceRecord:
    data = dict(id="a1", date="2024-01-07", driver_name="Ramesh", amount=Decimal("1000"))
    data.update(overrides)
    return AdvanceRecord(**data)


@pytest.fixture
def trip_factory() -> Callable[..., TripRecord]:
    return make_trip


@pytest.fixture
def maintenance_factory() -> Callable[..., MaintenanceRecord]:
    return make_maintenance


@pytest.fixture
def fuel_factory() -> Callable[..., FuelRecord]:
    return make_fuel


@pytest.fixture
def advance_factory() -> Callable[..., AdvanceRecord]:
    return make_advance


# =============================================================================
# In-memory repositories
# =============================================================================


class MemoryRepository:
    """Record store with the repository surface, backed by a list.

    Shape conversion and validation come from the real API repository so
    form data behaves exactly as it would against the server.
    """

    def __init__(self, repo_cls: type, records: list[Any] | None = None):
        self._shape = repo_cls(client=None)
        self.records = list(records or [])
        self.fail_with: Exception | None = None
        self.calls: list[tuple[str, Any]] = []
        self.uploads: list[tuple[str, str]] = []
        self._ids = itertools.count(1)

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def _index(self, record_id: str) -> int:
        for index, record in enumerate(self.records):
            if record.id == record_id:
                return index
        raise NotFoundError(f"Record not found ({record_id})", status=404)

    def list_all(self) -> list[Any]:
        self.calls.append(("list_all", None))
        self._maybe_fail()
        return list(self.records)

    def create(self, data: Any) -> Any:
        self.calls.append(("create", data))
        record = self._shape.prepare(data)
        self._maybe_fail()
        saved = record.model_copy(update={"id": f"new-{next(self._ids)}"})
        self.records.append(saved)
        return saved

    def update(self, record_id: str, data: Any) -> Any:
        self.calls.append(("update", record_id))
        record = self._shape.prepare(data)
        self._maybe_fail()
        index = self._index(record_id)
        saved = record.model_copy(update={"id": record_id})
        self.records[index] = saved
        return saved

    def delete(self, record_id: str) -> None:
        self.calls.append(("delete", record_id))
        self._maybe_fail()
        del self.records[self._index(record_id)]

    def upload_image(self, trip_id: str, filename: str, content: bytes) -> None:
        self.calls.append(("upload_image", trip_id))
        if filename.endswith(".bad"):
            raise NetworkError("Upload rejected", status=400)
        self.uploads.append((trip_id, filename))


@pytest.fixture
def memory_repos() -> dict[str, MemoryRepository]:
    return {
        "trips": MemoryRepository(ApiTripRepository),
        "maintenance": MemoryRepository(ApiMaintenanceRepository),
        "fuel": MemoryRepository(ApiFuelRepository),
        "advances": MemoryRepository(ApiAdvanceRepository),
    }


@pytest.fixture
def coordinator(memory_repos) -> ScreenCoordinator:
    return ScreenCoordinator(memory_repos)
