"""Tests for the click commands, run against a fake HTTP session."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from conftest import FakeResponse, FakeSession
from vanledger import cli as cli_module
from vanledger.desktop.context import create_app_context

TRIPS = [
    {
        "id": "t1", "fromLocation": "Nashik", "toLocation": "Pune", "dateOfDelivery": "2024-01-05",
        "wayment": 780, "rentPerBag": 500, "driverName": "Ramesh", "driverRent": 3000,
        "miscSpends": 500, "advance": 200, "vanNo": "VAN001",
    },
    {
        "id": "t2", "fromLocation": "Mumbai", "toLocation": "Pune", "dateOfDelivery": "2024-02-05",
        "wayment": 1560, "rentPerBag": 450, "driverName": "Suresh", "driverRent": 4000,
        "miscSpends": 0, "advance": 0, "vanNo": "VAN001",
    },
]
ADVANCES = [
    {"id": "a1", "date": "2024-01-07", "driverName": "Ramesh", "amount": 1000},
    {"id": "a2", "date": "2024-02-07", "driverName": "Suresh", "amount": 500},
]


@pytest.fixture
def session(config, monkeypatch):
    fake = FakeSession()
    monkeypatch.setattr(
        cli_module, "create_app_context", lambda cfg: create_app_context(cfg, session=fake)
    )
    return fake


def test_summary_prints_all_totals(session):
    session.queue(
        FakeResponse(200, TRIPS),
        FakeResponse(200, TRIPS),
        FakeResponse(200, ADVANCES),
        FakeResponse(200, TRIPS),
    )

    result = CliRunner().invoke(cli_module.cli, ["summary"])

    assert result.exit_code == 0, result.output
    assert "Deliveries: 2 trips, 30 bags" in result.output
    assert "Total rent:   ₹14,000.00" in result.output
    assert "Net salary:    ₹6,000.00" in result.output
    assert "Net payment:  ₹14,300.00" in result.output


def test_summary_for_one_driver_in_range(session):
    session.queue(
        FakeResponse(200, TRIPS),
        FakeResponse(200, TRIPS),
        FakeResponse(200, ADVANCES),
        FakeResponse(200, TRIPS),
    )

    result = CliRunner().invoke(
        cli_module.cli, ["summary", "--start", "2024-01-01", "--end", "2024-01-31", "--driver", "ramesh"]
    )

    assert result.exit_code == 0, result.output
    assert "Driver salary (ramesh):" in result.output
    assert "Net salary:    ₹2,500.00" in result.output
    assert "Deliveries: 1 trips, 10 bags" in result.output


def test_bad_date_is_usage_error(session):
    result = CliRunner().invoke(cli_module.cli, ["summary", "--start", "yesterday"])

    assert result.exit_code == 2
    assert session.calls == []


def test_server_error_becomes_click_error(session):
    session.queue(FakeResponse(500, text="database offline"))

    result = CliRunner().invoke(cli_module.cli, ["summary"])

    assert result.exit_code == 1
    assert "Request failed with status 500" in result.output
    assert "database offline" in result.output


def test_export_csv_to_directory(session, tmp_path):
    session.queue(FakeResponse(200, ADVANCES))
    out = tmp_path / "out"

    result = CliRunner().invoke(
        cli_module.cli, ["export", "advance", "--format", "csv", "--output", str(out), "--search", "suresh"]
    )

    assert result.exit_code == 0, result.output
    [path] = list(out.glob("advances-*.csv"))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Date,Driver Name,Amount"
    assert lines[1] == "2024-02-07,Suresh,500"
    assert lines[-1] == "TOTALS,,500"
    assert "Export written:" in result.output


def test_export_unknown_view_is_rejected(session):
    result = CliRunner().invoke(cli_module.cli, ["export", "payroll"])

    assert result.exit_code == 2
    assert session.calls == []
