"""Command line entry points for VanLedger."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from .config import BaseConfig
from .desktop.context import AppContext, create_app_context
from .errors import VanLedgerError
from .logging_config import setup_logging
from .services.categories import VIEWS
from .services.filtering import DateRange
from .services.formatters import format_currency


def _load(ctx: AppContext, view: str, start: Optional[str], end: Optional[str], search: str = "") -> None:
    try:
        date_range = DateRange.from_strings(start, end)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--start/--end") from exc
    coordinator = ctx.coordinator
    coordinator.enter_view(view)
    if coordinator.state.error:
        raise click.ClickException(coordinator.state.error)
    coordinator.set_date_range(date_range)
    coordinator.set_search(search)


@click.group()
@click.pass_context
def cli(click_ctx: click.Context) -> None:
    """Van rental records: trips, expenses and payments."""

    config = BaseConfig()
    setup_logging(config)
    click_ctx.obj = create_app_context(config)


@cli.command("summary")
@click.option("--start", default=None, help="First day included (YYYY-MM-DD)")
@click.option("--end", default=None, help="Last day included (YYYY-MM-DD)")
@click.option("--driver", default="", help="Narrow driver salary to a driver name")
@click.pass_obj
def summary(ctx: AppContext, start: Optional[str], end: Optional[str], driver: str) -> None:
    """Print delivery, driver salary and vendor payment totals."""

    money = lambda amount: format_currency(amount, ctx.config.CURRENCY_SYMBOL)  # noqa: E731

    _load(ctx, "delivery", start, end)
    trips = ctx.coordinator.table().totals
    click.echo(f"Deliveries: {trips.count} trips, {trips.bags} bags")
    click.echo(f"  Total rent:   {money(trips.vendor_rent)}")
    click.echo(f"  Driver rent:  {money(trips.driver_rent)}")
    click.echo(f"  Misc spends:  {money(trips.misc_spends)}")
    click.echo(f"  Advance:      {money(trips.advance)}")

    _load(ctx, "driver_payment", start, end, driver)
    salary = ctx.coordinator.table().totals
    label = f"Driver salary ({driver})" if driver else "Driver salary"
    click.echo(f"{label}:")
    click.echo(f"  Total salary:  {money(salary.total_salary)}")
    click.echo(f"  Total advance: {money(salary.total_advance)}")
    click.echo(f"  Net salary:    {money(salary.net_salary)}")

    _load(ctx, "vendor_payment", start, end)
    vendor = ctx.coordinator.table().totals
    click.echo("Vendor payment:")
    click.echo(f"  Total rent:   {money(vendor.total_rent)}")
    click.echo(f"  Misc spends:  {money(vendor.total_misc)}")
    click.echo(f"  Advance:      {money(vendor.total_advance)}")
    click.echo(f"  Net payment:  {money(vendor.net_payment)}")


@cli.command("export")
@click.argument("view", type=click.Choice(sorted(VIEWS)))
@click.option("--start", default=None, help="First day included (YYYY-MM-DD)")
@click.option("--end", default=None, help="Last day included (YYYY-MM-DD)")
@click.option("--search", default="", help="Search term for the view")
@click.option("--format", "fmt", type=click.Choice(["xlsx", "csv"]), default="xlsx", show_default=True)
@click.option(
    "--output",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the export (defaults to the data dir exports folder)",
)
@click.pass_obj
def export(
    ctx: AppContext,
    view: str,
    start: Optional[str],
    end: Optional[str],
    search: str,
    fmt: str,
    output: Optional[Path],
) -> None:
    """Export the filtered rows of VIEW with a totals row."""

    _load(ctx, view, start, end, search)
    directory = output or ctx.config.export_dir
    try:
        directory.mkdir(parents=True, exist_ok=True)
        path = ctx.coordinator.export_to(directory, fmt=fmt)
    except (OSError, ValueError, VanLedgerError) as exc:
        raise click.ClickException(f"Export failed: {exc}") from exc
    click.echo(f"Export written: {path}")
