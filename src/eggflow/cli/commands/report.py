"""Report, dashboard and trend commands."""

from datetime import date

import click
from eggflow.cli.date_filters import date_range_options, parse_date_or_exit, resolve_cli_date_range
from eggflow.cli.formatting import format_money, format_quantity, format_report_lines, format_share_text
from eggflow.domain.cashflow import TREND_DAYS, TREND_PERIOD, CashFlowService
from eggflow.domain.report import ReportService
from eggflow.utils.date_parser import get_date_range


@click.command("report")
@date_range_options
@click.option("--share", is_flag=True, help="Print the plain-text share message instead")
@click.pass_context
def report(ctx, start_date: str | None, end_date: str | None, periods: tuple[str, ...], share: bool):
    """Show egg, feed and cash figures for a date range.

    The default range is the last 30 days.

    Examples:
        eggflow report
        eggflow report --this-month
        eggflow report --start-date 2024-01-01 --end-date 2024-01-31 --share
    """
    store = ctx.obj["store"]
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        periods=periods,
        default_range=get_date_range("last-30-days"),
    )
    snapshot = ReportService(store).build_report(start, end)
    settings = store.settings

    if share:
        click.echo(format_share_text(snapshot, settings.farm_name, settings.currency))
        return

    click.echo(f"\n{settings.farm_name} Report ({start} to {end})")
    click.echo("=" * 40)
    for line in format_report_lines(snapshot, settings.currency):
        click.echo(line)


@click.command("dashboard")
@click.option("--date", "date_str", help="Day to summarize (default: today)")
@click.pass_context
def dashboard(ctx, date_str: str | None):
    """Show the daily summary and the last 7 days of performance."""
    store = ctx.obj["store"]
    day = parse_date_or_exit(ctx, date_str)
    service = ReportService(store)
    summary = service.build_daily_summary(day)
    currency = store.settings.currency

    click.echo(f"\n{store.settings.farm_name} - {day}")
    click.echo("=" * 40)
    for line in format_report_lines(summary, currency):
        click.echo(line)

    click.echo("\nLast 7 days:")
    click.echo(f"  {'Date':<12} {'Collected':>10} {'Revenue':>16}")
    for point in service.performance_series(day):
        click.echo(
            f"  {point.date!s:<12} {format_quantity(point.collected):>10} "
            f"{format_money(point.revenue, currency):>16}"
        )


@click.command("trend")
@click.option("--days", type=click.IntRange(min=1), default=TREND_DAYS, show_default=True, help="Days to cover")
@click.option(
    "--period", type=click.IntRange(min=1), default=TREND_PERIOD, show_default=True,
    help="Moving average window in days",
)
@click.option("--end-date", help="Last day of the trend (default: today)")
@click.pass_context
def trend(ctx, days: int, period: int, end_date: str | None):
    """Show daily income and expense with moving averages."""
    store = ctx.obj["store"]
    end = parse_date_or_exit(ctx, end_date, "end date") if end_date else date.today()
    points = CashFlowService(store).daily_trend(end, days=days, period=period)
    currency = store.settings.currency

    click.echo(f"\n{'Date':<12} {'Income':>15} {'Avg':>15} {'Expense':>15} {'Avg':>15}")
    click.echo("-" * 76)
    for point in points:
        click.echo(
            f"{point.date!s:<12} {format_money(point.income, currency):>15} "
            f"{format_money(point.income_average, currency):>15} "
            f"{format_money(point.expense, currency):>15} "
            f"{format_money(point.expense_average, currency):>15}"
        )


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report)
    cli.add_command(dashboard)
    cli.add_command(trend)
