"""CLI helpers for date range resolution."""

import functools
from datetime import date
from typing import Callable

import click

from eggflow.utils.date_parser import get_date_range, parse_date

PERIOD_FLAGS = ("today", "this-week", "this-month", "this-year", "last-week", "last-month", "last-year")


def date_range_options(func: Callable) -> Callable:
    """Add --start-date/--end-date and one flag per named period to a command.

    The wrapped command receives the chosen period flags as ``periods``.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        periods = tuple(
            period for period in PERIOD_FLAGS if kwargs.pop(period.replace("-", "_"), False)
        )
        return func(*args, periods=periods, **kwargs)

    for period in reversed(PERIOD_FLAGS):
        wrapper = click.option(
            f"--{period}", is_flag=True, help=f"Limit to {period.replace('-', ' ')}"
        )(wrapper)
    wrapper = click.option(
        "--end-date", help="End date, inclusive (YYYY-MM-DD or relative like 'today')"
    )(wrapper)
    wrapper = click.option(
        "--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', '30 days ago')"
    )(wrapper)
    return wrapper


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    periods: tuple[str, ...] = (),
    default_range: tuple[date, date] | None = None,
) -> tuple[date, date]:
    """Resolve CLI date range from period flags or explicit dates.

    A missing end date defaults to today; a missing start date defaults to
    the start of ``default_range`` (or the end date itself).
    """
    if len(periods) > 1:
        click.echo(
            "Error: Only one period option (--today, --this-week, --this-month, etc.) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if periods and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --last-month, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if periods:
        return get_date_range(periods[0])

    if start_date is None and end_date is None and default_range is not None:
        return default_range

    end = date.today()
    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    start = default_range[0] if default_range is not None else end
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if start > end:
        click.echo("Error: Start date must not be after end date.", err=True)
        ctx.exit(1)

    return start, end


def parse_date_or_exit(ctx, value: str | None, label: str = "date") -> date:
    """Parse a single CLI date (defaulting to today) or exit with an error."""
    if not value:
        return date.today()
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)
