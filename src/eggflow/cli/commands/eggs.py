"""Egg collection commands."""

import click
from eggflow.cli.date_filters import parse_date_or_exit
from eggflow.cli.error_handling import handle_domain_error
from eggflow.domain.eggs import EggService
from eggflow.domain.inventory import InventoryService


@click.group()
def eggs_group():
    """Record daily egg production."""
    pass


@eggs_group.command("collect")
@click.argument("collected", type=int)
@click.option("--wasted", type=int, default=0, show_default=True, help="Broken or unusable eggs")
@click.option("--date", "date_str", help="Collection date (default: today)")
@click.option("--notes", help="Optional notes")
@click.pass_context
def collect(ctx, collected: int, wasted: int, date_str: str | None, notes: str | None):
    """Record eggs collected on a day.

    Examples:
        eggflow eggs collect 1450 --wasted 12
        eggflow eggs collect 1380 --date yesterday
    """
    store = ctx.obj["store"]
    collection_date = parse_date_or_exit(ctx, date_str)
    try:
        entry = EggService(store).record_collection(
            date=collection_date, collected=collected, wasted=wasted, notes=notes
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    stock = InventoryService(store).egg_stock_for_day(entry.date)
    click.echo(
        f"Recorded {entry.collected} collected, {entry.wasted} wasted on {entry.date} (ID: {entry.id})"
    )
    click.echo(f"Closing egg stock for {entry.date}: {stock.closing}")


@eggs_group.command("list")
@click.option("--limit", type=int, default=20, show_default=True, help="Number of entries to show")
@click.pass_context
def list_collections(ctx, limit: int):
    """List egg collections, most recent entries first."""
    collections = EggService(ctx.obj["store"]).list_collections()[:limit]
    if not collections:
        click.echo("No egg collections found.")
        return

    click.echo(f"\n{'Date':<12} {'ID':<10} {'Collected':>10} {'Wasted':>8}  Notes")
    click.echo("-" * 60)
    for entry in collections:
        click.echo(
            f"{entry.date!s:<12} {entry.id:<10} {entry.collected:>10} {entry.wasted:>8}  {entry.notes or ''}"
        )


@eggs_group.command("delete")
@click.argument("collection_id")
@click.pass_context
def delete_collection(ctx, collection_id: str):
    """Delete an egg collection entry."""
    try:
        EggService(ctx.obj["store"]).delete_collection(collection_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted egg collection {collection_id}")


def register_commands(cli):
    """Register egg commands with main CLI."""
    cli.add_command(eggs_group, name="eggs")
