"""Feed inventory commands."""

import click
from eggflow.cli.account_resolution import resolve_account_or_exit
from eggflow.cli.date_filters import parse_date_or_exit
from eggflow.cli.error_handling import handle_domain_error
from eggflow.cli.formatting import format_money, format_quantity
from eggflow.domain.account import AccountService
from eggflow.domain.entities import FeedTransactionType
from eggflow.domain.feed import FeedService
from eggflow.domain.inventory import InventoryService
from eggflow.utils.amount_parser import parse_amount

FEED_TYPES = [t.value for t in FeedTransactionType]


@click.group()
def feed_group():
    """Track feed purchases, consumption and waste."""
    pass


@feed_group.command("add")
@click.argument("feed_type", metavar="TYPE", type=click.Choice(FEED_TYPES, case_sensitive=False))
@click.option("--quantity", required=True, help="Quantity in kg")
@click.option("--cost", help="Total cost (purchases only)")
@click.option("--vendor", help="Vendor name or ID (purchases only)")
@click.option("--date", "date_str", help="Entry date (default: today)")
@click.option("--notes", help="Optional notes")
@click.pass_context
def add_feed(
    ctx,
    feed_type: str,
    quantity: str,
    cost: str | None,
    vendor: str | None,
    date_str: str | None,
    notes: str | None,
):
    """Record a feed movement.

    A purchase with a vendor and a cost also books a Purchase transaction
    on the vendor's ledger.

    Examples:
        eggflow feed add Purchase --quantity 500 --cost 42000 --vendor "Feed Mills Ltd"
        eggflow feed add Consume --quantity 48
    """
    store = ctx.obj["store"]
    entry_date = parse_date_or_exit(ctx, date_str)
    vendor_id = resolve_account_or_exit(ctx, AccountService(store), vendor) if vendor else None

    try:
        quantity_value = parse_amount(quantity)
        cost_value = parse_amount(cost) if cost is not None else None
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        entry, ledger_entry = FeedService(store).record_feed(
            date=entry_date,
            feed_type=FeedTransactionType(feed_type.title()),
            quantity=quantity_value,
            cost=cost_value,
            vendor_id=vendor_id,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Recorded feed {entry.type.value.lower()} of {format_quantity(entry.quantity)}kg "
        f"on {entry.date} (ID: {entry.id})"
    )
    if ledger_entry is not None:
        click.echo(
            f"Booked purchase of {format_money(ledger_entry.amount, store.settings.currency)} "
            f"to vendor ledger (ID: {ledger_entry.id})"
        )


@feed_group.command("list")
@click.option("--limit", type=int, default=20, show_default=True, help="Number of entries to show")
@click.pass_context
def list_feed(ctx, limit: int):
    """List feed entries, most recent entries first."""
    store = ctx.obj["store"]
    entries = FeedService(store).list_feed()[:limit]
    if not entries:
        click.echo("No feed entries found.")
        return

    account_service = AccountService(store)
    currency = store.settings.currency
    click.echo(f"\n{'Date':<12} {'ID':<10} {'Type':<9} {'Qty (kg)':>10} {'Cost':>14}  Vendor")
    click.echo("-" * 80)
    for entry in entries:
        cost = format_money(entry.cost, currency) if entry.cost is not None else "-"
        vendor = account_service.display_name(entry.vendor_id) if entry.vendor_id else ""
        click.echo(
            f"{entry.date!s:<12} {entry.id:<10} {entry.type.value:<9} "
            f"{format_quantity(entry.quantity):>10} {cost:>14}  {vendor}"
        )


@feed_group.command("stock")
@click.pass_context
def feed_stock(ctx):
    """Show feed currently in stock."""
    on_hand = InventoryService(ctx.obj["store"]).current_feed_inventory()
    click.echo(f"Feed in stock: {format_quantity(on_hand)}kg")


@feed_group.command("delete")
@click.argument("feed_id")
@click.pass_context
def delete_feed(ctx, feed_id: str):
    """Delete a feed entry.

    A purchase transaction booked to a vendor is not removed; delete it
    separately with 'transaction delete' if needed.
    """
    try:
        FeedService(ctx.obj["store"]).delete_feed(feed_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted feed entry {feed_id}")


def register_commands(cli):
    """Register feed commands with main CLI."""
    cli.add_command(feed_group, name="feed")
