"""Sales invoice commands."""

import click
from eggflow.cli.account_resolution import resolve_account_or_exit
from eggflow.cli.date_filters import parse_date_or_exit
from eggflow.cli.error_handling import handle_domain_error
from eggflow.cli.formatting import format_money, format_quantity
from eggflow.domain.account import AccountService
from eggflow.domain.entities import TransactionType
from eggflow.domain.transaction import TransactionService
from eggflow.utils.amount_parser import parse_amount, parse_item


@click.group()
def invoice_group():
    """Create and list itemized invoices."""
    pass


@invoice_group.command("create")
@click.option("--account", required=True, help="Customer name or ID")
@click.option(
    "--item", "items", multiple=True, required=True,
    help="Line item as DESCRIPTION:QUANTITY:UNIT_PRICE (repeatable)",
)
@click.option("--amount", help="Expected invoice total; must match the items")
@click.option("--purchase", is_flag=True, help="Record a vendor purchase invoice instead of a sale")
@click.option("--date", "date_str", help="Invoice date (default: today)")
@click.option("--notes", help="Optional notes")
@click.pass_context
def create_invoice(
    ctx,
    account: str,
    items: tuple[str, ...],
    amount: str | None,
    purchase: bool,
    date_str: str | None,
    notes: str | None,
):
    """Create an invoice from one or more line items.

    The invoice amount is the sum of quantity x unit price over the items.

    Examples:
        eggflow invoice create --account "Ali Traders" --item "Eggs:360:25"
        eggflow invoice create --account "Ali Traders" --item "Tray A:30:28" --item "Tray B:30:26"
    """
    store = ctx.obj["store"]
    account_id = resolve_account_or_exit(ctx, AccountService(store), account)
    invoice_date = parse_date_or_exit(ctx, date_str)

    try:
        item_specs = [parse_item(item) for item in items]
        expected = parse_amount(amount) if amount is not None else None
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        txn = TransactionService(store).create_invoice(
            account_id=account_id,
            date=invoice_date,
            items=item_specs,
            amount=expected,
            transaction_type=TransactionType.PURCHASE if purchase else TransactionType.SALE,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    currency = store.settings.currency
    click.echo(f"Created invoice {txn.id} for {format_money(txn.amount, currency)}")
    for item in txn.items:
        click.echo(
            f"  {item.description}: {format_quantity(item.quantity)} x "
            f"{format_money(item.unit_price, currency)} = {format_money(item.total, currency)}"
        )


@invoice_group.command("list")
@click.pass_context
def list_invoices(ctx):
    """List invoices, newest first."""
    store = ctx.obj["store"]
    account_service = AccountService(store)
    invoices = TransactionService(store).list_invoices()
    if not invoices:
        click.echo("No invoices found.")
        return

    currency = store.settings.currency
    click.echo(f"\n{'Date':<12} {'ID':<10} {'Account':<22} {'Type':<9} {'Qty':>8} {'Amount':>15}")
    click.echo("-" * 80)
    for txn in invoices:
        name = account_service.display_name(txn.account_id)
        click.echo(
            f"{txn.date!s:<12} {txn.id:<10} {name[:22]:<22} {txn.type.value:<9} "
            f"{format_quantity(txn.item_quantity):>8} {format_money(txn.amount, currency):>15}"
        )


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoice_group, name="invoice")
