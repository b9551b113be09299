"""Transaction management commands."""

import click
from eggflow.cli.account_resolution import resolve_account_or_exit
from eggflow.cli.date_filters import date_range_options, parse_date_or_exit, resolve_cli_date_range
from eggflow.cli.error_handling import handle_domain_error
from eggflow.cli.formatting import format_money
from eggflow.domain.account import AccountService
from eggflow.domain.entities import TransactionType
from eggflow.domain.polarity import is_debit
from eggflow.domain.transaction import TransactionService
from eggflow.utils.amount_parser import parse_amount

TRANSACTION_TYPES = [t.value for t in TransactionType]


@click.group()
def transaction_group():
    """Record and list ledger transactions."""
    pass


@transaction_group.command("add")
@click.option("--account", required=True, help="Account name or ID")
@click.option(
    "--type", "transaction_type", required=True,
    type=click.Choice(TRANSACTION_TYPES, case_sensitive=False), help="Transaction type",
)
@click.option("--amount", required=True, help="Transaction amount")
@click.option("--date", "date_str", help="Transaction date (default: today)")
@click.option("--notes", help="Optional notes")
@click.pass_context
def add_transaction(
    ctx,
    account: str,
    transaction_type: str,
    amount: str,
    date_str: str | None,
    notes: str | None,
):
    """Record a transaction against an account.

    Examples:
        eggflow transaction add --account "Ali Traders" --type Receipt --amount 5000
        eggflow transaction add --account "WAPDA" --type Expense --amount 3200 --date yesterday
    """
    store = ctx.obj["store"]
    account_id = resolve_account_or_exit(ctx, AccountService(store), account)
    txn_date = parse_date_or_exit(ctx, date_str)

    try:
        amount_value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount: {e}", err=True)
        ctx.exit(1)

    try:
        txn = TransactionService(store).create_transaction(
            account_id=account_id,
            date=txn_date,
            transaction_type=TransactionType(transaction_type.title()),
            amount=amount_value,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(
        f"Recorded {txn.type.value} of {format_money(txn.amount, store.settings.currency)} "
        f"on {txn.date} (ID: {txn.id})"
    )


@transaction_group.command("list")
@click.option("--account", help="Filter by account name or ID")
@click.option(
    "--type", "transaction_types", multiple=True,
    type=click.Choice(TRANSACTION_TYPES, case_sensitive=False), help="Filter by type (repeatable)",
)
@date_range_options
@click.pass_context
def list_transactions(
    ctx,
    account: str | None,
    transaction_types: tuple[str, ...],
    start_date: str | None,
    end_date: str | None,
    periods: tuple[str, ...],
):
    """List transactions, oldest first."""
    store = ctx.obj["store"]
    account_service = AccountService(store)

    start = end = None
    if start_date or end_date or periods:
        start, end = resolve_cli_date_range(
            ctx, start_date=start_date, end_date=end_date, periods=periods
        )
    account_id = resolve_account_or_exit(ctx, account_service, account) if account else None

    transactions = TransactionService(store).list_transactions(
        start_date=start,
        end_date=end,
        account_id=account_id,
        transaction_types=[TransactionType(t.title()) for t in transaction_types] or None,
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    currency = store.settings.currency
    click.echo(f"\n{'Date':<12} {'ID':<10} {'Account':<22} {'Type':<11} {'Amount':>15}  Notes")
    click.echo("-" * 90)
    for txn in transactions:
        name = account_service.display_name(txn.account_id)
        amount = format_money(txn.amount, currency)
        click.echo(
            f"{txn.date!s:<12} {txn.id:<10} {name[:22]:<22} {txn.type.value:<11} {amount:>15}  {txn.notes or ''}"
        )


@transaction_group.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str):
    """Show a transaction with its line items."""
    store = ctx.obj["store"]
    txn = TransactionService(store).get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    currency = store.settings.currency
    side = "Debit" if is_debit(txn.type) else "Credit"
    click.echo(f"Transaction {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Account: {AccountService(store).display_name(txn.account_id)}")
    click.echo(f"  Type: {txn.type.value} ({side})")
    click.echo(f"  Amount: {format_money(txn.amount, currency)}")
    if txn.notes:
        click.echo(f"  Notes: {txn.notes}")
    for item in txn.items:
        click.echo(
            f"    {item.description}: {item.quantity} x {format_money(item.unit_price, currency)}"
            f" = {format_money(item.total, currency)}"
        )


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool):
    """Delete a transaction."""
    service = TransactionService(ctx.obj["store"])
    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Delete {txn.type.value} transaction {txn.id} on {txn.date}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
