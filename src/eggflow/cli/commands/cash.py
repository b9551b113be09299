"""Cash in hand commands."""

import click
from eggflow.cli.account_resolution import resolve_account_or_exit
from eggflow.cli.date_filters import parse_date_or_exit
from eggflow.cli.error_handling import handle_domain_error
from eggflow.cli.formatting import format_money
from eggflow.domain.account import AccountService
from eggflow.domain.cashflow import CashFlowService
from eggflow.domain.transaction import TransactionService
from eggflow.utils.amount_parser import parse_amount


@click.group()
def cash_group():
    """Owner deposits, withdrawals and cash in hand."""
    pass


def _record_movement(ctx, account: str, amount: str, date_str: str | None, notes: str | None, deposit: bool):
    store = ctx.obj["store"]
    account_id = resolve_account_or_exit(ctx, AccountService(store), account)
    on = parse_date_or_exit(ctx, date_str)
    try:
        amount_value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount: {e}", err=True)
        ctx.exit(1)

    try:
        txn = TransactionService(store).record_cash_movement(
            account_id=account_id, amount=amount_value, deposit=deposit, notes=notes, on=on
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    currency = store.settings.currency
    click.echo(f"Recorded {txn.type.value.lower()} of {format_money(txn.amount, currency)} (ID: {txn.id})")
    click.echo(f"Cash in hand: {format_money(CashFlowService(store).cash_in_hand(), currency)}")


@cash_group.command("deposit")
@click.option("--account", required=True, help="Account the cash comes from (name or ID)")
@click.option("--amount", required=True, help="Amount deposited")
@click.option("--date", "date_str", help="Date (default: today)")
@click.option("--notes", help="Notes (default: 'Manual Deposit')")
@click.pass_context
def deposit(ctx, account: str, amount: str, date_str: str | None, notes: str | None):
    """Put money into cash in hand."""
    _record_movement(ctx, account, amount, date_str, notes, deposit=True)


@cash_group.command("withdraw")
@click.option("--account", required=True, help="Account the cash goes to (name or ID)")
@click.option("--amount", required=True, help="Amount withdrawn")
@click.option("--date", "date_str", help="Date (default: today)")
@click.option("--notes", help="Notes (default: 'Manual Withdrawal')")
@click.pass_context
def withdraw(ctx, account: str, amount: str, date_str: str | None, notes: str | None):
    """Take money out of cash in hand."""
    _record_movement(ctx, account, amount, date_str, notes, deposit=False)


@cash_group.command("balance")
@click.pass_context
def balance(ctx):
    """Show current cash in hand."""
    store = ctx.obj["store"]
    click.echo(f"Cash in hand: {format_money(CashFlowService(store).cash_in_hand(), store.settings.currency)}")


@cash_group.command("history")
@click.option("--limit", type=int, default=20, show_default=True, help="Number of entries to show")
@click.pass_context
def history(ctx, limit: int):
    """List deposits and withdrawals, newest first."""
    store = ctx.obj["store"]
    movements = CashFlowService(store).cash_history()[:limit]
    if not movements:
        click.echo("No deposits or withdrawals found.")
        return

    account_service = AccountService(store)
    currency = store.settings.currency
    click.echo(f"\n{'Date':<12} {'Type':<11} {'Account':<22} {'Amount':>15}  Notes")
    click.echo("-" * 80)
    for txn in movements:
        click.echo(
            f"{txn.date!s:<12} {txn.type.value:<11} {account_service.display_name(txn.account_id)[:22]:<22} "
            f"{format_money(txn.amount, currency):>15}  {txn.notes or ''}"
        )


def register_commands(cli):
    """Register cash commands with main CLI."""
    cli.add_command(cash_group, name="cash")
